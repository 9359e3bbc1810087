import pytest

from digraph import ConfigError, generate_graph, is_strongly_connected


def test_seed_makes_generation_deterministic():
    a = generate_graph(n=30, m=80, seed=7)
    b = generate_graph(n=30, m=80, seed=7)
    assert a == b
    assert a.edge_count() == 80


def test_weights_are_in_range_and_non_negative():
    g = generate_graph(n=25, m=100, w_min=0, w_max=5, weight_dist="exp", seed=3)
    for u, v in g.edges():
        assert 0.0 <= g.edge_info(u, v) <= 5.0


def test_no_self_loops_by_default():
    g = generate_graph(n=10, m=60, seed=1)
    assert all(u != v for u, v in g.edges())


def test_dag_edges_point_forward():
    g = generate_graph(n=20, m=50, graph_type="dag", seed=2)
    assert all(u < v for u, v in g.edges())
    assert not is_strongly_connected(g)


@pytest.mark.parametrize("graph_type", ["grid", "cycle"])
def test_structured_families_are_strongly_connected(graph_type):
    assert is_strongly_connected(generate_graph(n=17, graph_type=graph_type, seed=4))


def test_edge_target_is_capped_by_possible_edges():
    g = generate_graph(n=4, m=1000, seed=0)
    assert g.edge_count() == 12


def test_empty_graph():
    g = generate_graph(n=0)
    assert g.vertex_count() == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": -1},
        {"n": 5, "m": -2},
        {"n": 5, "w_min": -1},
        {"n": 5, "w_min": 5, "w_max": 1},
        {"n": 5, "graph_type": "torus"},
        {"n": 5, "weight_dist": "pareto"},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ConfigError):
        generate_graph(**kwargs)
