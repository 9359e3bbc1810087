import copy

import pytest

from digraph import (
    Digraph,
    DigraphError,
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    VertexAlreadyExistsError,
    VertexNotFoundError,
)


def _snapshot(g):
    return (
        g.vertices(),
        sorted(g.edges()),
        g.vertex_count(),
        g.edge_count(),
        {v: g.vertex_info(v) for v in g.vertices()},
    )


def test_empty_graph():
    g = Digraph()
    assert g.vertices() == []
    assert g.edges() == []
    assert g.vertex_count() == 0
    assert g.edge_count() == 0
    assert len(g) == 0


def test_add_vertices_and_edges(abcd):
    assert abcd.vertices() == [1, 2, 3, 4]
    assert sorted(abcd.edges()) == [(1, 2), (1, 3), (2, 3), (3, 4)]
    assert abcd.edges(1) == [(1, 2), (1, 3)]
    assert abcd.edges(4) == []
    assert abcd.vertex_info(3) == "C"
    assert abcd.edge_info(1, 3) == 5.0
    assert abcd.vertex_count() == 4
    assert abcd.edge_count() == 4
    assert abcd.edge_count(1) == 2
    assert abcd.edge_count(4) == 0
    assert 2 in abcd and 9 not in abcd
    assert list(abcd) == [1, 2, 3, 4]


def test_keys_need_not_be_contiguous():
    g = Digraph()
    g.add_vertex(-7, None)
    g.add_vertex(1000, None)
    g.add_edge(1000, -7, "x")
    assert g.edges() == [(1000, -7)]
    assert g.predecessors(-7) == [1000]


def test_vertex_lookups_fail_for_missing_vertex(abcd):
    with pytest.raises(VertexNotFoundError) as exc:
        abcd.vertex_info(9)
    assert exc.value.vertex == 9
    with pytest.raises(VertexNotFoundError):
        abcd.edges(9)
    with pytest.raises(VertexNotFoundError):
        abcd.edge_count(9)
    with pytest.raises(VertexNotFoundError):
        abcd.successors(9)


def test_edge_info_distinguishes_missing_vertex_from_missing_edge(abcd):
    with pytest.raises(VertexNotFoundError):
        abcd.edge_info(1, 9)
    with pytest.raises(VertexNotFoundError):
        abcd.edge_info(9, 1)
    with pytest.raises(EdgeNotFoundError) as exc:
        abcd.edge_info(4, 1)
    assert (exc.value.source, exc.value.target) == (4, 1)


def test_errors_share_a_base_and_builtin_types():
    assert issubclass(VertexNotFoundError, DigraphError)
    assert issubclass(VertexNotFoundError, KeyError)
    assert issubclass(EdgeAlreadyExistsError, ValueError)
    assert str(VertexNotFoundError(3)) == "vertex 3 does not exist"
    assert str(EdgeNotFoundError(1, 2)) == "edge (1, 2) does not exist"


def test_duplicate_vertex_rejected_without_mutation(abcd):
    before = _snapshot(abcd)
    with pytest.raises(VertexAlreadyExistsError):
        abcd.add_vertex(2, "other")
    assert _snapshot(abcd) == before
    assert abcd.vertex_info(2) == "B"


def test_duplicate_edge_rejected_without_mutation(abcd):
    before = _snapshot(abcd)
    with pytest.raises(EdgeAlreadyExistsError):
        abcd.add_edge(1, 2, 99.0)
    assert _snapshot(abcd) == before
    assert abcd.edge_info(1, 2) == 1.0


def test_add_edge_with_missing_endpoint_rejected(abcd):
    before = _snapshot(abcd)
    with pytest.raises(VertexNotFoundError):
        abcd.add_edge(1, 9, 1.0)
    with pytest.raises(VertexNotFoundError):
        abcd.add_edge(9, 1, 1.0)
    assert _snapshot(abcd) == before


def test_self_loop_is_an_ordinary_edge():
    g = Digraph.from_edges([(1, None)], [(1, 1, "loop")])
    assert g.edges() == [(1, 1)]
    assert g.edge_count() == 1
    g.remove_vertex(1)
    assert g.edge_count() == 0
    assert g.vertices() == []


def test_remove_edge(abcd):
    abcd.remove_edge(1, 3)
    assert (1, 3) not in abcd.edges()
    assert abcd.edge_count() == 3
    assert not abcd.has_edge(1, 3)
    with pytest.raises(EdgeNotFoundError):
        abcd.remove_edge(1, 3)
    with pytest.raises(VertexNotFoundError):
        abcd.remove_edge(1, 9)
    assert abcd.edge_count() == 3


def test_remove_vertex_removes_incident_edges_both_directions(abcd):
    abcd.remove_vertex(3)
    assert abcd.vertices() == [1, 2, 4]
    assert abcd.edges() == [(1, 2)]
    assert abcd.edge_count() == 1
    for u, v in abcd.edges():
        assert 3 not in (u, v)
    with pytest.raises(VertexNotFoundError):
        abcd.remove_vertex(3)
    # the key can be reused afterwards
    abcd.add_vertex(3, "again")
    assert abcd.edges(3) == []
    assert abcd.predecessors(3) == []


def test_cardinality_invariant_over_mixed_mutations():
    g = Digraph()
    for v in range(6):
        g.add_vertex(v, v * 10)
    for u in range(6):
        for v in range(6):
            if (u + v) % 3 == 0:
                g.add_edge(u, v, (u, v))
    g.remove_vertex(0)
    g.remove_edge(1, 2)
    g.remove_vertex(4)
    g.add_vertex(7, 70)
    g.add_edge(7, 5, "x")
    assert g.vertex_count() == 5
    assert g.edge_count() == sum(g.edge_count(v) for v in g.vertices())
    assert g.edge_count() == len(g.edges())


def test_copy_is_equal_and_independent(abcd):
    dup = abcd.copy()
    assert dup == abcd
    assert dup is not abcd

    dup.add_vertex(5, "E")
    dup.add_edge(4, 5, 2.0)
    dup.remove_edge(1, 2)
    assert abcd.vertices() == [1, 2, 3, 4]
    assert abcd.has_edge(1, 2)
    assert not abcd.has_edge(4, 5)
    assert dup != abcd


def test_copy_deep_copies_payloads():
    g = Digraph.from_edges([(1, {"tags": []}), (2, {})], [(1, 2, [1.0])])
    dup = copy.deepcopy(g)
    dup.vertex_info(1)["tags"].append("x")
    dup.edge_info(1, 2).append(2.0)
    assert g.vertex_info(1) == {"tags": []}
    assert g.edge_info(1, 2) == [1.0]
    assert copy.copy(g) == g


class _Exploding:
    def __deepcopy__(self, memo):
        raise MemoryError("out of memory")


def test_failed_assign_leaves_target_untouched(abcd):
    src = Digraph.from_edges([(1, "fine"), (2, _Exploding())])
    before = _snapshot(abcd)
    with pytest.raises(MemoryError):
        abcd.assign(src)
    assert _snapshot(abcd) == before


def test_assign_replaces_contents(abcd, triangle):
    abcd.assign(triangle)
    assert abcd == triangle
    abcd.remove_vertex(1)
    assert triangle.vertex_count() == 3
    triangle.assign(triangle)
    assert triangle.vertex_count() == 3


def test_take_moves_contents_and_leaves_source_empty(abcd):
    expected = abcd.copy()
    moved = abcd.take()
    assert moved == expected
    assert abcd.vertex_count() == 0
    assert abcd.edge_count() == 0
    abcd.add_vertex(1, "fresh")
    assert moved.vertex_info(1) == "A"


def test_equality_ignores_edge_insertion_order():
    a = Digraph.from_edges([(1, None), (2, None), (3, None)], [(1, 2, 1), (1, 3, 2)])
    b = Digraph.from_edges([(1, None), (2, None), (3, None)], [(1, 3, 2), (1, 2, 1)])
    assert a == b
    b.remove_edge(1, 3)
    b.add_edge(1, 3, 7)
    assert a != b


def test_repr_and_clear(abcd):
    assert repr(abcd) == "Digraph(vertices=4, edges=4)"
    abcd.clear()
    assert abcd.vertex_count() == 0 and abcd.edge_count() == 0


@pytest.mark.parametrize("make_copy", [Digraph.copy, copy.deepcopy])
def test_shared_payloads_stay_shared_in_copy(make_copy):
    shared = {"lanes": 2}
    g = Digraph.from_edges([(1, shared), (2, None)], [(1, 2, shared)])
    dup = make_copy(g)
    assert dup.vertex_info(1) is dup.edge_info(1, 2)
    assert dup.vertex_info(1) is not shared


def test_assign_keeps_shared_payloads_shared():
    shared = [1.0]
    src = Digraph.from_edges([(1, None), (2, None), (3, None)], [(1, 2, shared), (2, 3, shared)])
    dst = Digraph()
    dst.assign(src)
    assert dst.edge_info(1, 2) is dst.edge_info(2, 3)
    assert dst.edge_info(1, 2) is not shared
