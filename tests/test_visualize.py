import pytest
from matplotlib.figure import Figure

from digraph import ConfigError
from digraph.visualize import draw_digraph


def test_draw_returns_figure(abcd):
    preds = abcd.find_shortest_paths(1, float)
    fig = draw_digraph(abcd, predecessors=preds, source=1, edge_label=float)
    assert isinstance(fig, Figure)
    assert fig.axes[0].get_title() == "Directed Graph"


def test_draw_rejects_unknown_layout(abcd):
    with pytest.raises(ConfigError):
        draw_digraph(abcd, layout="hexagonal")
