import matplotlib
import pytest

from digraph import Digraph


def pytest_sessionstart(session):  # noqa: D401
    matplotlib.use("Agg")


@pytest.fixture
def abcd():
    """A->B (1), B->C (2), A->C (5), C->D (1) with keys 1..4."""
    return Digraph.from_edges(
        [(1, "A"), (2, "B"), (3, "C"), (4, "D")],
        [(1, 2, 1.0), (2, 3, 2.0), (1, 3, 5.0), (3, 4, 1.0)],
    )


@pytest.fixture
def triangle():
    return Digraph.from_edges(
        [(1, "one"), (2, "two"), (3, "three")],
        [(1, 2, "a"), (2, 3, "b"), (3, 1, "c")],
    )
