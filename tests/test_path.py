import pytest

from digraph import reconstruct_path


def test_walks_back_to_start():
    preds = {1: 1, 2: 1, 3: 2, 4: 3}
    assert reconstruct_path(preds, 1, 4) == [1, 2, 3, 4]
    assert reconstruct_path(preds, 1, 2) == [1, 2]


def test_start_is_its_own_path():
    assert reconstruct_path({1: 1}, 1, 1) == [1]


def test_unreached_target_gives_empty_path():
    assert reconstruct_path({1: 1, 2: 2, 3: 2}, 1, 3) == []


def test_cycle_in_map_is_detected():
    assert reconstruct_path({1: 1, 2: 3, 3: 2}, 1, 2) == []


def test_missing_keys_raise():
    with pytest.raises(KeyError):
        reconstruct_path({1: 1}, 1, 2)
    with pytest.raises(KeyError):
        reconstruct_path({1: 1}, 5, 1)
