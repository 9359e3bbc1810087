import json

from digraph.cli import main


def test_example_run(capsys):
    assert main(["--example", "--source", "0", "--target", "3"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["vertices"] == 5
    assert out["edges"] == 4
    assert out["strongly_connected"] is False
    assert out["predecessors"] == {"0": 0, "1": 0, "2": 1, "3": 2, "4": 4}
    assert out["distances"]["3"] == 4.0
    assert out["distances"]["4"] is None
    assert out["path"] == [0, 1, 2, 3]


def test_random_run_with_indexed_frontier(capsys):
    assert main(["--random", "--type", "cycle", "--n", "6", "--frontier", "indexed"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["strongly_connected"] is True
    assert out["vertices"] == 6


def test_missing_source_is_an_input_error(capsys):
    assert main(["--example", "--source", "42"]) == 64
    assert "vertex 42 does not exist" in capsys.readouterr().err


def test_bad_generator_parameters(capsys):
    assert main(["--random", "--n", "-3"]) == 64
    assert capsys.readouterr().err.startswith("error:")


def test_json_logging_goes_to_stderr(capsys):
    assert main(["--example", "--log-json", "--log-level", "info"]) == 0
    captured = capsys.readouterr()
    json.loads(captured.out)
    events = [json.loads(line)["event"] for line in captured.err.splitlines()]
    assert events == ["dijkstra.done", "run"]


def test_draw_writes_png(tmp_path, capsys):
    target = tmp_path / "tree.png"
    assert main(["--example", "--draw", str(target)]) == 0
    assert target.stat().st_size > 0


def test_unwritable_draw_path_is_an_internal_error(tmp_path, capsys):
    target = tmp_path / "missing" / "tree.png"
    assert main(["--example", "--draw", str(target)]) == 70
    assert capsys.readouterr().err.startswith("internal error:")


def test_draw_closes_its_figure(tmp_path, capsys):
    import matplotlib.pyplot as plt

    plt.close("all")
    assert main(["--example", "--draw", str(tmp_path / "a.png")]) == 0
    assert main(["--example", "--draw", str(tmp_path / "b.png")]) == 0
    assert plt.get_fignums() == []
