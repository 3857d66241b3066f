from klbisect.solver import cli


def test_default_graph(capsys):
    assert cli([]) == 0

    out = capsys.readouterr().out
    assert out == "Group A: BD\nGroup B: AC\nCut cost: 5\n"


def test_show_time(capsys):
    assert cli(["graph.txt", "--show-time"]) == 0

    assert "Took " in capsys.readouterr().out


def test_verbose(capsys):
    assert cli(["graph.txt", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert "Bisecting graph: graph" in out
    assert "Swap 1: A <-> D" in out


def test_odd_graph(tmp_path, capsys):
    path = tmp_path / "odd.txt"
    path.write_text("vertices: ABC\nedges: AB(1)\n")

    assert cli([str(path)]) == 1
    assert "odd vertex count" in capsys.readouterr().err


def test_missing_graph(capsys):
    assert cli(["does_not_exist.txt"]) == 1
    assert "Could not find graph path" in capsys.readouterr().err
