# test_cli.py
import pytest

import dijkstra
import kosaraju
import kruskal
import prim
import testcase_generator as tg

UNDIRECTED = "3 2\n1 2 1\n2 3 1\n"
DIRECTED = "3 2\n1 2\n2 3\n"


@pytest.fixture
def graph_file(tmp_path):
    def write(text, name="graph.txt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return write


def test_dijkstra_stdout(graph_file, capsys):
    assert dijkstra.main(["-f", graph_file(UNDIRECTED), "-i", "1"]) == 0
    assert capsys.readouterr().out == "1:0 2:1 3:2\n"


def test_dijkstra_sorted_queue_and_ignored_s(graph_file, capsys):
    assert dijkstra.main(["-f", graph_file(UNDIRECTED), "-i", "3", "-s", "--queue", "sorted"]) == 0
    assert capsys.readouterr().out == "1:2 2:1 3:0\n"


def test_kruskal_cost_and_solution(graph_file, capsys):
    path = graph_file(UNDIRECTED)
    assert kruskal.main(["-f", path]) == 0
    assert capsys.readouterr().out == "2\n"
    assert kruskal.main(["-f", path, "-s", "-i", "whatever"]) == 0
    assert capsys.readouterr().out == "(1,2) (2,3)\n"


def test_prim_cost_then_edges(graph_file, capsys):
    path = graph_file(UNDIRECTED)
    assert prim.main(["-f", path, "-i", "1"]) == 0
    assert capsys.readouterr().out == "2\n"
    assert prim.main(["-f", path, "-i", "1", "-s"]) == 0
    assert capsys.readouterr().out == "2\n(1,2) (2,3)\n"


def test_kosaraju_one_line_per_component(graph_file, capsys):
    assert kosaraju.main(["-f", graph_file(DIRECTED)]) == 0
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_output_file(graph_file, tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert kruskal.main(["-f", graph_file(UNDIRECTED), "-o", str(out)]) == 0
    assert out.read_text() == "2\n"
    assert capsys.readouterr().out == ""


def test_unwritable_output_falls_back_to_stdout(graph_file, tmp_path, capsys):
    bad = str(tmp_path / "missing-dir" / "out.txt")
    assert prim.main(["-f", graph_file(UNDIRECTED), "-i", "2", "-o", bad]) == 0
    captured = capsys.readouterr()
    assert captured.out == "2\n"
    assert "Warning" in captured.err


@pytest.mark.parametrize("module, argv", [
    (dijkstra, ["-i", "1"]),
    (dijkstra, ["-f", "g.txt"]),
    (prim, ["-f", "g.txt"]),
    (kosaraju, []),
    (kruskal, ["-s"]),
    (prim, ["-f", "g.txt", "-i", "one"]),
])
def test_usage_errors_exit_1(module, argv, capsys):
    with pytest.raises(SystemExit) as exc:
        module.main(argv)
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "Error" in err and "usage:" in err


def test_help_exits_0(capsys):
    with pytest.raises(SystemExit) as exc:
        kruskal.main(["-h"])
    assert exc.value.code == 0
    assert "-s" in capsys.readouterr().out


def test_missing_input_file(tmp_path, capsys):
    assert kosaraju.main(["-f", str(tmp_path / "nope.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not open input file" in captured.err


def test_truncated_input_produces_no_output(graph_file, tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert dijkstra.main(["-f", graph_file("3 2\n1 2 1\n"), "-i", "1", "-o", str(out)]) == 1
    assert not out.exists()
    assert "edge 2" in capsys.readouterr().err


def test_start_vertex_out_of_range(graph_file, capsys):
    assert prim.main(["-f", graph_file(UNDIRECTED), "-i", "9"]) == 1
    assert "outside the range" in capsys.readouterr().err


def test_generated_file_round_trip(tmp_path, capsys):
    path = str(tmp_path / "gen.txt")
    assert tg.main(["-n", "25", "--seed", "1", "-o", path]) == 0
    assert kruskal.main(["-f", path]) == 0
    k_cost = capsys.readouterr().out
    assert prim.main(["-f", path, "-i", "7"]) == 0
    assert capsys.readouterr().out == k_cost

    assert tg.main(["-n", "10", "--directed", "--seed", "2", "-o", path]) == 0
    assert kosaraju.main(["-f", path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(int(v) for line in lines for v in line.split()) == list(range(1, 11))
