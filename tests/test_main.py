"""
CLI driver and profiling helpers.
"""

import pytest

from main import main, save_topk
from pagerank import PageRankResult
from profiling import MemoryMonitor, experiment


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("4\n0 1 1 2\n2 0 2 3\n")
    return path


def test_main_runs_all_engines(graph_file, tmp_path, capsys):
    out_file = tmp_path / "Res.txt"
    code = main([
        "--input", str(graph_file),
        "--surfer-iterations", "2000",
        "--top-k", "3",
        "--seed", "1",
        "--output", str(out_file),
    ])
    assert code == 0

    out = capsys.readouterr().out
    assert "Total nodes: 4, edges: 4" in out
    assert "RandomSurfer top 3 rankings after 2000 iterations" in out
    assert "PageRank top 3 rankings after 100 iterations" in out
    assert "Google matrix PageRank top 3 rankings" in out
    assert "Rank: 1 - Node: 2" in out
    assert "Peak memory:" in out

    lines = out_file.read_text().splitlines()
    assert len(lines) == 3
    assert lines[0].split()[0] == "2"


def test_main_pagerank_only_sparse(graph_file, capsys):
    assert main(["--input", str(graph_file), "--engine", "pagerank", "--sparse"]) == 0
    out = capsys.readouterr().out
    assert "RandomSurfer" not in out
    assert "PageRank top 4 rankings" in out


def test_main_edge_list_format(tmp_path, capsys):
    path = tmp_path / "edges.txt"
    path.write_text("0 1\n1 0\n")
    assert main(["--input", str(path), "--format", "edges", "--engine", "surfer",
                 "--surfer-iterations", "100", "--seed", "0"]) == 0
    assert "RandomSurfer top 2 rankings after 100 iterations" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to load graph" in capsys.readouterr().err


def test_main_malformed_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3\n0 1 2\n")
    assert main(["--input", str(path)]) == 1
    assert "odd number of fields" in capsys.readouterr().err


def test_save_topk(tmp_path):
    path = tmp_path / "Res.txt"
    save_topk([PageRankResult(1, 7, 0.5), PageRankResult(2, 3, 0.25)], path)
    assert path.read_text() == "7 0.5000000000\n3 0.2500000000\n"


def test_memory_monitor_records_peak():
    monitor = MemoryMonitor(interval=0.001)
    monitor.start()
    data = [0] * 100_000
    monitor.stop()
    monitor.join()
    assert monitor.peak > 0
    del data


def test_experiment_decorator():
    @experiment("square")
    def square(x):
        return x * x

    stats = square(4)
    assert stats["name"] == "square"
    assert stats["result"] == 16
    assert stats["time"] >= 0
    assert stats["memory"] >= 0


def test_main_reports_engine_stats(graph_file, capsys):
    assert main(["--input", str(graph_file), "--engine", "surfer", "--surfer-iterations", "100", "--seed", "0"]) == 0
    out = capsys.readouterr().out
    assert "RandomSurfer computed in" in out
    assert "MB" in out


@pytest.mark.parametrize(
    "extra",
    [
        ["--damping", "1.5"],
        ["--damping", "-0.2"],
        ["--surfer-iterations", "-1"],
        ["--pagerank-iterations", "-5"],
        ["--top-k", "-1"],
    ],
)
def test_main_rejects_bad_arguments(graph_file, capsys, extra):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(graph_file)] + extra)
    assert exc.value.code == 2
    assert "must be" in capsys.readouterr().err


def test_main_output_needs_pagerank_engine(graph_file, tmp_path, capsys):
    out_file = tmp_path / "Res.txt"
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(graph_file), "--engine", "surfer", "--output", str(out_file)])
    assert exc.value.code == 2
    assert "--output needs a PageRank engine" in capsys.readouterr().err
    assert not out_file.exists()


def test_main_google_only_writes_output(graph_file, tmp_path):
    out_file = tmp_path / "Res.txt"
    assert main(["--input", str(graph_file), "--engine", "google", "--top-k", "2", "--output", str(out_file)]) == 0
    assert len(out_file.read_text().splitlines()) == 2
