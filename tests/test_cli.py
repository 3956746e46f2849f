from pathlib import Path

from schedsim.cli import main


def _workload(tmp_path: Path) -> Path:
    p = tmp_path / "w.csv"
    p.write_text("1,5,0,1\n2,3,2,1\n")
    return p


def test_reports_every_algorithm(tmp_path: Path, capsys):
    assert main([str(_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    for title in [
        "First-come, first-serve",
        "Shortest-job-first (SJF)",
        "SJF with Priority scheduling",
        "Round-robin scheduling",
    ]:
        assert title in out
    assert "0.25/t" in out
    assert "1.50" in out


def test_plain_gantt_for_one_algorithm(tmp_path: Path, capsys):
    assert main([str(_workload(tmp_path)), "--plain", "-a", "fcfs"]) == 0
    out = capsys.readouterr().out
    assert "Gantt schedule" in out
    assert "Round-robin scheduling" not in out


def test_compare(tmp_path: Path, capsys):
    assert main([str(_workload(tmp_path)), "--compare"]) == 0
    assert "Algorithm comparison" in capsys.readouterr().out


def test_missing_argument_exits_1(capsys):
    assert main([]) == 1
    assert "invalid arguments" in capsys.readouterr().err


def test_unknown_algorithm_exits_1(tmp_path: Path, capsys):
    assert main([str(_workload(tmp_path)), "-a", "lottery"]) == 1
    assert "invalid arguments" in capsys.readouterr().err


def test_missing_file_exits_1_without_output(tmp_path: Path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "file access" in captured.err


def test_bad_record_aborts_every_report(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0,1\n2,three,2,1\n")
    assert main([str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "malformed record" in captured.err


def test_bad_quantum_exits_1(tmp_path: Path, capsys):
    assert main([str(_workload(tmp_path)), "-q", "0"]) == 1
    assert capsys.readouterr().out == ""
