import io

from rich.console import Console

from schedsim.gantt import build_rich_gantt, render_gantt
from schedsim.models import TimeSlice


def test_render_empty():
    assert render_gantt([]) == "(no execution)"


def test_time_marks_line_up_with_boundaries():
    title, line, marks = render_gantt([TimeSlice(1, 0, 5), TimeSlice(2, 5, 8)]).splitlines()
    assert title == "Gantt schedule"
    assert line.count("|") == 3
    assert line[11] == "|" and marks[11] == "5"
    assert line[18] == "|" and marks[18] == "8"
    assert marks.startswith("0")


def test_idle_gap_is_dotted():
    _, line, marks = render_gantt([TimeSlice(4, 2, 3)]).splitlines()
    assert line.startswith("|....|")
    assert marks.split() == ["0", "2", "3"]


def test_rich_gantt_renders_labels():
    console = Console(file=io.StringIO(), width=100, record=True)
    console.print(build_rich_gantt([TimeSlice(1, 0, 2), TimeSlice(12, 2, 3)]))
    text = console.export_text()
    assert "Gantt schedule" in text
    assert "12" in text
