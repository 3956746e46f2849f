from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from rich.panel import Panel
from rich.text import Text

from .models import TimeSlice

# (label, width, end time); label is None for an idle gap
Segment = Tuple[Optional[str], int, int]

COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def _layout(slices: List[TimeSlice], scale: int) -> List[Segment]:
    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))

    segments: List[Segment] = []
    last_time = 0
    for sl in slices:
        idle_gap = sl.start_time - last_time
        if idle_gap > 0:
            segments.append((None, idle_gap * scale, sl.start_time))

        label = str(sl.pid)
        width = max(len(label) + 2, sl.duration * scale)
        segments.append((label, width, sl.end_time))
        last_time = sl.end_time

    return segments


def _time_marks(segments: List[Segment]) -> str:
    """
    Place each boundary time under the ``|`` that closes its segment.
    """
    marks = "0"
    column = 0
    for _, width, end_time in segments:
        column += width + 1
        marks += " " * max(1, column - len(marks)) + str(end_time)
    return marks


def render_gantt(slices: List[TimeSlice], scale: int = 2) -> str:
    """
    Plain-text Gantt chart, one cell per slice, idle time drawn with dots.
    """
    if not slices:
        return "(no execution)"

    segments = _layout(slices, scale)

    line = "|"
    for label, width, _ in segments:
        line += ("." * width if label is None else label.center(width)) + "|"

    return "\n".join(
        [
            "Gantt schedule",
            line,
            _time_marks(segments),
        ]
    )


def build_rich_gantt(slices: List[TimeSlice], scale: int = 2) -> Panel:
    """
    Build a Rich Panel containing a colored Gantt bar with its time marks.
    """
    if not slices:
        return Panel("No execution", title="Gantt schedule")

    segments = _layout(slices, scale)
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(COLORS)
            pid_to_color[pid] = COLORS[idx]
        return pid_to_color[pid]

    timeline = Text("|")
    for label, width, _ in segments:
        if label is None:
            timeline.append("." * width, style="dim")
        else:
            timeline.append(label.center(width), style=f"bold on {pid_color(label)}")
        timeline.append("|")

    return Panel.fit(Text("\n").join([timeline, Text(_time_marks(segments))]), title="Gantt schedule")
