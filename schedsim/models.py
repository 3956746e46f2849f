from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class TimeSlice:
    """
    One contiguous span of CPU occupancy for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class ResultRow:
    pid: int
    priority: int
    remaining_burst: int
    arrival_time: int
    burst_time: int
    start_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int
    response_time: int


@dataclass
class ScheduleSummary:
    avg_waiting: float
    avg_turnaround: float
    throughput: float
    cpu_busy_time: int
    makespan: int
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    title: str
    quantum: Optional[int]
    rows: List[ResultRow] = field(default_factory=list)
    timeline: List[TimeSlice] = field(default_factory=list)
    summary: Optional[ScheduleSummary] = None

    def row_for(self, pid: int) -> ResultRow:
        for row in self.rows:
            if row.pid == pid:
                return row
        raise KeyError(pid)
