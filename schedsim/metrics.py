from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import EmptyWorkloadError
from .models import Process, ResultRow, ScheduleSummary, TimeSlice


def finish_row(process: Process, start_time: int, completion_time: int) -> ResultRow:
    """
    Build the final row for a process that completed at ``completion_time``.

    Wait time is the total time spent ready but not running, so it is derived
    from turnaround and the original burst rather than from the first dispatch.
    """
    turnaround_time = completion_time - process.arrival_time
    return ResultRow(
        pid=process.pid,
        priority=process.priority,
        remaining_burst=0,
        arrival_time=process.arrival_time,
        burst_time=process.burst_time,
        start_time=start_time,
        waiting_time=turnaround_time - process.burst_time,
        turnaround_time=turnaround_time,
        completion_time=completion_time,
        response_time=start_time - process.arrival_time,
    )


@dataclass
class MetricsAccumulator:
    total_wait: int = 0
    total_turnaround: int = 0
    last_completion: int = 0
    count: int = 0

    def record(self, row: ResultRow) -> None:
        self.total_wait += row.waiting_time
        self.total_turnaround += row.turnaround_time
        self.last_completion = max(self.last_completion, row.completion_time)
        self.count += 1

    def summarize(self, timeline: List[TimeSlice]) -> ScheduleSummary:
        """
        Reduce the running totals to averages, throughput and CPU utilization.
        """
        if self.count == 0 or self.last_completion <= 0:
            raise EmptyWorkloadError("no completed processes to summarize")

        cpu_busy_time = sum(slice_.duration for slice_ in timeline)
        return ScheduleSummary(
            avg_waiting=self.total_wait / self.count,
            avg_turnaround=self.total_turnaround / self.count,
            throughput=self.count / self.last_completion,
            cpu_busy_time=cpu_busy_time,
            makespan=self.last_completion,
            cpu_utilization=cpu_busy_time / self.last_completion,
        )
