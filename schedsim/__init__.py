"""
CPU scheduling simulator package.

Replays a fixed workload under FCFS, preemptive SJF, preemptive
Priority-SJF and Round-Robin, and reports a Gantt trace with
wait/turnaround/throughput statistics for each.
"""

__all__ = ["algorithms", "cli"]
