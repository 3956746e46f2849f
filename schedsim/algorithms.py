from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import EmptyWorkloadError, InvalidArgumentsError
from .metrics import MetricsAccumulator, finish_row
from .models import Process, ResultRow, ScheduleResult, TimeSlice
from .queues import ArrivalQueue, PriorityReadyQueue, ReadyQueue

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


@dataclass
class _Job:
    """Private working copy of a process; the input record is never touched."""

    index: int
    process: Process
    remaining: int
    start_time: Optional[int] = None

    @classmethod
    def admit(cls, index: int, process: Process) -> "_Job":
        return cls(index=index, process=process, remaining=process.burst_time)


def _require_processes(processes: Sequence[Process]) -> None:
    if not processes:
        raise EmptyWorkloadError("cannot schedule an empty process list")


def _extend_timeline(timeline: List[TimeSlice], pid: int, start: int, end: int) -> None:
    # Consecutive ticks of the same process become one entry.
    if timeline and timeline[-1].pid == pid and timeline[-1].end_time == start:
        timeline[-1] = TimeSlice(pid=pid, start_time=timeline[-1].start_time, end_time=end)
    else:
        timeline.append(TimeSlice(pid=pid, start_time=start, end_time=end))


def _build_result(
    algorithm: str,
    quantum: Optional[int],
    processes: Sequence[Process],
    rows: Dict[int, ResultRow],
    timeline: List[TimeSlice],
) -> ScheduleResult:
    accumulator = MetricsAccumulator()
    ordered = [rows[index] for index in range(len(processes))]
    for row in ordered:
        accumulator.record(row)

    return ScheduleResult(
        algorithm=algorithm,
        title=TITLES[algorithm],
        quantum=quantum,
        rows=ordered,
        timeline=timeline,
        summary=accumulator.summarize(timeline),
    )


def schedule_fcfs(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in the order given; callers pass them sorted by arrival.
    The CPU idles until a process arrives if the previous one finished early.
    """
    _require_processes(processes)

    time = 0
    timeline: List[TimeSlice] = []
    rows: Dict[int, ResultRow] = {}

    for index, p in enumerate(processes):
        start_time = max(time, p.arrival_time)
        end_time = start_time + p.burst_time

        timeline.append(TimeSlice(pid=p.pid, start_time=start_time, end_time=end_time))
        rows[index] = finish_row(p, start_time, end_time)
        logger.debug(f"fcfs: P{p.pid} runs [{start_time}, {end_time})")

        time = end_time

    return _build_result("fcfs", None, processes, rows, timeline)


def _run_preemptive(
    processes: Sequence[Process],
    key: Callable[[_Job], Tuple],
    preempts: Callable[[_Job, _Job], bool],
    label: str,
) -> Tuple[Dict[int, ResultRow], List[TimeSlice]]:
    """
    Tick-driven single-CPU loop shared by the preemptive schedulers.

    At every time unit, arrivals are admitted to the ready heap and the best
    ready job replaces the running one when ``preempts(best, running)``.
    The running job is always the best of the ready set when it was chosen,
    so comparing against the heap top is the same as checking each arrival.
    """
    arrivals = ArrivalQueue(processes)
    ready: PriorityReadyQueue[_Job] = PriorityReadyQueue(key=key, order=lambda job: job.index)
    timeline: List[TimeSlice] = []
    rows: Dict[int, ResultRow] = {}

    running: Optional[_Job] = None
    time = 0

    while arrivals or ready or running is not None:
        for index, process in arrivals.admit(time):
            ready.push(_Job.admit(index, process))

        if running is None:
            if not ready:
                time = arrivals.next_arrival()
                continue
            running = ready.pop()
        elif ready and preempts(ready.peek(), running):
            challenger = ready.pop()
            logger.debug(f"{label}: P{challenger.process.pid} preempts P{running.process.pid} at t={time}")
            ready.push(running)
            running = challenger

        if running.start_time is None:
            running.start_time = time

        _extend_timeline(timeline, running.process.pid, time, time + 1)
        running.remaining -= 1
        time += 1

        if running.remaining == 0:
            rows[running.index] = finish_row(running.process, running.start_time, time)
            logger.debug(f"{label}: P{running.process.pid} completes at t={time}")
            running = None

    return rows, timeline


def schedule_sjf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First, preemptive (shortest remaining time).

    A newly arrived job takes the CPU only if its burst is strictly shorter
    than what the running job has left. Equal remaining bursts go to the
    job that appears first in the input.
    """
    _require_processes(processes)

    rows, timeline = _run_preemptive(
        processes,
        key=lambda job: (job.remaining,),
        preempts=lambda challenger, running: challenger.remaining < running.remaining,
        label="sjf",
    )
    return _build_result("sjf", None, processes, rows, timeline)


def schedule_priority(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Priority scheduling with SJF tie-break (preemptive).

    Lower numeric priority value means higher priority. Among ready jobs the
    best priority runs, ties going to the shortest remaining burst, then to
    input order. A running job is preempted only by a strictly better
    priority.
    """
    _require_processes(processes)

    rows, timeline = _run_preemptive(
        processes,
        key=lambda job: (job.process.priority, job.remaining),
        preempts=lambda challenger, running: challenger.process.priority < running.process.priority,
        label="priority",
    )
    return _build_result("priority", None, processes, rows, timeline)


def schedule_rr(processes: List[Process], quantum: Optional[int] = DEFAULT_QUANTUM) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice is running join the queue ahead of
    the process being preempted at the end of that slice.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum <= 0:
        raise InvalidArgumentsError(f"Round Robin requires a positive quantum, got {quantum}")
    _require_processes(processes)

    arrivals = ArrivalQueue(processes)
    ready: ReadyQueue[_Job] = ReadyQueue()
    timeline: List[TimeSlice] = []
    rows: Dict[int, ResultRow] = {}

    time = 0

    while arrivals or ready:
        for index, process in arrivals.admit(time):
            ready.push(_Job.admit(index, process))

        if not ready:
            # Jump to next arrival if CPU is idle
            time = arrivals.next_arrival()
            continue

        job = ready.pop()
        if job.start_time is None:
            job.start_time = time

        run_time = min(quantum, job.remaining)
        timeline.append(TimeSlice(pid=job.process.pid, start_time=time, end_time=time + run_time))

        time += run_time
        job.remaining -= run_time

        for index, process in arrivals.admit(time):
            ready.push(_Job.admit(index, process))

        if job.remaining > 0:
            ready.push(job)
        else:
            rows[job.index] = finish_row(job.process, job.start_time, time)
            logger.debug(f"rr: P{job.process.pid} completes at t={time}")

    return _build_result("rr", quantum, processes, rows, timeline)


ALGORITHMS = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}

TITLES = {
    "fcfs": "First-come, first-serve",
    "sjf": "Shortest-job-first (SJF)",
    "priority": "SJF with Priority scheduling",
    "rr": "Round-robin scheduling",
}

DEFAULT_ALGORITHMS = list(ALGORITHMS)


def run_algorithm(name: str, processes: List[Process], quantum: Optional[int] = DEFAULT_QUANTUM) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum only affects round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise InvalidArgumentsError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    if name == "fcfs":
        # FCFS expects arrival order; a stable sort keeps input order for ties.
        processes = sorted(processes, key=lambda p: p.arrival_time)

    logger.debug(f"running {name} on {len(processes)} processes")
    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)


def run_all(
    processes: List[Process],
    names: Optional[Sequence[str]] = None,
    quantum: Optional[int] = DEFAULT_QUANTUM,
) -> List[ScheduleResult]:
    """
    Run each algorithm independently against the same input list.
    """
    return [run_algorithm(name, processes, quantum=quantum) for name in (names or DEFAULT_ALGORITHMS)]
