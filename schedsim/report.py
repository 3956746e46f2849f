from __future__ import annotations

from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from .gantt import build_rich_gantt, render_gantt
from .models import ScheduleResult


def print_report(result: ScheduleResult, console: Console, plain: bool = False) -> None:
    """
    Render one scheduler run: title banner, Gantt chart and the schedule
    table with averages in its footer.
    """
    console.rule(f"[bold]{result.title}[/bold]")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    if plain:
        console.print(render_gantt(result.timeline), highlight=False, soft_wrap=True)
    else:
        console.print(build_rich_gantt(result.timeline))

    console.print()

    summary = result.summary
    footers = {
        "Wait": f"Average\n{summary.avg_waiting:.2f}",
        "Turnaround": f"Average\n{summary.avg_turnaround:.2f}",
        "Exit": f"Throughput\n{summary.throughput:.2f}/t",
    }

    table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for header in ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]:
        justify = "center" if header in {"ID", "Priority"} else "right"
        table.add_column(header, footer=footers.get(header, ""), justify=justify)

    for row in result.rows:
        table.add_row(
            str(row.pid),
            str(row.priority),
            str(row.burst_time),
            str(row.arrival_time),
            str(row.waiting_time),
            str(row.turnaround_time),
            str(row.completion_time),
        )

    console.print(table)
    console.print()


def print_comparison(results: List[ScheduleResult], console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Throughput", justify="right")
    summary_table.add_column("CPU utilization", justify="right")

    for result in results:
        summary = result.summary
        summary_table.add_row(
            result.title,
            "" if result.quantum is None else str(result.quantum),
            f"{summary.avg_waiting:.2f}",
            f"{summary.avg_turnaround:.2f}",
            f"{summary.throughput:.2f}/t",
            f"{summary.cpu_utilization*100:.1f}%",
        )

    console.print(summary_table)
