from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .algorithms import ALGORITHMS, DEFAULT_ALGORITHMS, DEFAULT_QUANTUM, run_all
from .errors import InvalidArgumentsError, SchedulerError
from .report import print_comparison, print_report
from .workload_io import load_workload

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise instead of exiting so bad arguments share the exit code of other errors."""

    def error(self, message: str):
        raise InvalidArgumentsError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Priority-SJF, RR).",
    )
    parser.add_argument(
        "workload",
        help="Path to the workload CSV (id,burst,arrival[,priority]) or JSON file.",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        dest="algorithms",
        nargs="+",
        choices=list(ALGORITHMS),
        default=DEFAULT_ALGORITHMS,
        help="Algorithms to run, in order (default: fcfs sjf priority rr).",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Print one comparison table instead of a report per algorithm.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain text.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log scheduling events to stderr.",
    )
    return parser


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    console = Console()
    err_console = Console(stderr=True)

    try:
        args = build_parser().parse_args(argv)
        _configure_logging(args.verbose, err_console)

        processes = load_workload(args.workload)
        # Every run finishes before anything is printed; one failure aborts all reports.
        results = run_all(processes, args.algorithms, quantum=args.quantum)
    except SchedulerError as exc:
        err_console.print(Text(f"error: {exc}", style="red"))
        return 1

    if args.compare:
        print_comparison(results, console)
        return 0

    for result in results:
        print_report(result, console, plain=args.plain)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
