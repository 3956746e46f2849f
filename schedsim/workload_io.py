from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence

from .errors import EmptyWorkloadError, FileAccessError, MalformedRecordError
from .models import Process

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a CSV or JSON file into a list of Process objects.

    CSV files have no header; each line is
    ``processId,burstDuration,arrivalTime[,priority]``. Any bad record aborts
    the whole load.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(f"error opening scheduling file {str(path)!r}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedRecordError(f"{path}: not a UTF-8 text file") from exc

    if path.suffix.lower() == ".json":
        processes = _load_json(text, path)
    else:
        processes = _load_csv(text, path)

    if not processes:
        raise EmptyWorkloadError(f"no processes found in {str(path)!r}")

    _check_unique_ids(processes, path)
    logger.info(f"loaded {len(processes)} processes from {path}")
    return processes


def _load_csv(text: str, path: Path) -> List[Process]:
    processes: List[Process] = []
    reader = csv.reader(text.splitlines())
    for row in reader:
        fields = [value.strip() for value in row]
        if not any(fields):
            continue
        processes.append(_process_from_fields(fields, f"{path}:{reader.line_num}"))
    return processes


def _load_json(text: str, path: Path) -> List[Process]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(f"{path}: invalid JSON ({exc.msg})") from exc

    if not isinstance(raw, list):
        raise MalformedRecordError(f"{path}: JSON workload must be a list of process objects")

    processes: List[Process] = []
    for number, entry in enumerate(raw, start=1):
        processes.append(_process_from_mapping(entry, f"{path}[{number}]"))
    return processes


def _process_from_fields(fields: Sequence[str], where: str) -> Process:
    if len(fields) not in (3, 4):
        raise MalformedRecordError(f"{where}: expected 3 or 4 fields, got {len(fields)}")

    try:
        values = [int(value) for value in fields]
    except ValueError as exc:
        raise MalformedRecordError(f"{where}: {exc}") from exc

    priority = values[3] if len(values) == 4 else 0
    return _validated(values[0], values[1], values[2], priority, where)


def _process_from_mapping(mapping: Mapping, where: str) -> Process:
    try:
        pid = int(mapping["id"])
        burst = int(mapping["burst"])
        arrival = int(mapping["arrival"])
        priority_val = mapping.get("priority")
        priority = int(priority_val) if priority_val not in (None, "") else 0
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise MalformedRecordError(f"{where}: invalid process entry {mapping!r}") from exc

    return _validated(pid, burst, arrival, priority, where)


def _validated(pid: int, burst: int, arrival: int, priority: int, where: str) -> Process:
    if pid <= 0:
        raise MalformedRecordError(f"{where}: process id must be positive, got {pid}")
    if burst <= 0:
        raise MalformedRecordError(f"{where}: burst duration must be positive, got {burst}")
    if arrival < 0:
        raise MalformedRecordError(f"{where}: arrival time must not be negative, got {arrival}")
    if priority < 0:
        raise MalformedRecordError(f"{where}: priority must not be negative, got {priority}")

    return Process(pid=pid, arrival_time=arrival, burst_time=burst, priority=priority)


def _check_unique_ids(processes: Iterable[Process], path: Path) -> None:
    seen = set()
    for p in processes:
        if p.pid in seen:
            raise MalformedRecordError(f"{path}: duplicate process id {p.pid}")
        seen.add(p.pid)
