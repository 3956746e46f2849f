from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENTS = "invalid arguments"
    FILE_ACCESS = "file access"
    MALFORMED_RECORD = "malformed record"
    EMPTY_WORKLOAD = "empty workload"


class SchedulerError(Exception):
    """
    Base class for every error raised by the simulator.

    All of them are terminal for a run: the CLI turns any of these into a
    diagnostic on stderr and exit code 1.
    """

    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.kind.value}: {super().__str__()}"


class InvalidArgumentsError(SchedulerError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENTS


class FileAccessError(SchedulerError):
    kind = ErrorKind.FILE_ACCESS


class MalformedRecordError(SchedulerError, ValueError):
    kind = ErrorKind.MALFORMED_RECORD


class EmptyWorkloadError(SchedulerError, ValueError):
    kind = ErrorKind.EMPTY_WORKLOAD
