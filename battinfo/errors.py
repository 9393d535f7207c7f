"""Errors raised while reading or interpreting battery information."""

from __future__ import annotations

import enum
import errno


class ErrorKind(enum.Enum):
    """Broad category of a battery error."""

    NOT_FOUND = "not found"
    INVALID_DATA = "invalid data"
    INVALID_INPUT = "invalid input"
    OTHER = "other"


class BatteryError(Exception):
    """Failure to obtain or interpret battery data.

    Nearly every operation is I/O of some kind; ``kind`` tells what went
    wrong and the message carries a human readable description.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.OTHER) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"BatteryError({self.message!r}, {self.kind})"


def not_found(description: str) -> BatteryError:
    """Build an error meaning that some required value or entity is missing."""
    return BatteryError(description, ErrorKind.NOT_FOUND)


def invalid_data(description: str) -> BatteryError:
    """Build an error meaning that retrieved data makes no sense."""
    return BatteryError(description, ErrorKind.INVALID_DATA)


def from_os_error(error: OSError) -> BatteryError:
    """Wrap an operating-system error, keeping it as the cause."""
    if isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT:
        kind = ErrorKind.NOT_FOUND
    else:
        kind = ErrorKind.OTHER
    wrapped = BatteryError(error.strerror or str(error), kind)
    wrapped.__cause__ = error
    return wrapped