"""Log verbosity passed to the game process."""

from __future__ import annotations

from enum import Enum

__all__ = ["LogLevel"]


class LogLevel(Enum):
    DEFAULT = "default"  # let the game decide; no level argument is passed
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    def is_specified(self) -> bool:
        return self is not LogLevel.DEFAULT
