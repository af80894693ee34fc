"""Operation log module.

Responsibilities:
- Keep an append-only audit trail of every domain operation and its outcome
- Refuse new entries once the configured capacity is reached

The operation log is domain data (shown in the menu and counted in the
system statistics). Diagnostic logging goes through structlog.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from registrar.utils.text_utils import utc_now

logger = structlog.get_logger(__name__)


class LogLevel(Enum):
    """Severity of an operation log entry."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class LogEntry:
    """A single immutable operation log entry."""

    log_id: int
    level: LogLevel
    timestamp: str
    operation: str
    details: str


class OperationLog:
    """Capacity-bounded, append-only sequence of LogEntry."""

    def __init__(self, capacity: int = 10000):
        self.capacity = capacity
        self._entries: list[LogEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """All entries in insertion order."""
        return tuple(self._entries)

    def append(self, level: LogLevel, operation: str, details: str) -> LogEntry | None:
        """Append an entry.

        Returns:
            The new LogEntry, or None when the log is full (entry dropped).
        """
        if self.is_full:
            logger.warning(
                "operation_log.full",
                capacity=self.capacity,
                dropped_operation=operation,
            )
            return None

        entry = LogEntry(
            log_id=len(self._entries) + 1,
            level=level,
            timestamp=utc_now(),
            operation=operation,
            details=details,
        )
        self._entries.append(entry)
        return entry

    def info(self, operation: str, details: str) -> LogEntry | None:
        return self.append(LogLevel.INFO, operation, details)

    def warning(self, operation: str, details: str) -> LogEntry | None:
        return self.append(LogLevel.WARNING, operation, details)

    def error(self, operation: str, details: str) -> LogEntry | None:
        return self.append(LogLevel.ERROR, operation, details)

    def success(self, operation: str, details: str) -> LogEntry | None:
        return self.append(LogLevel.SUCCESS, operation, details)
