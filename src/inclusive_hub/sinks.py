from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, Tuple


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    Severity.SUCCESS: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class NotificationSink(Protocol):
    def report(self, message: str, severity: Severity) -> None: ...


class ProgressSink(Protocol):
    def set_visible(self, visible: bool, label: str = "") -> None: ...

    def set_percent(self, percent: int) -> None: ...


class LoggingNotificationSink:
    """Route user-facing notices to the standard logging module."""

    def __init__(self, name: str = "inclusive_hub.notifications") -> None:
        self._logger = logging.getLogger(name)

    def report(self, message: str, severity: Severity) -> None:
        level = Severity(severity)
        self._logger.log(_LOG_LEVELS[level], "[%s] %s", level.value, message)


@dataclass(slots=True)
class RecordingNotificationSink:
    """Keep every notice in memory, in arrival order."""

    messages: List[Tuple[Severity, str]] = field(default_factory=list)

    def report(self, message: str, severity: Severity) -> None:
        self.messages.append((Severity(severity), message))

    def of(self, severity: Severity) -> List[str]:
        return [text for level, text in self.messages if level is severity]


class NullProgressSink:
    def set_visible(self, visible: bool, label: str = "") -> None:
        return None

    def set_percent(self, percent: int) -> None:
        return None


@dataclass(slots=True)
class RecordingProgressSink:
    visible: bool = False
    label: str = ""
    history: List[int] = field(default_factory=list)

    def set_visible(self, visible: bool, label: str = "") -> None:
        self.visible = visible
        if label:
            self.label = label

    def set_percent(self, percent: int) -> None:
        self.history.append(max(0, min(100, int(percent))))
