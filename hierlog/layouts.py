"""Layouts that turn a logging event into a line of text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from hierlog.loggingevent import LoggingEvent


class Layout(ABC):
    """Base class for layouts."""

    end_of_line: str = "\n"

    @abstractmethod
    def format(self, event: LoggingEvent) -> str:
        """Return the text for ``event``."""


class SimpleLayout(Layout):
    """Writes the level and the message, or only the message."""

    def __init__(self, show_level: bool = True) -> None:
        self.show_level = show_level

    def format(self, event: LoggingEvent) -> str:
        if self.show_level:
            return f"{event.level} - {event.message}{self.end_of_line}"
        return f"{event.message}{self.end_of_line}"


class SimpleTimeLayout(Layout):
    """Writes local time, thread, level, logger name and message."""

    def format(self, event: LoggingEvent) -> str:
        stamp = datetime.fromtimestamp(event.time_stamp / 1000).strftime(
            "%d.%m.%Y %H:%M"
        )
        return (
            f"{stamp}[{event.thread_name}] {event.level} "
            f"{event.logger_name()} - {event.message}{self.end_of_line}"
        )