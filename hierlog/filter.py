"""Base class for filters that decide whether an appender takes an event."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hierlog.loggingevent import LoggingEvent


class Decision(enum.Enum):
    """Outcome of a filter for one event."""

    ACCEPT = enum.auto()
    DENY = enum.auto()
    NEUTRAL = enum.auto()


class Filter(ABC):
    """A filter in a chain; ``next`` is the following filter or None."""

    def __init__(self) -> None:
        self.next: Optional[Filter] = None

    def activate_options(self) -> None:
        """Check the configured options; ``next`` must be a Filter or None."""
        if self.next is not None and not isinstance(self.next, Filter):
            raise TypeError(
                f"next filter must be a Filter or None, not {type(self.next).__name__}"
            )

    @abstractmethod
    def decide(self, event: LoggingEvent) -> Decision:
        """Return the decision for ``event``."""