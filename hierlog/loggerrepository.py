"""Abstract interface of a repository that owns and hands out loggers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from hierlog.logger import Logger
    from hierlog.loggingevent import Level


class LoggerRepository(ABC):
    """Base class for logger repositories."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True if a logger named ``name`` exists."""

    @abstractmethod
    def logger(self, name: str) -> Logger:
        """Return the logger named ``name``, creating it if necessary."""

    @abstractmethod
    def loggers(self) -> list[Logger]:
        """Return every logger in the repository except the root logger."""

    @abstractmethod
    def root_logger(self) -> Logger:
        """Return the root logger."""

    @abstractmethod
    def threshold(self) -> Level:
        """Return the repository-wide threshold level."""

    @abstractmethod
    def set_threshold(self, level: Union[Level, str]) -> None:
        """Set the threshold from a level or a level name."""

    @abstractmethod
    def is_disabled(self, level: Level) -> bool:
        """Return True if events at ``level`` are below the threshold."""

    @abstractmethod
    def reset_configuration(self) -> None:
        """Reset every logger to its default configuration."""

    @abstractmethod
    def shutdown(self) -> None:
        """Close all appenders held by the repository's loggers."""