"""A logger wrapper named from a context and a name, created on first use."""

from __future__ import annotations

from typing import Callable, Optional, Union

from hierlog.logger import Logger
from hierlog.loggerrepository import LoggerRepository
from hierlog.loggingevent import Level


class QmlLogger:
    """Passes log calls to the logger called ``context.name``.

    When no name is set, the parent's name is used.  The logger is looked
    up once, on first use, and kept from then on.  Callbacks in
    ``name_changed``, ``context_changed`` and ``level_changed`` are called
    with the new value whenever the value actually changes.
    """

    def __init__(
        self,
        repository: LoggerRepository,
        name: str = "",
        context: str = "Qml",
        parent_name: Optional[str] = None,
    ) -> None:
        self._repository = repository
        self._name = name
        self._context = context
        self._parent_name = parent_name
        self._logger: Optional[Logger] = None
        self.name_changed: list[Callable[[str], None]] = []
        self.context_changed: list[Callable[[str], None]] = []
        self.level_changed: list[Callable[[Level], None]] = []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if self._name != value:
            self._name = value
            for callback in self.name_changed:
                callback(value)

    @property
    def context(self) -> str:
        return self._context

    @context.setter
    def context(self, value: str) -> None:
        if self._context != value:
            self._context = value
            for callback in self.context_changed:
                callback(value)

    @property
    def level(self) -> Level:
        return self.logger().level

    @level.setter
    def level(self, value: Union[Level, int]) -> None:
        value = Level(value)
        if self.level != value:
            self.logger().set_level(value)
            for callback in self.level_changed:
                callback(value)

    def trace(self, message: str) -> None:
        self.logger().trace(message)

    def debug(self, message: str) -> None:
        self.logger().debug(message)

    def info(self, message: str) -> None:
        self.logger().info(message)

    def error(self, message: str) -> None:
        self.logger().error(message)

    def fatal(self, message: str) -> None:
        self.logger().fatal(message)

    def log(self, level: Union[Level, int], message: str) -> None:
        self.logger().log(Level(level), message)

    def logger_name(self) -> str:
        """Return ``context.name``, or only the name when the context is empty."""
        if not self._name and self._parent_name is not None:
            self._name = self._parent_name
        if self._context:
            return f"{self._context}.{self._name}"
        return self._name

    def logger(self) -> Logger:
        """Return the wrapped logger, looking it up on the first call."""
        if self._logger is None:
            self._logger = self._repository.logger(self.logger_name())
        return self._logger