"""Hierarchical loggers that hand events to their appenders."""

from __future__ import annotations

import logging
import re
import threading
import weakref
from typing import Any, Callable, Optional, Union

from hierlog.loggerrepository import LoggerRepository
from hierlog.loggingevent import Level, LoggingEvent, MessageContext
from hierlog.logstream import LogStream

_log = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"%(\d{1,2})")


def _replace_lowest(message: str, value: str) -> str:
    numbers = [
        int(match.group(1))
        for match in _PLACEHOLDER.finditer(message)
        if 1 <= int(match.group(1)) <= 99
    ]
    if not numbers:
        _log.warning("format string %r is missing a placeholder for %r", message, value)
        return message
    lowest = min(numbers)

    def substitute(match: re.Match[str]) -> str:
        return value if int(match.group(1)) == lowest else match.group(0)

    return _PLACEHOLDER.sub(substitute, message)


def format_args(message: Any, *args: Any) -> str:
    """Fill ``%1``..``%99`` placeholders in ``message`` with ``args``.

    Each argument in turn replaces every occurrence of the lowest-numbered
    placeholder still present in the text.
    """
    text = str(message)
    for value in args:
        text = _replace_lowest(text, str(value))
    return text


class Logger:
    """A named logger with a level, appenders and an optional parent.

    Events logged here go to this logger's appenders and, while the logger
    is additive, to those of its ancestors.
    """

    def __init__(
        self,
        repository: LoggerRepository,
        level: Union[Level, int],
        name: str,
        parent: Optional[Logger] = None,
    ) -> None:
        if repository is None:
            raise ValueError("a logger needs a repository")
        self.name = name
        self.repository = repository
        self.parent = parent
        self.additivity = True
        self.level = Level(level)
        self._guard = threading.RLock()
        self._appenders: list[Any] = []

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, level={self.level})"

    def set_level(self, level: Union[Level, int]) -> None:
        """Set the level; the root logger cannot take the NULL level."""
        level = Level(level)
        if self.parent is None and level == Level.NULL:
            _log.warning("Invalid root logger level NULL. Using DEBUG instead")
            level = Level.DEBUG
        self.level = level

    # Appenders

    def add_appender(self, appender: Any) -> None:
        """Attach ``appender``; attaching the same appender twice has no effect."""
        with self._guard:
            if appender not in self._appenders:
                self._appenders.append(appender)

    def remove_appender(self, appender: Any) -> None:
        """Detach ``appender``; an appender not attached is ignored."""
        with self._guard:
            if appender in self._appenders:
                self._appenders.remove(appender)

    def remove_all_appenders(self) -> None:
        with self._guard:
            self._appenders.clear()

    def appenders(self) -> list[Any]:
        """Return a copy of the attached appenders, in the order added."""
        with self._guard:
            return list(self._appenders)

    def call_appenders(self, event: LoggingEvent) -> None:
        """Hand ``event`` to every appender here and up the additive chain."""
        for appender in self.appenders():
            appender.do_append(event)
        if self.additivity and self.parent is not None:
            self.parent.call_appenders(event)

    # Levels

    def effective_level(self) -> Level:
        """Return the first level other than NULL found from here to the root."""
        logger: Optional[Logger] = self
        while logger is not None:
            if logger.level != Level.NULL:
                return logger.level
            logger = logger.parent
        raise RuntimeError("root logger level must not be NULL")

    def is_enabled_for(self, level: Union[Level, int]) -> bool:
        """Return True if ``level`` passes the repository threshold and the effective level."""
        level = Level(level)
        if self.repository.is_disabled(level):
            return False
        return self.effective_level() <= level

    def is_trace_enabled(self) -> bool:
        return self.is_enabled_for(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled_for(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled_for(Level.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled_for(Level.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled_for(Level.ERROR)

    def is_fatal_enabled(self) -> bool:
        return self.is_enabled_for(Level.FATAL)

    # Logging

    def trace(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.TRACE, message, *args)

    def debug(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.DEBUG, message, *args)

    def info(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.INFO, message, *args)

    def warn(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.WARN, message, *args)

    def error(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.ERROR, message, *args)

    def fatal(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        return self.log(Level.FATAL, message, *args)

    def log(
        self, level: Union[Level, int], message: Any = None, *args: Any
    ) -> Optional[LogStream]:
        """Log ``message`` at ``level`` if enabled.

        Without a message a :class:`LogStream` for ``level`` is returned.
        """
        level = Level(level)
        if message is None:
            return LogStream(self, level)
        if self.is_enabled_for(level):
            self.forced_log(level, format_args(message, *args))
        return None

    def log_event(self, event: LoggingEvent) -> None:
        """Pass a ready-made event to the appenders if its level is enabled."""
        if self.is_enabled_for(event.level):
            self.call_appenders(event)

    def log_with_location(
        self,
        level: Union[Level, int],
        file: Optional[str],
        line: int,
        function: Optional[str],
        message: Any,
        *args: Any,
    ) -> None:
        """Log with a source location; the caller is expected to have checked the level."""
        event = LoggingEvent(
            self,
            Level(level),
            format_args(message, *args),
            context=MessageContext(file, line, function),
            category_name="",
        )
        self.call_appenders(event)

    def forced_log(self, level: Union[Level, int], message: Any) -> None:
        """Log without checking whether ``level`` is enabled."""
        self.call_appenders(LoggingEvent(self, Level(level), str(message)))


class MessageLogger:
    """Logs messages at a fixed level with a fixed source location."""

    def __init__(
        self,
        logger: Logger,
        level: Union[Level, int],
        file: Optional[str] = None,
        line: int = -1,
        function: Optional[str] = None,
    ) -> None:
        self._logger_ref: Callable[[], Optional[Logger]] = weakref.ref(logger)
        self.level = Level(level)
        self.context = MessageContext(file, line, function)

    def log(self, message: Any = None, *args: Any) -> Optional[LogStream]:
        """Log ``message``, or return a :class:`LogStream` when none is given."""
        logger = self._logger_ref()
        if logger is None:
            return None
        if message is None:
            return LogStream(logger, self.level)
        logger.log_with_location(
            self.level,
            self.context.file,
            self.context.line,
            self.context.function,
            message,
            *args,
        )
        return None