"""A stream that collects pieces of text and logs them as one message."""

from __future__ import annotations

import weakref
from typing import Any, Callable


class LogStream:
    """Collects values written with ``<<`` and logs the text on flush.

    The logger is held weakly where possible; if it has gone away by the
    time the stream is flushed, nothing is logged.
    """

    def __init__(self, logger: Any, level: Any) -> None:
        self._logger_ref: Callable[[], Any]
        try:
            self._logger_ref = weakref.ref(logger)
        except TypeError:
            self._logger_ref = lambda: logger
        self._level = level
        self._parts: list[str] = []

    @property
    def level(self) -> Any:
        return self._level

    @property
    def text(self) -> str:
        """The text collected so far."""
        return "".join(self._parts)

    def __lshift__(self, value: Any) -> LogStream:
        self._parts.append(str(value))
        return self

    def flush(self) -> None:
        """Log the collected text at the stream's level and start afresh."""
        message = self.text
        self._parts.clear()
        logger = self._logger_ref()
        if logger is not None:
            logger.log(self._level, message)

    def __enter__(self) -> LogStream:
        return self

    def __exit__(self, *args: Any) -> None:
        self.flush()