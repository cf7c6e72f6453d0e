"""Logging levels, message context and the logging event record."""

from __future__ import annotations

import enum
import struct
import threading
import time
from dataclasses import dataclass
from typing import Any, Optional

from hierlog import mdc, ndc

_SERIAL_VERSION = 0
_NULL_STRING = 0xFFFFFFFF

_sequence_lock = threading.Lock()
_sequence_count = 0


class Level(enum.IntEnum):
    """Severity of a logging event; higher values are more severe."""

    NULL = 0
    ALL = 32
    TRACE = 64
    DEBUG = 96
    INFO = 128
    WARN = 150
    ERROR = 182
    FATAL = 214
    OFF = 255

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_string(cls, name: str) -> Level:
        """Return the level called ``name`` (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown level: {name!r}") from None


@dataclass(frozen=True)
class MessageContext:
    """Source location of a log statement."""

    file: Optional[str] = None
    line: int = -1
    function: Optional[str] = None


def _next_sequence_number() -> int:
    global _sequence_count
    with _sequence_lock:
        _sequence_count += 1
        return _sequence_count


def sequence_count() -> int:
    """Return the number of logging events created so far."""
    with _sequence_lock:
        return _sequence_count


class LoggingEvent:
    """The internal representation of one logging event.

    Time stamps are milliseconds since the Unix epoch.  Values not given
    are taken from the current thread: the top of the nested diagnostic
    context, a copy of the mapped diagnostic context and the thread name.
    """

    def __init__(
        self,
        logger: Any = None,
        level: Level = Level.NULL,
        message: str = "",
        *,
        ndc: Optional[str] = None,
        properties: Optional[dict[str, str]] = None,
        thread_name: Optional[str] = None,
        time_stamp: Optional[int] = None,
        context: Optional[MessageContext] = None,
        category_name: str = "",
    ) -> None:
        self.level = Level(level)
        self.logger = logger
        self.message = message
        self.ndc = _ndc_peek() if ndc is None else ndc
        self.properties: dict[str, str] = (
            mdc.context() if properties is None else dict(properties)
        )
        self.sequence_number = _next_sequence_number()
        self.thread_name = (
            threading.current_thread().name if thread_name is None else thread_name
        )
        self.time_stamp = (
            int(time.time() * 1000) if time_stamp is None else int(time_stamp)
        )
        self.context = MessageContext() if context is None else context
        self.category_name = category_name

    @property
    def mdc(self) -> dict[str, str]:
        """The mapped diagnostic context captured with the event."""
        return self.properties

    def logger_name(self) -> str:
        """Return the name of the event's logger, or an empty string."""
        if self.logger is None:
            return ""
        return self.logger.name

    def get_property(self, key: str) -> str:
        """Return the property ``key``, or an empty string if it is not set."""
        return self.properties.get(key, "")

    def property_keys(self) -> list[str]:
        return list(self.properties)

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value

    def __str__(self) -> str:
        return f"{self.level}:{self.message}"

    def file_name(self) -> str:
        return self.context.file or ""

    def line_number(self) -> int:
        return self.context.line

    def function_name(self) -> str:
        return self.context.function or ""


def _ndc_peek() -> str:
    return ndc.peek()


def _pack_string(value: str) -> bytes:
    data = value.encode("utf-16-be")
    return struct.pack(">I", len(data)) + data


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("truncated logging event data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: str) -> Any:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def string(self) -> str:
        size = self.unpack(">I")
        if size == _NULL_STRING:
            return ""
        if size % 2:
            raise ValueError("malformed string in logging event data")
        return self.take(size).decode("utf-16-be")


def serialize_event(event: LoggingEvent) -> bytes:
    """Encode ``event`` as bytes (big-endian, UTF-16 strings with length)."""
    parts = [
        struct.pack(">H", _SERIAL_VERSION),
        struct.pack(">H", int(event.level)),
        _pack_string(event.logger_name()),
        _pack_string(event.message),
        _pack_string(event.ndc),
        struct.pack(">I", len(event.properties)),
    ]
    for key, value in event.properties.items():
        parts.append(_pack_string(key))
        parts.append(_pack_string(value))
    parts.append(struct.pack(">q", event.sequence_number))
    parts.append(_pack_string(event.thread_name))
    parts.append(struct.pack(">q", event.time_stamp))
    return b"".join(parts)


def deserialize_event(data: bytes, repository: Any) -> LoggingEvent:
    """Decode bytes made by :func:`serialize_event`.

    The logger is looked up by name in ``repository``; an empty name gives
    an event without a logger.
    """
    reader = _Reader(data)
    version = reader.unpack(">H")
    if version != _SERIAL_VERSION:
        raise ValueError(f"unsupported logging event version: {version}")
    level = Level(reader.unpack(">H"))
    logger_name = reader.string()
    message = reader.string()
    ndc_text = reader.string()
    count = reader.unpack(">I")
    properties: dict[str, str] = {}
    for _ in range(count):
        key = reader.string()
        properties[key] = reader.string()
    sequence_number = reader.unpack(">q")
    thread_name = reader.string()
    time_stamp = reader.unpack(">q")

    logger = repository.logger(logger_name) if logger_name else None
    event = LoggingEvent(
        logger,
        level,
        message,
        ndc=ndc_text,
        properties=properties,
        thread_name=thread_name,
        time_stamp=time_stamp,
    )
    event.sequence_number = sequence_number
    return event