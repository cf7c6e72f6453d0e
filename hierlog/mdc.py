"""Mapped diagnostic context: a per-thread map of string keys to string values."""

from __future__ import annotations

import threading

_local = threading.local()


def _existing() -> dict[str, str] | None:
    return getattr(_local, "context", None)


def _local_data() -> dict[str, str]:
    data = _existing()
    if data is None:
        data = {}
        _local.context = data
    return data


def get(key: str) -> str:
    """Return the value stored for ``key`` in this thread, or an empty string."""
    data = _existing()
    if data is None:
        return ""
    return data.get(key, "")


def context() -> dict[str, str]:
    """Return a copy of this thread's mapped diagnostic context."""
    data = _existing()
    if data is None:
        return {}
    return dict(data)


def put(key: str, value: str) -> None:
    """Store ``value`` under ``key`` in this thread's context."""
    _local_data()[key] = value


def remove(key: str) -> None:
    """Remove ``key`` from this thread's context; a missing key is ignored."""
    _local_data().pop(key, None)