"""Nested diagnostic context: a per-thread stack of context strings."""

from __future__ import annotations

import logging
import threading

_local = threading.local()
_log = logging.getLogger(__name__)


def _existing() -> list[str] | None:
    return getattr(_local, "stack", None)


def clear() -> None:
    """Remove every entry from this thread's stack."""
    stack = _existing()
    if stack is not None:
        stack.clear()


def depth() -> int:
    """Return the number of entries on this thread's stack."""
    stack = _existing()
    return 0 if stack is None else len(stack)


def pop() -> str:
    """Remove and return the top entry; an empty stack yields an empty string."""
    stack = _existing()
    if not stack:
        _log.warning("Requesting pop from empty NDC stack")
        return ""
    return stack.pop()


def push(message: str) -> None:
    """Push ``message`` onto this thread's stack."""
    stack = _existing()
    if stack is None:
        stack = []
        _local.stack = stack
    stack.append(message)


def set_max_depth(max_depth: int) -> None:
    """Trim the stack to at most ``max_depth`` entries, keeping the oldest."""
    if max_depth < 0:
        raise ValueError(f"max_depth must not be negative: {max_depth}")
    stack = _existing()
    if stack is None or len(stack) <= max_depth:
        return
    del stack[max_depth:]


def peek() -> str:
    """Return the top entry without removing it, or an empty string."""
    stack = _existing()
    if not stack:
        return ""
    return stack[-1]