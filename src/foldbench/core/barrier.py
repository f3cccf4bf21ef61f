"""Optimization barrier for values produced inside a timed region."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_last: Any = None


def sink(value: T) -> T:
    """Mark ``value`` as used and return it unchanged.

    The value is kept in a module slot until the next call, so work that
    produced it can never be treated as dead.
    """
    global _last
    _last = value
    return value


def last_sunk() -> Any:
    """Return the most recently sunk value."""
    return _last
