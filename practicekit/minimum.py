"""Smaller of two comparable values."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def minimum(left: T, right: T) -> T:
    """Return the smaller of two values, preferring ``left`` on a tie."""
    return right if left > right else left