"""Differences between elements of a sequence at a wrapping offset."""

from __future__ import annotations

from collections.abc import Sequence


def offset_differences(offset: int, values: Sequence[int]) -> list[int]:
    """Return ``values[(n + offset) % len] - values[n]`` for every ``n``."""
    values = list(values)
    if not values:
        return []
    shift = offset % len(values)
    rotated = values[shift:] + values[:shift]
    return [later - earlier for earlier, later in zip(values, rotated)]