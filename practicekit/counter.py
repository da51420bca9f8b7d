"""Counting how often values are seen."""

from __future__ import annotations

import argparse
import collections
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: collections.Counter[T] = collections.Counter()

    def count(self, value: T) -> None:
        """Count an occurrence of ``value``."""
        self._values[value] += 1

    def times_seen(self, value: T) -> int:
        """Return how many times ``value`` has been counted."""
        return self._values.get(value, 0)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Count some sample values.").parse_args(argv)
    ctr: Counter[int] = Counter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    for i in range(10, 20):
        print(f"saw {ctr.times_seen(i)} values equal to {i}")

    strctr: Counter[str] = Counter()
    for fruit in ("apple", "orange", "apple"):
        strctr.count(fruit)
    print(f"got {strctr.times_seen('apple')} apples")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())