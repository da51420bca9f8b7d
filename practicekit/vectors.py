"""Magnitude and normalisation of vectors."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of ``vector``."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return ``vector`` scaled to length 1.0, keeping its direction.

    A zero vector has no direction; every coordinate of the result is NaN.
    """
    mag = magnitude(vector)
    if mag == 0:
        return [math.nan for _ in vector]
    return [coord / mag for coord in vector]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Normalise a sample vector.").parse_args(argv)
    print(f"Magnitude of a unit vector: {magnitude([0.0, 1.0, 0.0])}")
    v = [1.0, 2.0, 9.0]
    print(f"Magnitude of {v}: {magnitude(v)}")
    v = normalize(v)
    print(f"Magnitude of {v} after normalization: {magnitude(v)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())