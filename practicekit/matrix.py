"""Matrix transposition."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix given as rows."""
    return [list(column) for column in zip(*matrix, strict=True)]


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Transpose a sample matrix.").parse_args(argv)
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    print(f"matrix = {matrix}")
    transposed = transpose(matrix)
    print(f"transposed = {transposed}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())