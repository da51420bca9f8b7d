"""Iterating over the names in a directory."""

from __future__ import annotations

import argparse
import os
import pprint
import sys
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class DirectoryIterator:
    """Yields every name in a directory, including its own and its parent's."""

    def __init__(self, path: PathArg) -> None:
        self.path = os.fspath(path)
        try:
            self._entries = os.scandir(self.path)
        except ValueError as err:
            raise ValueError(f"Invalid path: {err}") from err
        if isinstance(self.path, bytes):
            self._special = [os.curdir.encode(), os.pardir.encode()]
        else:
            self._special = [os.curdir, os.pardir]
        self._closed = False

    def __iter__(self) -> DirectoryIterator:
        return self

    def __next__(self) -> Union[str, bytes]:
        if self._closed:
            raise StopIteration
        if self._special:
            return self._special.pop(0)
        try:
            return next(self._entries).name
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        """Release the directory handle; later iteration yields nothing."""
        if not self._closed:
            self._closed = True
            self._entries.close()

    def __enter__(self) -> DirectoryIterator:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the names in a directory.")
    parser.add_argument("path", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        with DirectoryIterator(args.path) as entries:
            files = list(entries)
    except (OSError, ValueError) as err:
        print(f"Error: Could not open {args.path!r}: {err}", file=sys.stderr)
        return 1
    print(f"files: {pprint.pformat(files)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())