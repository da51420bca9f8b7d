"""Rotation ciphers over ASCII letters."""

from __future__ import annotations

import functools
import string
from typing import BinaryIO


@functools.lru_cache(maxsize=None)
def _table(rot: int) -> bytes:
    shift = rot % 26
    table = bytearray(range(256))
    for alphabet in (string.ascii_uppercase, string.ascii_lowercase):
        letters = alphabet.encode("ascii")
        rotated = letters[shift:] + letters[:shift]
        for plain, coded in zip(letters, rotated):
            table[plain] = coded
    return bytes(table)


def rotate_bytes(data: bytes, rot: int) -> bytes:
    """Rotate every ASCII letter in ``data`` by ``rot``, leaving other bytes alone."""
    return bytes(data).translate(_table(rot))


class RotDecoder:
    """A readable stream that rotates the letters read from another stream."""

    def __init__(self, stream: BinaryIO, rot: int) -> None:
        self.stream = stream
        self.rot = rot

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all when negative) and rotate them."""
        return rotate_bytes(self.stream.read(size), self.rot)

    def readable(self) -> bool:
        return True