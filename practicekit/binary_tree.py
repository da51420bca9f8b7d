"""A set of values stored in an unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T", bound=Any)


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BinaryTree(Generic[T]):
    """A container storing a set of values; duplicates are stored once."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add ``value`` unless an equal value is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"