"""Dining philosophers with threads and locks."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_DONE = object()


@dataclass
class Philosopher:
    name: str
    left_chopstick: threading.Lock
    right_chopstick: threading.Lock
    thoughts: queue.Queue

    def think(self) -> None:
        """Share a new idea."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both chopsticks, eat briefly and put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_chopstick, self.right_chopstick:
            print(f"{self.name} is eating...")
            time.sleep(0.01)


def _run(philosopher: Philosopher, rounds: int) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        philosopher.thoughts.put(_DONE)


def _drain(thoughts: queue.Queue, count: int) -> Iterator[str]:
    remaining = count
    while remaining:
        item = thoughts.get()
        if item is _DONE:
            remaining -= 1
        else:
            yield item


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Start one thread per philosopher and yield their thoughts as they come."""
    names = list(names)
    if len(names) == 1:
        raise ValueError("a single philosopher has only one chopstick")
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    chopsticks = [threading.Lock() for _ in names]
    for i, name in enumerate(names):
        left = chopsticks[i]
        right = chopsticks[(i + 1) % len(chopsticks)]
        # Break the symmetry so that the philosophers cannot deadlock.
        if i == len(chopsticks) - 1:
            left, right = right, left
        philosopher = Philosopher(name, left, right, thoughts)
        threading.Thread(target=_run, args=(philosopher, rounds), daemon=True).start()
    return _drain(thoughts, len(names))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the dining philosophers.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    for thought in dine(PHILOSOPHERS, args.rounds):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())