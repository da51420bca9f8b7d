"""Dining philosophers as asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass

# Two philosophers are enough to exercise contention on the event loop.
PHILOSOPHERS = ("Socrates", "Hypatia")

_DONE = object()


@dataclass
class Philosopher:
    name: str
    left_chopstick: asyncio.Lock
    right_chopstick: asyncio.Lock
    thoughts: asyncio.Queue

    async def think(self) -> None:
        """Share a new idea."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both chopsticks, eat briefly and put them down."""
        async with self.left_chopstick, self.right_chopstick:
            print(f"{self.name} is eating...")
            await asyncio.sleep(0.005)


async def _run(philosopher: Philosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()
    await philosopher.thoughts.put(_DONE)


async def dine(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100
) -> AsyncIterator[str]:
    """Run one task per philosopher and yield their thoughts as they come."""
    names = list(names)
    if len(names) == 1:
        raise ValueError("a single philosopher has only one chopstick")
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    chopsticks = [asyncio.Lock() for _ in names]
    philosophers = []
    for i, name in enumerate(names):
        left = chopsticks[i]
        right = chopsticks[(i + 1) % len(names)]
        if i == len(names) - 1:
            left, right = right, left
        philosophers.append(Philosopher(name, left, right, thoughts))
    tasks = [asyncio.ensure_future(_run(p, rounds)) for p in philosophers]
    try:
        remaining = len(tasks)
        while remaining:
            item = await thoughts.get()
            if item is _DONE:
                remaining -= 1
            else:
                yield item
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def _print_thoughts(rounds: int) -> None:
    async for thought in dine(PHILOSOPHERS, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the async dining philosophers.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    asyncio.run(_print_thoughts(args.rounds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())