import asyncio
import collections

import pytest

from practicekit.async_philosophers import Philosopher, dine


@pytest.mark.asyncio
async def test_think_sends_thought():
    philosopher = Philosopher("Hypatia", asyncio.Lock(), asyncio.Lock(), asyncio.Queue())
    await philosopher.think()
    assert philosopher.thoughts.get_nowait() == "Eureka! Hypatia has a new idea!"


@pytest.mark.asyncio
async def test_eat_releases_chopsticks(capsys):
    philosopher = Philosopher("Hypatia", asyncio.Lock(), asyncio.Lock(), asyncio.Queue())
    await philosopher.eat()
    assert not philosopher.left_chopstick.locked()
    assert not philosopher.right_chopstick.locked()
    assert capsys.readouterr().out == "Hypatia is eating...\n"


@pytest.mark.asyncio
async def test_dine_collects_every_thought():
    names = ["Socrates", "Hypatia", "Plato"]
    thoughts = [thought async for thought in dine(names, 4)]
    counts = collections.Counter(thoughts)
    assert counts == {f"Eureka! {name} has a new idea!": 4 for name in names}


@pytest.mark.asyncio
async def test_dine_stops_early_without_hanging():
    received = []
    generator = dine(["Socrates", "Hypatia"], 50)
    async for thought in generator:
        received.append(thought)
        if len(received) == 3:
            break
    await generator.aclose()
    assert len(received) == 3


@pytest.mark.asyncio
async def test_dine_single_philosopher_rejected():
    with pytest.raises(ValueError):
        async for _ in dine(["Solo"], 1):
            pass