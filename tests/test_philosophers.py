import collections
import queue
import threading

import pytest

from practicekit.philosophers import Philosopher, dine


def _philosopher(name="Plato"):
    return Philosopher(name, threading.Lock(), threading.Lock(), queue.Queue())


def test_think_sends_thought():
    philosopher = _philosopher()
    philosopher.think()
    assert philosopher.thoughts.get_nowait() == "Eureka! Plato has a new idea!"


def test_eat_releases_chopsticks(capsys):
    philosopher = _philosopher()
    philosopher.eat()
    assert not philosopher.left_chopstick.locked()
    assert not philosopher.right_chopstick.locked()
    assert capsys.readouterr().out == "Plato is trying to eat\nPlato is eating...\n"


def test_dine_collects_every_thought():
    names = ["Socrates", "Hypatia", "Plato"]
    thoughts = list(dine(names, 3))
    counts = collections.Counter(thoughts)
    assert counts == {f"Eureka! {name} has a new idea!": 3 for name in names}


def test_dine_with_no_philosophers_is_empty():
    assert list(dine([], 5)) == []


def test_dine_single_philosopher_rejected():
    with pytest.raises(ValueError):
        dine(["Solo"], 1)