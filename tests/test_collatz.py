import pytest

from practicekit.collatz import collatz_length, main


def test_collatz_length():
    assert collatz_length(11) == 15


@pytest.mark.parametrize("n", [1, 0, -5])
def test_start_at_or_below_one_has_length_one(n):
    assert collatz_length(n) == 1


def test_even_step_adds_one():
    assert collatz_length(22) == collatz_length(11) + 1


def test_main_prints_length(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Length: 15\n"