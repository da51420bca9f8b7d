import pytest

from practicekit.matrix import main, transpose

GRID = [
    [1, 2, 3],
    [4, 5, 6],
    [7, 8, 9],
]


def test_transpose():
    assert transpose(GRID) == [
        [1, 4, 7],
        [2, 5, 8],
        [3, 6, 9],
    ]


def test_transpose_twice_is_identity():
    assert transpose(transpose(GRID)) == GRID


def test_input_not_modified():
    original = [row[:] for row in GRID]
    transpose(GRID)
    assert GRID == original


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        transpose([[1, 2, 3], [4, 5]])


def test_main_prints_both(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "transposed" in out
    assert "[101, 201, 301]" in out