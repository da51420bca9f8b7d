from practicekit.minimum import minimum


def test_integers():
    assert minimum(0, 10) == 0
    assert minimum(500, 123) == 123


def test_chars():
    assert minimum("a", "z") == "a"
    assert minimum("7", "1") == "1"


def test_strings():
    assert minimum("hello", "goodbye") == "goodbye"
    assert minimum("bat", "armadillo") == "armadillo"


def test_tie_returns_left():
    left = [1, 2]
    right = [1, 2]
    assert minimum(left, right) is left