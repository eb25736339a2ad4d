import pytest
from game.guess import Guess

def test_valid_line():
    g = Guess("0 5 7 3", num_colors=8)
    assert g.is_valid
    assert g.get_guess() == [0, 5, 7, 3]
    assert str(g) == "0 5 7 3"

def test_valid_tokens():
    g = Guess(["1", "1", "0", "1"], num_colors=2)
    assert g.is_valid
    assert g.get_guess() == [1, 1, 0, 1]

@pytest.mark.parametrize("line,message", [
    ("1 2 3", "Expected 4 numbers"),
    ("1 2 3 4 5", "Expected 4 numbers"),
    ("1 2 x 4", "'x' is not a number"),
    ("1 2 3 8", "Invalid color '8'"),
    ("-1 2 3 4", "Invalid color '-1'"),
])
def test_invalid_strict_raises(line, message):
    g = Guess(line, num_colors=8)
    assert not g.is_valid
    assert g.get_guess() == []
    with pytest.raises(ValueError, match=message):
        g.validate()

def test_empty_guess():
    g = Guess(None)
    assert not g.is_valid
    assert str(g) == "EMPTY"
    assert g.validate(strict=False) is False
