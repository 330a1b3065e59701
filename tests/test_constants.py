import pytest

from lawndefense.constants import rand_int


@pytest.mark.parametrize("low, high", [(0, 3), (-5, 5), (63, 263), (1, 5)])
def test_rand_int_stays_within_bounds(low, high):
    for _ in range(500):
        value = rand_int(low, high)
        assert low <= value <= high


def test_rand_int_accepts_swapped_bounds():
    for _ in range(500):
        value = rand_int(10, 2)
        assert 2 <= value <= 10


def test_rand_int_with_equal_bounds_returns_that_value():
    assert rand_int(7, 7) == 7


def test_rand_int_is_inclusive_of_both_ends():
    seen = {rand_int(0, 3) for _ in range(2000)}
    assert seen == {0, 1, 2, 3}


def test_rand_int_returns_int():
    value = rand_int(-1, 1)
    assert value in (-1, 0, 1)
    assert isinstance(value, int)