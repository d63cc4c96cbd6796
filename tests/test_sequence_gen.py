"""
Tests for the random sequence generator.
"""

import numpy as np

from sequence_gen import generate_numbers, is_low_value
from settings import LOW_VALUE_LIMIT, MAX_VALUE, MIN_VALUE


class _HighFirstRng:
    """Wraps a real Generator but makes the first draw contain no low value."""

    def __init__(self, seed=0):
        self._rng = np.random.default_rng(seed)
        self._first = True

    def integers(self, low, high=None, size=None):
        if self._first:
            self._first = False
            return np.full(size, MAX_VALUE, dtype=np.int64)
        return self._rng.integers(low, high, size=size)


class TestGenerateNumbers:

    def test_length_bounds_and_low_value(self):
        rng = np.random.default_rng(1234)
        for count in (1, 2, 5, 10, 99, 500, 1000):
            numbers = generate_numbers(count, rng)
            assert len(numbers) == count
            assert all(MIN_VALUE <= v <= MAX_VALUE for v in numbers), numbers
            assert any(v <= LOW_VALUE_LIMIT for v in numbers), numbers

    def test_returns_plain_ints(self):
        numbers = generate_numbers(20, np.random.default_rng(7))
        assert all(type(v) is int for v in numbers)

    def test_forces_exactly_one_low_value_when_none_drawn(self):
        numbers = generate_numbers(50, _HighFirstRng())
        low = [v for v in numbers if v <= LOW_VALUE_LIMIT]
        assert len(low) == 1
        assert MIN_VALUE <= low[0] <= LOW_VALUE_LIMIT
        assert numbers.count(MAX_VALUE) == 49

    def test_single_element_is_always_low(self):
        for seed in range(20):
            numbers = generate_numbers(1, np.random.default_rng(seed))
            assert numbers[0] <= LOW_VALUE_LIMIT

    def test_default_rng(self):
        numbers = generate_numbers(30)
        assert len(numbers) == 30
        assert any(is_low_value(v) for v in numbers)


def test_is_low_value_boundary():
    assert is_low_value(1)
    assert is_low_value(LOW_VALUE_LIMIT)
    assert not is_low_value(LOW_VALUE_LIMIT + 1)
