"""Tests for data generation."""

import random

import pytest

from sortvis.data import DATA_KINDS, generate_data, is_sorted, shuffle
from sortvis.settings import PROGRESSION_STEP, RANDOM_VALUE_LIMIT


class TestGenerateData:
    def test_random_bounds(self, rng):
        arr = generate_data("random", 200, rng)
        assert len(arr) == 200
        assert all(isinstance(v, int) and 0 <= v < RANDOM_VALUE_LIMIT for v in arr)

    def test_progression_is_shuffled_sequence(self, rng):
        arr = generate_data("progression", 50, rng)
        assert sorted(arr) == [i * PROGRESSION_STEP for i in range(50)]

    def test_seeded_generation_repeats(self):
        a = generate_data("random", 30, random.Random(7))
        b = generate_data("random", 30, random.Random(7))
        assert a == b

    def test_empty(self):
        assert generate_data("random", 0) == []
        assert generate_data("progression", 0) == []

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            generate_data("sawtooth", 10)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            generate_data("random", -1)

    def test_kinds(self):
        assert DATA_KINDS == ("random", "progression")


class TestHelpers:
    def test_is_sorted(self):
        assert is_sorted([])
        assert is_sorted([1])
        assert is_sorted([1, 1, 2])
        assert not is_sorted([2, 1])

    def test_shuffle_keeps_values(self, rng):
        arr = list(range(20))
        shuffle(arr, rng)
        assert sorted(arr) == list(range(20))
