"""
Unit tests for the Fisher-Yates shuffle.
"""

import random
from collections import Counter
from itertools import permutations

from mcq_toolkit.builder.shuffle import shuffled


class TestShuffled:
    """Tests for shuffled()."""

    def test_returns_permutation_without_mutating_input(self):
        items = [1, 2, 3, 4, 5]
        result = shuffled(items, random.Random(1))
        assert sorted(result) == items
        assert items == [1, 2, 3, 4, 5]
        assert result is not items

    def test_keeps_object_identity(self):
        items = [object(), object(), object()]
        result = shuffled(items, random.Random(3))
        assert {id(x) for x in result} == {id(x) for x in items}

    def test_seeded_rng_is_reproducible(self):
        items = list(range(20))
        assert shuffled(items, random.Random(42)) == shuffled(items, random.Random(42))

    def test_empty_and_single(self):
        assert shuffled([], random.Random(0)) == []
        assert shuffled(["a"], random.Random(0)) == ["a"]

    def test_accepts_tuples(self):
        assert sorted(shuffled(("b", "a"))) == ["a", "b"]

    def test_all_permutations_reachable(self):
        rng = random.Random(2024)
        counts = Counter(tuple(shuffled([1, 2, 3], rng)) for _ in range(3000))
        assert set(counts) == set(permutations([1, 2, 3]))
        # Roughly uniform: each of 6 outcomes near 500
        assert all(350 < n < 650 for n in counts.values())
