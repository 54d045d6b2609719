"""Tests for the seeded Park-Miller generator."""

import pytest

from magicgen._types import ShapeArchetype
from magicgen.config import RNG_MODULUS
from magicgen.rng import SeededRandom, has_positive_weight, normalize_seed


@pytest.fixture
def rng():
    return SeededRandom(12345)


class TestSeeding:
    def test_same_seed_same_sequence(self):
        a, b = SeededRandom(42), SeededRandom(42)
        assert [a.next() for _ in range(100)] == [b.next() for _ in range(100)]

    def test_different_seeds_differ(self):
        a, b = SeededRandom(1), SeededRandom(2)
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_first_value_seed_one(self):
        assert SeededRandom(1).next() == 16806 / (RNG_MODULUS - 1)

    def test_zero_and_modulus_map_to_one(self):
        assert SeededRandom(0).seed == 1
        assert SeededRandom(RNG_MODULUS).seed == 1
        assert normalize_seed(0) == 1

    def test_negative_seed_is_valid(self):
        state = normalize_seed(-1)
        assert 1 <= state < RNG_MODULUS

    def test_unseeded_gets_valid_state(self):
        assert 1 <= SeededRandom().seed < RNG_MODULUS

    def test_seed_property_continues_sequence(self, rng):
        for _ in range(5):
            rng.next()
        clone = SeededRandom(rng.seed)
        assert [rng.next() for _ in range(10)] == [clone.next() for _ in range(10)]


class TestDraws:
    def test_next_in_unit_interval(self, rng):
        values = [rng.next() for _ in range(5000)]
        assert min(values) >= 0.0
        assert max(values) < 1.0

    def test_between(self, rng):
        values = [rng.between(-2.0, 3.0) for _ in range(1000)]
        assert all(-2.0 <= v < 3.0 for v in values)

    def test_int_between_inclusive(self, rng):
        values = {rng.int_between(1, 3) for _ in range(1000)}
        assert values == {1, 2, 3}

    def test_pick(self, rng):
        items = ["a", "b", "c"]
        assert {rng.pick(items) for _ in range(200)} == set(items)

    def test_pick_empty_raises(self, rng):
        with pytest.raises(ValueError):
            rng.pick([])

    def test_shuffle_is_permutation(self, rng):
        items = list(range(20))
        shuffled = rng.shuffle(list(items))
        assert sorted(shuffled) == items
        assert shuffled != items

    def test_shuffle_deterministic(self):
        assert SeededRandom(9).shuffle(list(range(10))) == SeededRandom(9).shuffle(list(range(10)))


class TestWeightedPick:
    def test_zero_weight_never_chosen(self, rng):
        items = [ShapeArchetype("circle", weight=0.0), ShapeArchetype("star", weight=1.0)]
        assert {rng.weighted_pick(items).kind for _ in range(500)} == {"star"}

    def test_no_positive_weight_raises(self, rng):
        with pytest.raises(ValueError):
            rng.weighted_pick([ShapeArchetype("circle", weight=0.0)])

    def test_proportional(self, rng):
        items = [ShapeArchetype("circle", weight=3.0), ShapeArchetype("star", weight=1.0)]
        picks = [rng.weighted_pick(items).kind for _ in range(4000)]
        assert 0.7 < picks.count("circle") / len(picks) < 0.8

    def test_has_positive_weight(self):
        assert has_positive_weight([ShapeArchetype("circle", weight=0.5)])
        assert not has_positive_weight([ShapeArchetype("circle", weight=0.0)])
        assert not has_positive_weight([])
