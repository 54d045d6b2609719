"""Tests for the free-scatter planner."""

import itertools

import numpy as np
import pytest

from magicgen._types import CompositionRules, ShapeArchetype
from magicgen.layouts.scatter import (
    effective_spacing, focal_position, in_bounds, overlaps_any, place_shapes,
)
from magicgen.rng import SeededRandom
from magicgen.themes import get_theme


@pytest.fixture
def archetypes():
    return get_theme("sea").archetypes


@pytest.fixture
def scene_rules():
    return CompositionRules(focal_point=(0.5, 0.5), layering=True, density="medium", min_spacing=0.02)


def _gap(a, b):
    """Largest axis gap between two placements (negative when they overlap)."""
    return max(
        (b.x - b.width / 2) - (a.x + a.width / 2),
        (a.x - a.width / 2) - (b.x + b.width / 2),
        (b.y - b.height / 2) - (a.y + a.height / 2),
        (a.y - a.height / 2) - (b.y + b.height / 2),
    )


class TestHelpers:
    def test_effective_spacing(self):
        assert effective_spacing(CompositionRules(density="sparse", min_spacing=0.02)) == 0.04
        assert effective_spacing(CompositionRules(density="medium", min_spacing=0.02)) == 0.02
        assert effective_spacing(CompositionRules(density="dense", min_spacing=0.02)) == 0.01

    def test_in_bounds(self):
        assert in_bounds(0.5, 0.5, 0.2, 0.2)
        assert in_bounds(0.0, 0.0, 0.1, 0.1)
        assert not in_bounds(-0.05, 0.5, 0.2, 0.2)
        assert not in_bounds(0.5, 1.05, 0.2, 0.2)

    def test_overlaps_empty(self):
        assert not overlaps_any(np.empty((0, 4)), 0.5, 0.5, 0.2, 0.2, 0.0)

    def test_touching_counts_as_overlap(self):
        boxes = np.array([[0.5, 0.5, 0.25, 0.25]])
        assert overlaps_any(boxes, 0.75, 0.5, 0.25, 0.25, 0.0)
        assert not overlaps_any(boxes, 0.875, 0.5, 0.25, 0.25, 0.0)

    def test_spacing_inflates_candidate(self):
        boxes = np.array([[0.5, 0.5, 0.25, 0.25]])
        assert overlaps_any(boxes, 0.875, 0.5, 0.25, 0.25, 0.125)
        assert not overlaps_any(boxes, 0.875, 0.5, 0.25, 0.25, 0.0625)

    def test_focal_pull(self):
        rng_free, rng_pulled = SeededRandom(3), SeededRandom(3)
        free = [focal_position(rng_free, None) for _ in range(500)]
        pulled = [focal_position(rng_pulled, (0.5, 0.5), 0.5) for _ in range(500)]
        dist = lambda pts: np.mean([np.hypot(x - 0.5, y - 0.5) for x, y in pts])
        assert dist(pulled) < dist(free)


class TestPlaceShapes:
    def test_empty_palette(self, scene_rules):
        layout = place_shapes([], 10, scene_rules, seed=1)
        assert layout.shapes == []

    def test_zero_weight_palette(self, scene_rules):
        layout = place_shapes([ShapeArchetype("circle", weight=0.0)], 10, scene_rules, seed=1)
        assert len(layout) == 0

    def test_zero_target(self, archetypes, scene_rules):
        assert len(place_shapes(archetypes, 0, scene_rules, seed=1)) == 0

    def test_deterministic(self, archetypes, scene_rules):
        a = place_shapes(archetypes, 20, scene_rules, seed=99)
        b = place_shapes(archetypes, 20, scene_rules, seed=99)
        assert a.shapes == b.shapes
        assert a.final_seed == b.final_seed

    @pytest.mark.parametrize("seed", range(1, 11))
    def test_count_bounds(self, archetypes, scene_rules, seed):
        layout = place_shapes(archetypes, 25, scene_rules, seed=seed)
        assert 0.8 * 25 <= len(layout) <= 25

    @pytest.mark.parametrize("seed", range(1, 6))
    def test_layer_order(self, archetypes, scene_rules, seed):
        layers = [s.layer for s in place_shapes(archetypes, 25, scene_rules, seed=seed).shapes]
        assert layers == sorted(layers)

    @pytest.mark.parametrize("seed", range(1, 6))
    def test_sparse_spacing(self, archetypes, seed):
        rules = CompositionRules(density="sparse", min_spacing=0.02)
        spacing = effective_spacing(rules)
        free = [s for s in place_shapes(archetypes, 15, rules, seed=seed).shapes if not s.forced]
        for a, b in itertools.combinations(free, 2):
            assert _gap(a, b) > spacing - 1e-9

    def test_unforced_in_bounds(self, archetypes, scene_rules):
        for s in place_shapes(archetypes, 25, scene_rules, seed=4).shapes:
            if not s.forced:
                assert in_bounds(s.x, s.y, s.width, s.height)

    def test_forced_placement(self, scene_rules):
        huge = [ShapeArchetype("rectangle", size_range=(0.9, 0.95), aspect_range=(1.0, 1.0))]
        flat = CompositionRules(layering=False)
        layout = place_shapes(huge, 5, flat, seed=7)
        assert len(layout) >= 4
        assert any(s.forced for s in layout.shapes)

    def test_preferred_layer_when_flat(self):
        back = [ShapeArchetype("circle", layer_preference="background")]
        layout = place_shapes(back, 10, CompositionRules(layering=False), seed=3)
        assert {s.layer for s in layout.shapes} == {0}

    def test_rotation_limits(self, archetypes, scene_rules):
        for s in place_shapes(archetypes, 25, scene_rules, seed=8).shapes:
            if not s.archetype.can_rotate:
                assert s.rotation == 0.0
            else:
                assert abs(s.rotation) <= s.archetype.max_rotation

    def test_shared_rng_continues(self, archetypes, scene_rules):
        rng = SeededRandom(5)
        layout = place_shapes(archetypes, 10, scene_rules, rng=rng)
        assert layout.final_seed == rng.seed
        assert layout.seed == 5
