"""Tests for the grid (tessellation) planner."""

import pytest

from magicgen._types import ShapeArchetype
from magicgen.layouts.grid import cell_center, cell_size, place_grid
from magicgen.themes import get_theme


@pytest.fixture
def archetypes():
    return get_theme("garden").archetypes


class TestCells:
    def test_cell_size(self):
        assert cell_size(4, 4) == pytest.approx((0.2, 0.2))
        assert cell_size(2, 4) == pytest.approx((0.4, 0.2))

    def test_cell_center(self):
        assert cell_center(0, 0, 4, 4) == pytest.approx((0.2, 0.2))
        assert cell_center(3, 3, 4, 4) == pytest.approx((0.8, 0.8))


class TestPlaceGrid:
    def test_count(self, archetypes):
        assert len(place_grid(archetypes, 4, 3, seed=1)) == 12

    def test_empty_inputs(self, archetypes):
        assert len(place_grid(archetypes, 0, 4, seed=1)) == 0
        assert len(place_grid(archetypes, 4, 0, seed=1)) == 0
        assert len(place_grid([], 4, 4, seed=1)) == 0

    def test_row_major_without_jitter(self, archetypes):
        layout = place_grid(archetypes, 3, 2, seed=5)
        expected = [cell_center(c, r, 3, 2) for r in range(2) for c in range(3)]
        for shape, (cx, cy) in zip(layout.shapes, expected):
            assert (shape.x, shape.y) == pytest.approx((cx, cy))

    @pytest.mark.parametrize("seed", [1, 7, 123])
    def test_jitter_bounds(self, archetypes, seed):
        cols, rows, jitter = 4, 4, 0.15
        cell_w, cell_h = cell_size(cols, rows)
        layout = place_grid(archetypes, cols, rows, jitter=jitter, seed=seed)
        centers = [cell_center(c, r, cols, rows) for r in range(rows) for c in range(cols)]
        for shape, (cx, cy) in zip(layout.shapes, centers):
            assert abs(shape.x - cx) <= jitter * cell_w + 1e-12
            assert abs(shape.y - cy) <= jitter * cell_h + 1e-12

    def test_size_capped_by_cell(self):
        big = [ShapeArchetype("circle", size_range=(0.5, 0.6))]
        layout = place_grid(big, 5, 5, size_multiplier=2.0, seed=1)
        for shape in layout.shapes:
            assert shape.width == pytest.approx(0.8 * 0.16)
            assert shape.width == shape.height

    def test_single_layer(self, archetypes):
        assert {s.layer for s in place_grid(archetypes, 4, 4, seed=2).shapes} == {0}

    def test_deterministic(self, archetypes):
        a = place_grid(archetypes, 4, 4, jitter=0.1, seed=11)
        b = place_grid(archetypes, 4, 4, jitter=0.1, seed=11)
        assert a.shapes == b.shapes
