"""Tests for placement -> shape descriptor synthesis."""

import numpy as np
import pytest

from magicgen._types import ShapeArchetype
from magicgen.config import NATIVE_KINDS, SHAPE_KINDS
from magicgen.layouts._types import PlacedShape
from magicgen.rng import SeededRandom
from magicgen.shapes import (
    CircleShape, HeartShape, RectangleShape, StarShape, TriangleShape,
)
from magicgen.synth import counter_ids, synthesize, synthesize_all


@pytest.fixture
def rng():
    return SeededRandom(17)


def _placed(kind, x=0.5, y=0.5, width=0.2, height=0.1, rotation=0.3):
    return PlacedShape(x, y, width, height, rotation, ShapeArchetype(kind), layer=1)


class TestCounterIds:
    def test_format(self):
        ids = counter_ids("gen-42")
        assert [ids(), ids(), ids()] == ["gen-42-0000", "gen-42-0001", "gen-42-0002"]

    def test_independent_counters(self):
        a, b = counter_ids(), counter_ids()
        a()
        assert b() == "gen-0000"


class TestNativeKinds:
    def test_rectangle_top_left(self, rng):
        shape = synthesize(_placed("rectangle"), rng, "r")
        assert isinstance(shape, RectangleShape)
        assert (shape.x, shape.y) == pytest.approx((0.4, 0.45))
        assert (shape.width, shape.height) == pytest.approx((0.2, 0.1))
        assert shape.rotation == 0.3

    def test_triangle_and_heart_boxes(self, rng):
        assert isinstance(synthesize(_placed("triangle"), rng, "t"), TriangleShape)
        heart = synthesize(_placed("heart"), rng, "h")
        assert isinstance(heart, HeartShape)
        assert heart.x == pytest.approx(0.4)

    def test_circle_uses_smaller_side(self, rng):
        shape = synthesize(_placed("circle"), rng, "c")
        assert isinstance(shape, CircleShape)
        assert (shape.x, shape.y) == (0.5, 0.5)
        assert shape.radius == pytest.approx(0.05)
        assert shape.rotation == 0.0

    def test_star(self, rng):
        for _ in range(50):
            shape = synthesize(_placed("star"), rng, "s")
            assert isinstance(shape, StarShape)
            assert shape.outer_radius == pytest.approx(0.05)
            assert shape.inner_radius == pytest.approx(0.4 * shape.outer_radius)
            assert shape.points in (4, 5, 6)

    def test_stroke_defaults(self, rng):
        shape = synthesize(_placed("rectangle"), rng, "r")
        assert shape.stroke_color == "#000000"
        assert shape.stroke_width == 2.5


class TestSemanticKinds:
    @pytest.mark.parametrize("kind", ["oval", "wave", "spiral"])
    def test_round_kinds_use_larger_side(self, rng, kind):
        shape = synthesize(_placed(kind), rng, "o")
        assert isinstance(shape, CircleShape)
        assert shape.radius == pytest.approx(0.1)

    def test_ring_uses_smaller_side(self, rng):
        shape = synthesize(_placed("ring"), rng, "o")
        assert isinstance(shape, CircleShape)
        assert shape.radius == pytest.approx(0.05)

    def test_diamond_is_rotated_square(self, rng):
        shape = synthesize(_placed("diamond"), rng, "d")
        assert isinstance(shape, RectangleShape)
        assert shape.width == shape.height == pytest.approx(0.1)
        assert shape.rotation == pytest.approx(np.pi / 4)
        assert (shape.x, shape.y) == pytest.approx((0.45, 0.45))

    def test_crescent_is_centred_smaller_heart(self, rng):
        shape = synthesize(_placed("crescent"), rng, "c")
        assert isinstance(shape, HeartShape)
        assert (shape.width, shape.height) == pytest.approx((0.16, 0.08))
        assert shape.x + shape.width / 2 == pytest.approx(0.5)
        assert shape.y + shape.height / 2 == pytest.approx(0.5)

    def test_unknown_kind_falls_back_to_rectangle(self, rng):
        assert isinstance(synthesize(_placed("cloud"), rng, "u"), RectangleShape)

    def test_every_kind_becomes_native(self, rng):
        for kind in SHAPE_KINDS:
            assert synthesize(_placed(kind), rng, kind).type in NATIVE_KINDS


class TestSynthesizeAll:
    def test_ids_and_shared_timestamp(self, rng):
        placements = [_placed(k) for k in ("circle", "star", "heart")]
        shapes = synthesize_all(placements, rng, id_source=counter_ids("p"), clock=lambda: 123.0)
        assert [s.id for s in shapes] == ["p-0000", "p-0001", "p-0002"]
        assert {s.created_at for s in shapes} == {123.0}
        assert {s.updated_at for s in shapes} == {123.0}

    def test_order_preserved(self, rng):
        placements = [_placed(k) for k in ("rectangle", "circle", "triangle")]
        kinds = [s.type for s in synthesize_all(placements, rng)]
        assert kinds == ["rectangle", "circle", "triangle"]

    def test_empty(self, rng):
        assert synthesize_all([], rng) == []
