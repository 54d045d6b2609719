"""
Shape synthesis: abstract placements -> concrete shape descriptors.

The five native kinds map one to one.  Semantic kinds have no primitive of
their own and are approximated:

    oval, wave, spiral  -> circle, radius = max(width, height) / 2
    ring                -> circle, radius = min(width, height) / 2
    diamond             -> square rectangle rotated exactly 45 degrees
    crescent            -> heart at 80 % size, centred on the placement

The approximations lose the intended silhouette (no true ellipse, annulus,
or curve primitives exist downstream).  Unknown kinds fall back to a
rectangle.
"""

import itertools
import time
from typing import Callable, Iterable, List, Optional

from magicgen.config import (
    CRESCENT_SCALE, DIAMOND_ROTATION, STAR_DEFAULT_POINTS, STAR_INNER_RATIO,
    STAR_VARIANT_THRESHOLD,
)
from magicgen.layouts._types import PlacedShape
from magicgen.rng import RandomSource
from magicgen.shapes import (
    BaseShape, CircleShape, HeartShape, RectangleShape, StarShape, TriangleShape,
)

IdSource = Callable[[], str]
Clock = Callable[[], float]


def counter_ids(prefix: str = "gen") -> IdSource:
    """Id source yielding ``<prefix>-0000``, ``<prefix>-0001``, ..."""
    counter = itertools.count()
    return lambda: f"{prefix}-{next(counter):04d}"


# ---------------------------------------------------------------------------
# Per-kind builders (all take the placement's centre)
# ---------------------------------------------------------------------------

def _box(cls, cx, cy, width, height, **base):
    return cls(x=cx - width / 2, y=cy - height / 2, width=width, height=height, **base)


def _circle(cx, cy, radius, **base):
    base["rotation"] = 0.0
    return CircleShape(x=cx, y=cy, radius=radius, **base)


def _star(cx, cy, outer_radius, rng: RandomSource, **base):
    points = STAR_DEFAULT_POINTS
    if rng.next() > STAR_VARIANT_THRESHOLD:
        points = rng.int_between(4, 6)
    return StarShape(
        x=cx, y=cy,
        outer_radius=outer_radius,
        inner_radius=outer_radius * STAR_INNER_RATIO,
        points=points,
        **base,
    )


def synthesize(placed: PlacedShape, rng: RandomSource, shape_id: str,
               timestamp: float = 0.0) -> BaseShape:
    """Convert one placement into a native shape descriptor."""
    cx, cy = placed.x, placed.y
    w, h = placed.width, placed.height
    base = dict(id=shape_id, rotation=placed.rotation,
                created_at=timestamp, updated_at=timestamp)
    kind = placed.archetype.kind

    if kind == "rectangle":
        return _box(RectangleShape, cx, cy, w, h, **base)
    if kind == "circle" or kind == "ring":
        return _circle(cx, cy, min(w, h) / 2, **base)
    if kind == "triangle":
        return _box(TriangleShape, cx, cy, w, h, **base)
    if kind == "star":
        return _star(cx, cy, min(w, h) / 2, rng, **base)
    if kind == "heart":
        return _box(HeartShape, cx, cy, w, h, **base)
    if kind in ("oval", "wave", "spiral"):
        return _circle(cx, cy, max(w, h) / 2, **base)
    if kind == "diamond":
        side = min(w, h)
        base["rotation"] = DIAMOND_ROTATION
        return _box(RectangleShape, cx, cy, side, side, **base)
    if kind == "crescent":
        return _box(HeartShape, cx, cy, w * CRESCENT_SCALE, h * CRESCENT_SCALE, **base)
    return _box(RectangleShape, cx, cy, w, h, **base)


def synthesize_all(
    placements: Iterable[PlacedShape],
    rng: RandomSource,
    id_source: Optional[IdSource] = None,
    clock: Optional[Clock] = None,
) -> List[BaseShape]:
    """Synthesize *placements* in order, stamping ids and one shared creation time."""
    id_source = id_source or counter_ids()
    timestamp = (clock or time.time)()
    return [synthesize(p, rng, id_source(), timestamp) for p in placements]
