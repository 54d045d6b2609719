"""
Radial (mandala) placement.

Rings are laid out from the centre outward.  Ring ``r`` holds
``floor(shapes_per_ring * (r + 1))`` copies of a single archetype at a
single size, evenly spaced around the circle with the first copy at
twelve o'clock, so every ring is exactly rotationally symmetric.
"""

from typing import Optional, Sequence

import numpy as np

from magicgen._types import ShapeArchetype
from magicgen.config import MANDALA_CENTER, MANDALA_MAX_RADIUS, MANDALA_RING_SHRINK
from magicgen.layouts._types import Layout, PlacedShape
from magicgen.rng import RandomSource, SeededRandom, has_positive_weight


def ring_counts(rings: int, shapes_per_ring: float):
    """Shapes in each ring, innermost first."""
    return [int(np.floor(shapes_per_ring * (r + 1))) for r in range(rings)]


def place_mandala(
    archetypes: Sequence[ShapeArchetype],
    rings: int,
    shapes_per_ring: float,
    size_multiplier: float = 1.0,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    center=MANDALA_CENTER,
    max_radius: float = MANDALA_MAX_RADIUS,
) -> Layout:
    """Concentric rings of identical shapes; ``layer`` is the ring index."""
    rng = rng or SeededRandom(seed)
    start_seed = rng.seed
    if rings <= 0 or not has_positive_weight(archetypes):
        return Layout([], start_seed, rng.seed)

    cx, cy = center
    placed = []
    for ring, count in enumerate(ring_counts(rings, shapes_per_ring)):
        if count <= 0:
            continue
        radius = max_radius * (ring + 1) / rings
        step = 2 * np.pi / count

        # One archetype and one size per ring keeps the ring symmetric
        archetype = rng.weighted_pick(archetypes)
        shrink = 1 - ring * MANDALA_RING_SHRINK
        size = rng.between(*archetype.size_range) * size_multiplier * shrink

        for i in range(count):
            angle = step * i - np.pi / 2
            rotation = angle + np.pi / 2 if archetype.can_rotate else 0.0
            placed.append(PlacedShape(
                x=float(cx + np.cos(angle) * radius),
                y=float(cy + np.sin(angle) * radius),
                width=size,
                height=size,
                rotation=float(rotation),
                archetype=archetype,
                layer=ring,
            ))

    return Layout(placed, start_seed, rng.seed)
