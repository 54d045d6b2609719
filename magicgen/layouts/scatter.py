"""
Free-scatter placement: the layout behind the ``scene`` and ``freeform`` styles.

Shapes are dropped one by one.  Each gets a weighted archetype, a depth
layer, a size scaled by that layer, and a position pulled toward the focal
point.  Candidate positions are retried until the shape fits on the canvas
without crowding its neighbours; when a shape cannot be fitted and the page
is still thin (below 80 % of the target) it is placed anyway.

Layer 0 is the background: larger, spread-out shapes.  Layer 2 is the
foreground: smaller shapes clustered around the focal point.
"""

from typing import Optional, Sequence

import numpy as np

from magicgen._types import CompositionRules, ShapeArchetype
from magicgen.config import (
    CANVAS_OVERFLOW, DENSITY_SPACING, FLAT_FOCAL_STRENGTH,
    FORCED_FOCAL_STRENGTH, FORCED_PLACEMENT_FLOOR, LAYER_FOCAL_STRENGTHS,
    LAYER_SIZE_FACTORS, MAX_ATTEMPTS, NUM_LAYERS,
)
from magicgen.layouts._types import Layout, PlacedShape
from magicgen.rng import RandomSource, SeededRandom, has_positive_weight

_PREFERRED_LAYER = {"background": 0, "midground": 1, "foreground": 2}


# ---------------------------------------------------------------------------
# Per-shape draws
# ---------------------------------------------------------------------------

def focal_position(rng: RandomSource, focal_point, strength=FLAT_FOCAL_STRENGTH):
    """Uniform position, blended toward *focal_point* by a random pull in [0, strength)."""
    x, y = rng.next(), rng.next()
    if focal_point is not None:
        pull = rng.next() * strength
        x = x * (1 - pull) + focal_point[0] * pull
        y = y * (1 - pull) + focal_point[1] * pull
    return x, y


def assign_layer(archetype: ShapeArchetype, rng: RandomSource) -> int:
    if archetype.layer_preference in _PREFERRED_LAYER:
        return _PREFERRED_LAYER[archetype.layer_preference]
    return rng.int_between(0, NUM_LAYERS - 1)


def random_size(archetype: ShapeArchetype, layer, size_multiplier, rng: RandomSource):
    """(width, height) for *archetype* on *layer*; the aspect stretches one side."""
    base = rng.between(*archetype.size_range)
    size = base * size_multiplier * LAYER_SIZE_FACTORS[layer]
    aspect = rng.between(*archetype.aspect_range)
    if rng.next() > 0.5:
        return size * aspect, size
    return size, size * aspect


def random_rotation(archetype: ShapeArchetype, rng: RandomSource) -> float:
    if not archetype.can_rotate:
        return 0.0
    return rng.between(-archetype.max_rotation, archetype.max_rotation)


def effective_spacing(rules: CompositionRules) -> float:
    return rules.min_spacing * DENSITY_SPACING.get(rules.density, 1.0)


# ---------------------------------------------------------------------------
# Collision checks
# ---------------------------------------------------------------------------

def in_bounds(x, y, width, height, overflow=CANVAS_OVERFLOW) -> bool:
    return (
        x - width / 2 > -overflow
        and x + width / 2 < 1 + overflow
        and y - height / 2 > -overflow
        and y + height / 2 < 1 + overflow
    )


def overlaps_any(boxes: np.ndarray, x, y, width, height, spacing) -> bool:
    """Does the candidate box, grown by *spacing* on every side, touch any of *boxes*?

    *boxes* is an ``(N, 4)`` array of ``(cx, cy, w, h)`` rows.
    """
    if len(boxes) == 0:
        return False
    left = x - width / 2 - spacing
    right = x + width / 2 + spacing
    top = y - height / 2 - spacing
    bottom = y + height / 2 + spacing

    cx, cy, w, h = boxes[:, 0], boxes[:, 1], boxes[:, 2], boxes[:, 3]
    separated = (
        (right < cx - w / 2)
        | (left > cx + w / 2)
        | (bottom < cy - h / 2)
        | (top > cy + h / 2)
    )
    return bool((~separated).any())


# ---------------------------------------------------------------------------
# Main placement loop
# ---------------------------------------------------------------------------

def place_shapes(
    archetypes: Sequence[ShapeArchetype],
    target_count: int,
    rules: CompositionRules,
    size_multiplier: float = 1.0,
    seed: Optional[int] = None,
    max_attempts: int = MAX_ATTEMPTS,
    rng: Optional[RandomSource] = None,
) -> Layout:
    """Scatter up to *target_count* shapes according to *rules*.

    Parameters
    ----------
    archetypes : sequence of ShapeArchetype
        Palette to draw from (weighted).
    target_count : int
        Number of shapes to attempt.
    rules : CompositionRules
        Focal point, layering, density and minimum spacing.
    size_multiplier : float
        Difficulty scale applied to every size.
    seed : int or None
        Seed for a fresh ``SeededRandom``; ignored when *rng* is given.
    max_attempts : int
        Position retries per shape before the fallback kicks in.
    rng : RandomSource or None
        Generator to draw from.

    Returns
    -------
    Layout
        Placements sorted back to front (stable within a layer).
    """
    rng = rng or SeededRandom(seed)
    start_seed = rng.seed
    if target_count <= 0 or not has_positive_weight(archetypes):
        return Layout([], start_seed, rng.seed)

    spacing = effective_spacing(rules)
    per_layer_quota = int(np.ceil(target_count / NUM_LAYERS))
    layer_counts = [0] * NUM_LAYERS
    boxes = np.empty((target_count, 4), dtype=np.float64)
    placed = []

    for _ in range(target_count):
        archetype = rng.weighted_pick(archetypes)

        layer = assign_layer(archetype, rng)
        if rules.layering and layer_counts[layer] > per_layer_quota:
            underfilled = [l for l in range(NUM_LAYERS) if layer_counts[l] < per_layer_quota]
            if underfilled:
                layer = rng.pick(underfilled)

        width, height = random_size(archetype, layer, size_multiplier, rng)
        rotation = random_rotation(archetype, rng)
        strength = LAYER_FOCAL_STRENGTHS[layer] if rules.layering else FLAT_FOCAL_STRENGTH

        shape = None
        for _attempt in range(max_attempts):
            x, y = focal_position(rng, rules.focal_point, strength)
            if in_bounds(x, y, width, height) and not overlaps_any(
                boxes[:len(placed)], x, y, width, height, spacing
            ):
                shape = PlacedShape(x, y, width, height, rotation, archetype, layer)
                break

        if shape is None:
            if len(placed) >= target_count * FORCED_PLACEMENT_FLOOR:
                continue
            x, y = focal_position(rng, rules.focal_point, FORCED_FOCAL_STRENGTH)
            shape = PlacedShape(x, y, width, height, rotation, archetype, layer, forced=True)

        boxes[len(placed)] = (shape.x, shape.y, shape.width, shape.height)
        placed.append(shape)
        layer_counts[layer] += 1

    placed.sort(key=lambda s: s.layer)
    return Layout(placed, start_seed, rng.seed)
