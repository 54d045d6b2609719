"""
Grid (tessellation) placement.

The canvas minus a fixed margin is split into ``cols x rows`` cells, filled
row by row.  Each cell gets one shape near its centre, nudged by up to
``jitter`` of a cell in each axis and capped at 80 % of the cell so it
always fits.
"""

from typing import Optional, Sequence

from magicgen._types import ShapeArchetype
from magicgen.config import GRID_CELL_FILL, GRID_MARGIN
from magicgen.layouts._types import Layout, PlacedShape
from magicgen.layouts.scatter import random_rotation
from magicgen.rng import RandomSource, SeededRandom, has_positive_weight


def cell_size(cols: int, rows: int, margin: float = GRID_MARGIN):
    """(cell_width, cell_height) in canvas fractions."""
    return (1 - 2 * margin) / cols, (1 - 2 * margin) / rows


def cell_center(col: int, row: int, cols: int, rows: int, margin: float = GRID_MARGIN):
    cell_w, cell_h = cell_size(cols, rows, margin)
    return margin + cell_w * (col + 0.5), margin + cell_h * (row + 0.5)


def place_grid(
    archetypes: Sequence[ShapeArchetype],
    cols: int,
    rows: int,
    size_multiplier: float = 1.0,
    jitter: float = 0.0,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    margin: float = GRID_MARGIN,
) -> Layout:
    """One shape per cell, row-major, all on layer 0."""
    rng = rng or SeededRandom(seed)
    start_seed = rng.seed
    if cols <= 0 or rows <= 0 or not has_positive_weight(archetypes):
        return Layout([], start_seed, rng.seed)

    cell_w, cell_h = cell_size(cols, rows, margin)
    max_size = min(cell_w, cell_h) * GRID_CELL_FILL
    placed = []

    for row in range(rows):
        for col in range(cols):
            archetype = rng.weighted_pick(archetypes)
            x, y = cell_center(col, row, cols, rows, margin)
            x += rng.between(-jitter, jitter) * cell_w
            y += rng.between(-jitter, jitter) * cell_h

            size = min(rng.between(*archetype.size_range) * size_multiplier, max_size)
            rotation = random_rotation(archetype, rng)
            placed.append(PlacedShape(x, y, size, size, rotation, archetype, layer=0))

    return Layout(placed, start_seed, rng.seed)
