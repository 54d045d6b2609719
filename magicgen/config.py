"""
Global configuration: enum vocabularies, layout constants, per-style presets.

Every request field is drawn from a small closed vocabulary.  The tuples
below are the single source of truth; lookups elsewhere validate against
them.  Presets are keyed by difficulty and mirror the way the coloring app
scales each style from toddler (few, large regions) to adult (many, small).
"""

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------

THEMES = ("sea", "space", "garden", "fantasy", "random")

STYLES = (
    "scene",         # layered free scatter around a focal point
    "mandala",       # concentric rings, radial symmetry
    "kaleidoscope",  # two overlapping mandalas
    "pattern",       # jittered grid
    "mosaic",        # grid + half-cell offset overlay grid
    "freeform",      # flat free scatter
)

DIFFICULTIES = ("toddler", "kid", "teen", "adult")

DENSITIES = ("sparse", "medium", "dense")

LAYER_PREFERENCES = ("background", "midground", "foreground", "any")

NATIVE_KINDS = ("rectangle", "circle", "triangle", "star", "heart")
SEMANTIC_KINDS = ("oval", "diamond", "crescent", "ring", "wave", "spiral")
SHAPE_KINDS = NATIVE_KINDS + SEMANTIC_KINDS

# ---------------------------------------------------------------------------
# Random generator
# ---------------------------------------------------------------------------

RNG_MODULUS = 2147483647    # 2**31 - 1
RNG_MULTIPLIER = 16807

# ---------------------------------------------------------------------------
# Free scatter
# ---------------------------------------------------------------------------

MAX_ATTEMPTS = 50
NUM_LAYERS = 3                              # 0 = back, 1 = mid, 2 = front
LAYER_SIZE_FACTORS = (1.3, 1.0, 0.7)        # background shapes are larger
LAYER_FOCAL_STRENGTHS = (0.1, 0.4, 0.5)     # foreground hugs the focal point
FLAT_FOCAL_STRENGTH = 0.3
FORCED_FOCAL_STRENGTH = 0.2
FORCED_PLACEMENT_FLOOR = 0.8                # fraction of target
CANVAS_OVERFLOW = 0.1
DENSITY_SPACING = {"dense": 0.5, "medium": 1.0, "sparse": 2.0}

# ---------------------------------------------------------------------------
# Mandala / grid
# ---------------------------------------------------------------------------

MANDALA_CENTER = (0.5, 0.5)
MANDALA_MAX_RADIUS = 0.4
MANDALA_RING_SHRINK = 0.15
GRID_MARGIN = 0.1
GRID_CELL_FILL = 0.8

# ---------------------------------------------------------------------------
# Synthesis
# ---------------------------------------------------------------------------

STROKE_COLOR = "#000000"
STROKE_WIDTH = 2.5
STAR_INNER_RATIO = 0.4
STAR_DEFAULT_POINTS = 5
STAR_VARIANT_THRESHOLD = 0.7    # draws above this give a 4-6 point star
CRESCENT_SCALE = 0.8
DIAMOND_ROTATION = math.pi / 4

# ---------------------------------------------------------------------------
# Style presets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MandalaPreset:
    rings: int
    shapes_per_ring: int


@dataclass(frozen=True)
class GridPreset:
    cols: int
    rows: int


MANDALA_PRESETS = {
    "toddler": MandalaPreset(rings=2, shapes_per_ring=4),
    "kid": MandalaPreset(rings=3, shapes_per_ring=5),
    "teen": MandalaPreset(rings=4, shapes_per_ring=6),
    "adult": MandalaPreset(rings=5, shapes_per_ring=8),
}

KALEIDOSCOPE_PRESETS = {
    "toddler": MandalaPreset(rings=3, shapes_per_ring=6),
    "kid": MandalaPreset(rings=4, shapes_per_ring=8),
    "teen": MandalaPreset(rings=5, shapes_per_ring=10),
    "adult": MandalaPreset(rings=6, shapes_per_ring=12),
}

GRID_PRESETS = {
    "toddler": GridPreset(cols=3, rows=3),
    "kid": GridPreset(cols=4, rows=4),
    "teen": GridPreset(cols=5, rows=5),
    "adult": GridPreset(cols=6, rows=6),
}

PATTERN_JITTER = 0.15

# Kaleidoscope overlay: a smaller, rotated second mandala
KALEIDOSCOPE_OVERLAY_SIZE = 0.8
KALEIDOSCOPE_OVERLAY_SEED_OFFSET = 100
KALEIDOSCOPE_MIN_RINGS = 2
KALEIDOSCOPE_MIN_PER_RING = 4

# Mosaic: enlarged base grid under a shrunken, half-cell-shifted overlay grid
MOSAIC_BASE_SIZE = 1.1
MOSAIC_BASE_JITTER = 0.1
MOSAIC_OVERLAY_SIZE = 0.9
MOSAIC_OVERLAY_JITTER = 0.15
MOSAIC_OVERLAY_SEED_OFFSET = 50

SYNTH_SEED_OFFSET = 1
