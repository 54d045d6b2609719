"""
Classic random-rectangle generator.

The coloring app's first page generator: a pile of overlapping rectangles
whose count and size scale with a single complexity knob in [0, 1].  Low
complexity gives a few large rectangles, high complexity many small ones.
Rectangles may start up to 25 % outside the canvas for a spread-out look.
"""

import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from magicgen.rng import SeededRandom
from magicgen.shapes import RectangleShape
from magicgen.synth import Clock, IdSource, counter_ids


@dataclass(frozen=True)
class ClassicConfig:
    base_shape_count: int = 15
    shapes_per_complexity: int = 60     # at complexity 1: 15 + 60 = 75 shapes
    min_size_low: float = 0.15          # fractions of canvas at complexity 0 ...
    max_size_low: float = 0.45
    min_size_high: float = 0.08         # ... and at complexity 1
    max_size_high: float = 0.25
    allow_rotation: bool = True
    max_rotation_degrees: float = 30.0
    overflow: float = 0.25


DEFAULT_CLASSIC_CONFIG = ClassicConfig()


def _lerp(low, high, t):
    return low + (high - low) * t


def calculate_shape_count(complexity: float, config: ClassicConfig = DEFAULT_CLASSIC_CONFIG) -> int:
    complexity = float(np.clip(complexity, 0.0, 1.0))
    return int(np.floor(config.base_shape_count + complexity * config.shapes_per_complexity))


def generate_random_shapes(
    complexity: float,
    config: ClassicConfig = DEFAULT_CLASSIC_CONFIG,
    seed: Optional[int] = None,
    id_source: Optional[IdSource] = None,
    clock: Optional[Clock] = None,
) -> List[RectangleShape]:
    """Random rectangles for a page of the given *complexity* (clamped to [0, 1]).

    Positions are top-left corners in ``[-overflow, 1 + overflow - size]`` so
    some part of every rectangle stays visible.
    """
    complexity = float(np.clip(complexity, 0.0, 1.0))
    rng = SeededRandom(seed)
    id_source = id_source or counter_ids(f"gen-{rng.seed}")
    timestamp = (clock or time.time)()

    min_size = _lerp(config.min_size_low, config.min_size_high, complexity)
    max_size = _lerp(config.max_size_low, config.max_size_high, complexity)
    max_rotation = np.deg2rad(config.max_rotation_degrees)

    shapes = []
    for _ in range(calculate_shape_count(complexity, config)):
        rotation = rng.between(-max_rotation, max_rotation) if config.allow_rotation else 0.0
        width = rng.between(min_size, max_size)
        height = rng.between(min_size, max_size)
        x = rng.between(-config.overflow, 1 + config.overflow - width)
        y = rng.between(-config.overflow, 1 + config.overflow - height)
        shapes.append(RectangleShape(
            id=id_source(),
            x=x, y=y,
            width=width, height=height,
            rotation=float(rotation),
            created_at=timestamp, updated_at=timestamp,
        ))
    return shapes
