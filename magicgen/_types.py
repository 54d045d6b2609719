"""Shared dataclasses for the generator (avoids circular imports)."""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from magicgen.config import DIFFICULTIES, THEMES

Range = Tuple[float, float]     # (min, max)


@dataclass(frozen=True)
class ShapeArchetype:
    """Reusable abstract shape template: what may be drawn and within which limits."""
    kind: str                               # native or semantic kind (config.SHAPE_KINDS)
    size_range: Range = (0.08, 0.25)        # fraction of canvas
    aspect_range: Range = (0.7, 1.3)        # long side / short side
    can_rotate: bool = True
    max_rotation: float = math.pi / 6       # radians
    layer_preference: str = "any"
    weight: float = 1.0


@dataclass(frozen=True)
class Theme:
    id: str
    name: str
    icon: str
    description: str
    archetypes: Tuple[ShapeArchetype, ...]
    preview_colors: Tuple[str, ...] = ()    # cosmetic only; pages are uncolored
    background_style: str = "plain"


@dataclass(frozen=True)
class DifficultyProfile:
    shape_count: Tuple[int, int]
    size_multiplier: float
    min_region_size: float                  # smallest colorable region, fraction of canvas
    complexity: str                         # simple | medium | detailed
    include_details: bool


@dataclass(frozen=True)
class CompositionRules:
    focal_point: Optional[Tuple[float, float]] = None
    layering: bool = True
    density: str = "medium"
    min_spacing: float = 0.02


@dataclass(frozen=True)
class GenerationRequest:
    theme: str = "random"
    style: str = "scene"
    difficulty: str = "kid"
    composition: Optional[CompositionRules] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme {self.theme!r}; expected one of {THEMES}")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(
                f"Unknown difficulty {self.difficulty!r}; expected one of {DIFFICULTIES}"
            )


@dataclass(frozen=True)
class GenerationMetadata:
    seed: int
    theme: str
    style: str
    difficulty: str
    shape_count: int
    generated_at: float = field(default=0.0, compare=False)


@dataclass(frozen=True)
class GenerationResult:
    """Shapes in paint order (back to front) plus how they were made."""
    shapes: tuple
    metadata: GenerationMetadata
