"""Placement dataclasses shared by the layout planners."""

from dataclasses import dataclass, field, replace
from typing import List

from magicgen._types import ShapeArchetype


@dataclass(frozen=True)
class PlacedShape:
    """One positioned-but-unsynthesized shape (centre-based, canvas fractions)."""
    x: float
    y: float
    width: float
    height: float
    rotation: float         # radians
    archetype: ShapeArchetype
    layer: int              # paint-order bucket, 0 = back
    forced: bool = False    # placed by the overlap-tolerant fallback

    def moved(self, dx=0.0, dy=0.0, rotation=0.0) -> "PlacedShape":
        return replace(self, x=self.x + dx, y=self.y + dy, rotation=self.rotation + rotation)


@dataclass
class Layout:
    """Result of one placement pass.

    ``seed`` started the pass; ``final_seed`` is the generator state after it,
    used to chain follow-up passes.
    """
    shapes: List[PlacedShape] = field(default_factory=list)
    seed: int = 0
    final_seed: int = 0

    def __len__(self):
        return len(self.shapes)
