"""
Concrete shape descriptors handed to the drawing store.

All coordinates are canvas fractions in [0, 1] (shapes may overhang the
edges slightly).  ``x, y`` is the anchor: top-left of the bounding box for
rectangles, triangles and hearts, the centre for circles and stars.  Radii
are fractions of the smaller canvas dimension so circles stay round on
non-square canvases.  Stroke width is in pixels.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import ClassVar, Dict, List, Type

from magicgen.config import STROKE_COLOR, STROKE_WIDTH


@dataclass(frozen=True, kw_only=True)
class BaseShape:
    type: ClassVar[str] = ""
    id: str
    x: float
    y: float
    rotation: float = 0.0
    stroke_color: str = STROKE_COLOR
    stroke_width: float = STROKE_WIDTH
    created_at: float = field(default=0.0, compare=False)
    updated_at: float = field(default=0.0, compare=False)

    def to_dict(self) -> dict:
        return {"type": self.type, **asdict(self)}


@dataclass(frozen=True, kw_only=True)
class RectangleShape(BaseShape):
    type: ClassVar[str] = "rectangle"
    width: float
    height: float


@dataclass(frozen=True, kw_only=True)
class CircleShape(BaseShape):
    type: ClassVar[str] = "circle"
    radius: float


@dataclass(frozen=True, kw_only=True)
class TriangleShape(BaseShape):
    """Isosceles triangle, apex at the top centre of its box."""
    type: ClassVar[str] = "triangle"
    width: float
    height: float


@dataclass(frozen=True, kw_only=True)
class StarShape(BaseShape):
    type: ClassVar[str] = "star"
    outer_radius: float
    inner_radius: float
    points: int


@dataclass(frozen=True, kw_only=True)
class HeartShape(BaseShape):
    type: ClassVar[str] = "heart"
    width: float
    height: float


SHAPE_TYPES: Dict[str, Type[BaseShape]] = {
    cls.type: cls for cls in (RectangleShape, CircleShape, TriangleShape, StarShape, HeartShape)
}


def shape_from_dict(data: dict) -> BaseShape:
    data = dict(data)
    kind = data.pop("type", None)
    if kind not in SHAPE_TYPES:
        raise ValueError(f"Unknown shape type {kind!r}; expected one of {sorted(SHAPE_TYPES)}")
    return SHAPE_TYPES[kind](**data)


# ---------------------------------------------------------------------------
# Coordinate conversion (for renderers working in pixels)
# ---------------------------------------------------------------------------

_BOX_FIELDS = ("width", "height")
_RADIUS_FIELDS = ("radius", "outer_radius", "inner_radius")


def _convert(shape: BaseShape, sx: float, sy: float, sr: float) -> BaseShape:
    changes = {"x": shape.x * sx, "y": shape.y * sy}
    if isinstance(shape, (RectangleShape, TriangleShape, HeartShape)):
        changes["width"] = shape.width * sx
        changes["height"] = shape.height * sy
    for name in _RADIUS_FIELDS:
        if hasattr(shape, name):
            changes[name] = getattr(shape, name) * sr
    return replace(shape, **changes)


def shape_to_absolute(shape: BaseShape, canvas_width: float, canvas_height: float) -> BaseShape:
    """Relative (0-1) descriptor -> pixel descriptor."""
    return _convert(shape, canvas_width, canvas_height, min(canvas_width, canvas_height))


def shape_to_relative(shape: BaseShape, canvas_width: float, canvas_height: float) -> BaseShape:
    """Pixel descriptor -> relative (0-1) descriptor.  A zero-sized canvas maps to 0."""
    if canvas_width <= 0 or canvas_height <= 0:
        return _convert(shape, 0.0, 0.0, 0.0)
    return _convert(shape, 1 / canvas_width, 1 / canvas_height,
                    1 / min(canvas_width, canvas_height))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def is_valid_shape(shape: BaseShape) -> bool:
    """Positive extent and a non-empty id.  Positions may lie off-canvas."""
    if not shape.id:
        return False
    sizes = [getattr(shape, name) for name in _BOX_FIELDS + _RADIUS_FIELDS if hasattr(shape, name)]
    return all(s > 0 for s in sizes)


def validate_shapes(shapes) -> List[int]:
    """Indices of invalid shapes (empty list when all are fine)."""
    return [i for i, shape in enumerate(shapes) if not is_valid_shape(shape)]
