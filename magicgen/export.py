"""Save / load generation results as JSON for the drawing store."""

import json
import os
from dataclasses import asdict

import numpy as np

from magicgen._types import GenerationMetadata, GenerationResult
from magicgen.shapes import shape_from_dict


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types (bool_, int64, float64, etc.)."""

    def default(self, obj):
        if isinstance(obj, (np.bool_,)):
            return bool(obj)
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def result_to_dict(result: GenerationResult) -> dict:
    return {
        "shapes": [shape.to_dict() for shape in result.shapes],
        "metadata": asdict(result.metadata),
    }


def result_from_dict(data: dict) -> GenerationResult:
    """Inverse of ``result_to_dict``.  Raises ValueError on an unknown shape type."""
    shapes = tuple(shape_from_dict(s) for s in data.get("shapes", []))
    return GenerationResult(shapes=shapes, metadata=GenerationMetadata(**data["metadata"]))


def save_result(result: GenerationResult, path):
    """Write *result* to *path* as indented JSON, creating parent directories."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w") as f:
        json.dump(result_to_dict(result), f, indent=2, cls=_NumpyEncoder)


def load_result(path) -> GenerationResult:
    if not os.path.exists(path):
        raise FileNotFoundError(f"No generation result at {path}")
    with open(path) as f:
        return result_from_dict(json.load(f))


def save_shapes(shapes, path, **extra):
    """Write a bare shape list (plus any *extra* top-level fields) as JSON."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w") as f:
        json.dump({**extra, "shapes": [s.to_dict() for s in shapes]}, f,
                  indent=2, cls=_NumpyEncoder)
