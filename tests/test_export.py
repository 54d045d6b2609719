"""Tests for JSON save / load of generation results."""

import json

import numpy as np
import pytest

from magicgen.export import (
    _NumpyEncoder, load_result, result_from_dict, result_to_dict, save_result, save_shapes,
)
from magicgen.generator import create_request, generate


@pytest.fixture
def result():
    return generate(create_request("sea", "scene", "kid", seed=12), clock=lambda: 1.5)


class TestExport:
    def test_save_and_load(self, result, tmp_path):
        path = tmp_path / "page.json"
        save_result(result, str(path))
        loaded = load_result(str(path))
        assert loaded == result
        assert loaded.metadata.generated_at == 1.5

    def test_creates_parent_dirs(self, result, tmp_path):
        path = tmp_path / "nested" / "deeper" / "page.json"
        save_result(result, str(path))
        assert path.exists()

    def test_dict_layout(self, result):
        data = result_to_dict(result)
        assert data["metadata"]["seed"] == 12
        assert len(data["shapes"]) == result.metadata.shape_count
        assert all("type" in s and "id" in s for s in data["shapes"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_result(str(tmp_path / "nope.json"))

    def test_unknown_shape_type(self, result):
        data = result_to_dict(result)
        data["shapes"][0]["type"] = "blob"
        with pytest.raises(ValueError):
            result_from_dict(data)

    def test_numpy_encoder(self):
        payload = {"a": np.float64(0.5), "b": np.int64(3), "c": np.bool_(True), "d": np.arange(3)}
        assert json.loads(json.dumps(payload, cls=_NumpyEncoder)) == {
            "a": 0.5, "b": 3, "c": True, "d": [0, 1, 2],
        }

    def test_save_shapes(self, result, tmp_path):
        path = tmp_path / "shapes.json"
        save_shapes(result.shapes, str(path), seed=np.int64(12))
        with open(path) as f:
            data = json.load(f)
        assert data["seed"] == 12
        assert len(data["shapes"]) == len(result.shapes)
