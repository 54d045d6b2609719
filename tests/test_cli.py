"""Tests for the command-line helpers."""

import json

from magicgen.cli import classic_page, generate_batch, generate_page
from magicgen.export import load_result


class TestCli:
    def test_generate_page(self, tmp_path, capsys):
        path = tmp_path / "page.json"
        result = generate_page("sea", "mandala", "kid", seed=3, save_path=str(path))
        assert load_result(str(path)) == result
        out = capsys.readouterr().out
        assert "seed=3" in out
        assert "Page saved to" in out

    def test_generate_batch(self, tmp_path, capsys):
        generate_batch(3, "space", "pattern", "toddler", start_seed=10, output_dir=str(tmp_path))
        files = sorted(p.name for p in tmp_path.glob("*.json"))
        assert files == ["pattern_space_10.json", "pattern_space_11.json", "pattern_space_12.json"]
        assert "3 pages" in capsys.readouterr().out

    def test_classic_page(self, tmp_path):
        path = tmp_path / "classic.json"
        shapes = classic_page(0.0, seed=4, save_path=str(path))
        with open(path) as f:
            data = json.load(f)
        assert data["seed"] == 4
        assert len(data["shapes"]) == len(shapes) == 15
        assert {s["type"] for s in data["shapes"]} == {"rectangle"}
