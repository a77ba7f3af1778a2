"""Tests for the command-line entry point."""

import pytest
from PIL import Image
from pathtracer.main import build_parser, main, resolve_settings


class TestSettings:
    def test_quality_preset(self):
        args = build_parser().parse_args(["cornell-box", "--quality", "preview"])
        assert resolve_settings(args) == {'samples_per_pixel': 8, 'max_depth': 8}

    def test_explicit_flags_override_preset(self):
        args = build_parser().parse_args(["cornell-box", "--quality", "final", "--samples", "3"])
        assert resolve_settings(args) == {'samples_per_pixel': 3, 'max_depth': 50}


class TestMain:
    def test_renders_image(self, tmp_path):
        out = tmp_path / "spheres.png"
        code = main(["two-spheres", "--width", "16", "--samples", "2", "--max-depth", "3",
                     "--workers", "2", "--seed", "7", "-o", str(out)])
        assert code == 0
        with Image.open(out) as img:
            # Height follows the 16:9 aspect ratio.
            assert img.size == (16, 9)

    def test_invalid_worker_count(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["two-spheres", "--width", "8", "--samples", "1", "--workers", "0",
                  "-o", str(tmp_path / "x.png")])
        assert excinfo.value.code == 2

    def test_unknown_scene(self):
        with pytest.raises(SystemExit):
            main(["teapot"])


class TestTextureOption:
    def test_texture_needs_earth_scene(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["two-spheres", "--texture", str(tmp_path / "map.png")])
        assert excinfo.value.code == 2

    def test_missing_texture_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["earth", "--texture", str(tmp_path / "missing.png")])
        assert excinfo.value.code == 2

    def test_renders_earth(self, tmp_path):
        texture = tmp_path / "map.png"
        Image.new("RGB", (8, 4), (0, 128, 255)).save(texture)
        out = tmp_path / "earth.png"
        code = main(["earth", "--texture", str(texture), "--width", "8", "--samples", "1",
                     "--max-depth", "2", "--workers", "1", "-o", str(out)])
        assert code == 0
        assert out.exists()
