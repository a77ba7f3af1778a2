"""Unit tests for textures and Perlin noise."""

import numpy as np
import pytest
from PIL import Image
from pathtracer.core.vector import Vector3, Color
from pathtracer.materials import (
    SolidTexture, CheckerTexture, NoiseTexture, ImageTexture, Perlin, as_texture,
)


class TestSolidAndChecker:
    def test_solid(self):
        tex = SolidTexture(Color(0.1, 0.2, 0.3))
        assert tex.value(0.9, 0.1, Vector3(5, 5, 5)) == Color(0.1, 0.2, 0.3)

    def test_as_texture(self):
        tex = SolidTexture(Color(1, 1, 1))
        assert as_texture(tex) is tex
        assert isinstance(as_texture(Color(1, 0, 0)), SolidTexture)
        with pytest.raises(TypeError):
            as_texture((1, 0, 0))

    def test_checker_alternates(self):
        tex = CheckerTexture(Color(1, 0, 0), Color(0, 0, 1), 10.0)
        assert tex.value(0, 0, Vector3(0.1, 0.1, 0.1)) == Color(0, 0, 1)
        assert tex.value(0, 0, Vector3(-0.1, 0.1, 0.1)) == Color(1, 0, 0)

    def test_checker_per_axis_scale(self):
        tex = CheckerTexture(Color(1, 0, 0), Color(0, 0, 1), Vector3(1.0, 1.0, 100.0))
        # sin(100 * 0.05) is negative while the other two factors are positive.
        assert tex.value(0, 0, Vector3(0.5, 0.5, 0.05)) == Color(1, 0, 0)


class TestPerlin:
    def test_deterministic_for_seed(self):
        p = Vector3(1.3, -2.7, 0.4)
        a = Perlin(np.random.default_rng(5))
        b = Perlin(np.random.default_rng(5))
        assert a.noise(p) == b.noise(p)
        assert a.turb(p) == b.turb(p)

    def test_noise_range(self, rng):
        perlin = Perlin(np.random.default_rng(1))
        for _ in range(200):
            p = Vector3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
            assert 0.0 <= perlin.noise(p) <= 1.0
            assert perlin.turb(p) >= 0.0

    def test_noise_texture_is_grey_in_unit_range(self, rng):
        tex = NoiseTexture(4.0, Perlin(np.random.default_rng(2)))
        for _ in range(50):
            p = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
            c = tex.value(0, 0, p)
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0


class TestImageTexture:
    @pytest.fixture
    def image_path(self, tmp_path):
        pixels = np.array([
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ], dtype=np.uint8)
        path = tmp_path / "tex.png"
        Image.fromarray(pixels).save(path)
        return str(path)

    def test_corners(self, image_path):
        tex = ImageTexture(image_path)
        assert (tex.width, tex.height) == (2, 2)
        p = Vector3(0, 0, 0)
        # v = 1 is the top row of the image.
        assert tex.value(0.0, 1.0, p) == Color(1.0, 0.0, 0.0)
        assert tex.value(1.0, 1.0, p) == Color(0.0, 1.0, 0.0)
        assert tex.value(0.0, 0.0, p) == Color(0.0, 0.0, 1.0)
        assert tex.value(1.0, 0.0, p) == Color(1.0, 1.0, 1.0)

    def test_coordinates_are_clamped(self, image_path):
        tex = ImageTexture(image_path)
        assert tex.value(-3.0, 7.0, Vector3(0, 0, 0)) == Color(1.0, 0.0, 0.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImageTexture(str(tmp_path / "missing.png"))
