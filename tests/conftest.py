"""Shared fixtures for the path tracer tests."""

import random
import pytest
from pathtracer.core.vector import Vector3, Color
from pathtracer.core.ray import Ray
from pathtracer.materials import Lambertian, DiffuseLight


class FixedRandom:
    """Stand-in for random.Random that replays a fixed cycle of values."""

    def __init__(self, values=(0.5,)):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def uniform(self, a, b):
        return a + (b - a) * self.random()

    def randint(self, a, b):
        return a + int(self.random() * (b - a + 1)) % (b - a + 1)

    def getrandbits(self, k):
        return 12345 % (1 << k)


@pytest.fixture
def rng():
    """Seeded generator so every test run sees the same values."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def replay_rng():
    """Factory for generators that replay the given values."""
    return FixedRandom


@pytest.fixture
def grey():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def light():
    return DiffuseLight(Color(4.0, 4.0, 4.0))


@pytest.fixture
def random_ray():
    """Factory for rays from a random origin in a cube toward a random direction."""
    def make(rng, spread=10.0):
        origin = Vector3(rng.uniform(-spread, spread), rng.uniform(-spread, spread),
                         rng.uniform(-spread, spread))
        direction = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        return Ray(origin, direction)
    return make
