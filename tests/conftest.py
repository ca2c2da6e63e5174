"""Pytest configuration for raytracer tests.

Provides seeded random sources and small helpers shared across test modules.
Every test gets its own random.Random instance so results never depend on
test ordering.
"""

import random

import pytest

from core.vector import Vector3


class SequenceRng:
    """Random source that replays a fixed list of draws.

    Used to drive the closed-form sampling functions to exact, known outputs.
    """

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self):
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sequence_rng():
    """Factory for replaying random sources."""
    return SequenceRng


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-9):
    """Component-wise approximate comparison of two vectors."""
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)
