"""Unit tests for the scene aggregate nearest-hit query.

Tests cover:
- Empty scenes
- Nearest hit selection regardless of insertion order
- Tie-break between coincident primitives
- Shrinking search interval
"""

import pytest

from core.ray import Ray
from core.vector import Color, Vector3
from geometry import HittableList, Hittable, Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal

T_MAX = 1e30

RED = Lambertian(Color(1.0, 0.0, 0.0))
GREEN = Lambertian(Color(0.0, 1.0, 0.0))
MIRROR = Metal(Color(0.9, 0.9, 0.9))


class RecordingHittable(Hittable):
    """Wraps a hittable and records the t_max of every query."""

    def __init__(self, inner):
        self.inner = inner
        self.t_max_seen = []

    def hit(self, ray, t_min, t_max):
        self.t_max_seen.append(t_max)
        return self.inner.hit(ray, t_min, t_max)


@pytest.fixture
def axis_ray():
    return Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))


class TestHittableListBasics:
    """Tests for construction and addition."""

    def test_empty_list_misses(self, axis_ray):
        world = HittableList()
        assert len(world) == 0
        assert world.hit(axis_ray, 0.0, T_MAX) is None

    def test_add_preserves_order(self):
        world = HittableList()
        a = Sphere(Vector3(0.0, 0.0, -1.0), 0.5, RED)
        b = Sphere(Vector3(0.0, 0.0, -3.0), 0.5, GREEN)
        world.add(a)
        world.add(b)
        assert world.objects == [a, b]
        assert len(world) == 2

    def test_abstract_hittable_raises(self, axis_ray):
        with pytest.raises(NotImplementedError):
            Hittable().hit(axis_ray, 0.0, T_MAX)


class TestNearestHit:
    """Tests for closest-hit selection."""

    @pytest.mark.parametrize("near_first", [True, False])
    def test_nearest_wins_regardless_of_order(self, axis_ray, near_first):
        near = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED)
        far = Sphere(Vector3(0.0, 0.0, -5.0), 0.5, GREEN)
        world = HittableList()
        for obj in ([near, far] if near_first else [far, near]):
            world.add(obj)

        rec = world.hit(axis_ray, 0.0, T_MAX)

        assert rec is not None
        assert rec.t == pytest.approx(1.5)
        assert rec.material == RED

    def test_miss_all(self):
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))
        world.add(Sphere(Vector3(3.0, 0.0, -2.0), 0.5, GREEN))
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert world.hit(ray, 0.0, T_MAX) is None

    def test_respects_t_max(self, axis_ray):
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, -5.0), 0.5, RED))
        assert world.hit(axis_ray, 0.0, 4.0) is None

    def test_search_interval_shrinks(self, axis_ray):
        """Later objects are queried with the best t found so far."""
        near = RecordingHittable(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))
        far = RecordingHittable(Sphere(Vector3(0.0, 0.0, -5.0), 0.5, GREEN))
        world = HittableList()
        world.add(near)
        world.add(far)

        world.hit(axis_ray, 0.0, T_MAX)

        assert near.t_max_seen == [T_MAX]
        assert far.t_max_seen == [pytest.approx(1.5)]


class TestTieBreak:
    """Coincident primitives: the first added keeps the hit."""

    def test_first_added_wins(self, axis_ray):
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, MIRROR))

        rec = world.hit(axis_ray, 0.0, T_MAX)

        assert rec.material == RED

    def test_first_added_wins_reversed(self, axis_ray):
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, MIRROR))
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))

        rec = world.hit(axis_ray, 0.0, T_MAX)

        assert rec.material == MIRROR

    def test_tie_is_reproducible(self, axis_ray):
        def build():
            world = HittableList()
            world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, GREEN))
            world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))
            world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, MIRROR))
            return world

        materials = {build().hit(axis_ray, 0.0, T_MAX).material for _ in range(20)}
        assert materials == {GREEN}

    def test_tie_at_upper_bound(self, axis_ray):
        """A hit exactly at t_max is accepted, and a tie there still keeps the first."""
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, RED))
        world.add(Sphere(Vector3(0.0, 0.0, -2.0), 0.5, GREEN))
        rec = world.hit(axis_ray, 0.0, 1.5)
        assert rec is not None
        assert rec.material == RED
