"""Tests for Ray class."""

import pytest
from pathweaver.vec3 import Vec3, Point3
from pathweaver.ray import Ray


class TestRayCreation:
    """Test Ray construction."""

    def test_default_time(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.time == 0.0

    def test_with_time(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0), 0.5)
        assert ray.time == 0.5

    def test_stores_origin_and_direction(self):
        origin = Point3(1, 2, 3)
        direction = Vec3(1, 2, 3)
        ray = Ray(origin, direction)
        assert ray.origin == origin
        assert ray.direction == direction

    def test_no_extra_attributes(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        with pytest.raises(AttributeError):
            ray.color = 1


class TestRayAt:
    """Test Ray.at() method."""

    def test_at_zero(self):
        origin = Point3(1, 2, 3)
        ray = Ray(origin, Vec3(1, 0, 0))
        assert ray.at(0) == origin

    def test_at_positive(self):
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        assert ray.at(5) == Point3(5, 0, 0)

    def test_at_with_diagonal(self):
        ray = Ray(Point3(1, 0, 0), Vec3(1, 1, 1))
        assert ray.at(2) == Point3(3, 2, 2)


class TestRayRepr:
    """Test Ray string representation."""

    def test_repr(self):
        s = repr(Ray(Point3(1, 2, 3), Vec3(0, 1, 0), 0.25))
        assert "Ray" in s
        assert "origin" in s
        assert "direction" in s
        assert "0.25" in s
