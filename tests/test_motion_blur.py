"""Tests for motion blur functionality."""

import pytest
import numpy as np
from pathweaver.vec3 import Vec3, Point3, Color
from pathweaver.ray import Ray
from pathweaver.shapes import MovingSphere, HittableList, Sphere
from pathweaver.camera import Camera
from pathweaver.materials import Lambertian

INF = float('inf')
GRAY = Lambertian(Color(0.5, 0.5, 0.5))


class TestMovingSphere:
    """Test MovingSphere class."""

    def test_creation(self):
        sphere = MovingSphere(
            center0=Point3(0, 0, 0),
            center1=Point3(1, 0, 0),
            time0=0.0,
            time1=1.0,
            radius=0.5,
            material=GRAY
        )
        assert sphere.center0 == Point3(0, 0, 0)
        assert sphere.center1 == Point3(1, 0, 0)
        assert sphere.radius == 0.5

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            MovingSphere(Point3(0, 0, 0), Point3(1, 0, 0), 0.0, 1.0, -0.5, GRAY)
        with pytest.raises(ValueError):
            MovingSphere(Point3(0, 0, 0), Point3(1, 0, 0), 1.0, 0.0, 0.5, GRAY)
        with pytest.raises(TypeError):
            MovingSphere(Point3(0, 0, 0), Point3(1, 0, 0), 0.0, 1.0, 0.5)

    def test_center_interpolation(self):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(2, 0, 0), 0.0, 1.0, 0.5, GRAY)
        assert sphere.center(0.0) == Point3(0, 0, 0)
        assert sphere.center(1.0) == Point3(2, 0, 0)
        assert sphere.center(0.5) == Point3(1, 0, 0)

    def test_center_with_offset_window(self):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(0, 4, 0), 2.0, 4.0, 0.5, GRAY)
        assert sphere.center(3.0) == Point3(0, 2, 0)

    def test_degenerate_time_window(self):
        sphere = MovingSphere(Point3(1, 2, 3), Point3(4, 5, 6), 1.0, 1.0, 0.5, GRAY)
        assert sphere.center(7.0) == Point3(1, 2, 3)

    def test_midpoint_behaves_like_static_sphere(self):
        moving = MovingSphere(Point3(0, 0, 0), Point3(0, 1, 0), 0.0, 1.0, 1.0, GRAY)
        static = Sphere(Point3(0, 0.5, 0), 1.0, GRAY)
        rng = np.random.default_rng(5)

        for _ in range(100):
            origin = Vec3.random(rng, -3, 3)
            target = Vec3.random(rng, -1, 1)
            ray = Ray(origin, target - origin, 0.5)
            a = moving.hit(ray, 0.001, INF)
            b = static.hit(ray, 0.001, INF)
            assert (a is None) == (b is None)
            if a is not None:
                assert a.t == pytest.approx(b.t)
                assert a.normal == b.normal
                assert a.front_face == b.front_face

    def test_hit_depends_on_ray_time(self):
        sphere = MovingSphere(Point3(0, 0, 0), Point3(0, 1, 0), 0.0, 1.0, 1.0, GRAY)
        origin = Point3(0, 1.6, -5)
        direction = Vec3(0, 0, 1)

        # At t=0.5 the center is at y=0.5, 1.1 away from the ray
        assert sphere.hit(Ray(origin, direction, 0.5), 0.001, INF) is None
        # At t=1 the center is at y=1
        hit = sphere.hit(Ray(origin, direction, 1.0), 0.001, INF)
        assert hit is not None
        assert hit.normal.length() == pytest.approx(1.0)

    def test_in_hittable_list(self):
        world = HittableList([
            MovingSphere(Point3(0, 0, -5), Point3(0, 0, -3), 0.0, 1.0, 0.5, GRAY)
        ])
        ray0 = Ray(Point3(0, 0, 0), Vec3(0, 0, -1), 0.0)
        ray1 = Ray(Point3(0, 0, 0), Vec3(0, 0, -1), 1.0)
        assert world.hit(ray0, 0.001, INF).t == pytest.approx(4.5)
        assert world.hit(ray1, 0.001, INF).t == pytest.approx(2.5)


class TestCameraShutter:
    """Test camera shutter time sampling."""

    def test_times_within_shutter(self):
        cam = Camera(
            look_from=Point3(0, 0, 0),
            look_at=Point3(0, 0, -1),
            shutter_open=0.25,
            shutter_close=0.75
        )
        rng = np.random.default_rng(6)
        times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(200)]
        assert all(0.25 <= t <= 0.75 for t in times)
        assert max(times) - min(times) > 0.3

    def test_closed_shutter_fixed_time(self):
        cam = Camera(
            look_from=Point3(0, 0, 0),
            look_at=Point3(0, 0, -1),
            shutter_open=0.4,
            shutter_close=0.4
        )
        rng = np.random.default_rng(7)
        assert {cam.get_ray(0.5, 0.5, rng).time for _ in range(20)} == {0.4}
