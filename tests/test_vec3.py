"""Tests for Vec3 class."""

import pytest
import math
import numpy as np
from pathweaver.vec3 import Vec3, Point3, Color


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default(self):
        v = Vec3()
        assert v.x == 0 and v.y == 0 and v.z == 0

    def test_components(self):
        v = Vec3(1, 2, 3)
        assert (v.x, v.y, v.z) == (1, 2, 3)
        assert (v.r, v.g, v.b) == (1, 2, 3)

    def test_from_array(self):
        v = Vec3.from_array(np.array([4.0, 5.0, 6.0]))
        assert v == Vec3(4, 5, 6)

    def test_aliases(self):
        assert Point3 is Vec3
        assert Color is Vec3

    def test_iteration(self):
        assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]


class TestVec3Arithmetic:
    """Test arithmetic operators."""

    def test_add_sub(self):
        assert Vec3(1, 2, 3) + Vec3(1, 1, 1) == Vec3(2, 3, 4)
        assert Vec3(1, 2, 3) - Vec3(1, 1, 1) == Vec3(0, 1, 2)

    def test_scalar_mul(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_componentwise_mul(self):
        assert Vec3(1, 2, 3) * Vec3(2, 0.5, 0) == Vec3(2, 1, 0)

    def test_div(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_neg(self):
        assert -Vec3(1, -2, 3) == Vec3(-1, 2, -3)

    def test_operators_do_not_mutate(self):
        a = Vec3(1, 2, 3)
        _ = a + Vec3(1, 1, 1)
        _ = a * 5
        assert a == Vec3(1, 2, 3)


class TestVec3Operations:
    """Test geometric operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == pytest.approx(5.0)
        assert Vec3(3, 4, 0).length_squared() == pytest.approx(25.0)

    def test_normalize(self):
        v = Vec3(3, 4, 12).normalize()
        assert v.length() == pytest.approx(1.0)

    def test_normalize_zero(self):
        assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)

    def test_dot_cross(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)

    def test_reflect(self):
        reflected = Vec3(1, -1, 0).reflect(Vec3(0, 1, 0))
        assert reflected == Vec3(1, 1, 0)

    def test_refract_normal_incidence(self):
        refracted = Vec3(0, 0, -1).refract(Vec3(0, 0, 1), 1 / 1.5)
        assert refracted == Vec3(0, 0, -1)

    def test_refract_bends_toward_normal(self):
        incoming = Vec3(1, -1, 0).normalize()
        refracted = incoming.refract(Vec3(0, 1, 0), 1 / 1.5)
        assert refracted.length() == pytest.approx(1.0)
        # Snell: sin(out) = sin(in) / 1.5
        assert refracted.x == pytest.approx(math.sin(math.pi / 4) / 1.5)

    def test_near_zero(self):
        assert Vec3(1e-9, -1e-9, 0).near_zero()
        assert not Vec3(1e-3, 0, 0).near_zero()


class TestVec3Random:
    """Test random sampling helpers."""

    def test_random_range(self):
        rng = np.random.default_rng(1)
        for _ in range(100):
            v = Vec3.random(rng, -2, 3)
            assert all(-2 <= c < 3 for c in v)

    def test_in_unit_sphere(self):
        rng = np.random.default_rng(2)
        for _ in range(200):
            assert Vec3.random_in_unit_sphere(rng).length_squared() < 1

    def test_unit_vector(self):
        rng = np.random.default_rng(3)
        for _ in range(100):
            assert Vec3.random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_in_unit_disk(self):
        rng = np.random.default_rng(4)
        for _ in range(200):
            p = Vec3.random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1

    def test_seeded_streams_repeat(self):
        a = [Vec3.random_in_unit_sphere(np.random.default_rng(9)) for _ in range(3)]
        b = [Vec3.random_in_unit_sphere(np.random.default_rng(9)) for _ in range(3)]
        assert a == b
