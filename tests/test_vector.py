"""Unit tests for the core value types.

Tests cover:
- Vector3 arithmetic, dot and cross products
- Normalization, including rejection of zero and non-finite vectors
- Point3 / Vector3 / Normal3 conversions and mixed arithmetic
- Color arithmetic and clamping
- Ray evaluation and construction contracts
- Immutability of all value types
"""

import math

import pytest

from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.ray import Ray
from raytracer.core.utils import reflect, schlick
from raytracer.core.vector import Normal3, Point3, Vector3

from conftest import xyz


class TestVector3:
    """Tests for Vector3 operations."""

    def test_add_sub(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_scale_and_negate(self):
        v = Vector3(1, -2, 3)
        assert v * 2 == Vector3(2, -4, 6)
        assert 2 * v == Vector3(2, -4, 6)
        assert v / 2 == Vector3(0.5, -1, 1.5)
        assert -v == Vector3(-1, 2, -3)

    def test_dot(self):
        assert Vector3(1, 2, 3).dot(Vector3(4, -5, 6)) == 12

    def test_dot_with_normal(self):
        assert Vector3(1, 2, 3).dot(Normal3(0, 1, 0)) == 2

    def test_cross_is_right_handed(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length(self):
        assert Vector3(3, 4, 0).length() == 5

    def test_normalize(self):
        n = Vector3(0, 3, 4).normalize()
        assert xyz(n) == pytest.approx((0, 0.6, 0.8))
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(InvalidConfigurationError):
            Vector3(0, 0, 0).normalize()

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_normalize_non_finite_raises(self, bad):
        with pytest.raises(InvalidConfigurationError):
            Vector3(1, bad, 0).normalize()

    def test_is_valid(self):
        assert Vector3(1, 2, 3).is_valid()
        assert not Vector3(1, math.nan, 3).is_valid()

    def test_reflected_on(self):
        # A vector towards the light, mirrored on the normal.
        l = Vector3(1, 1, 0)
        r = l.reflected_on(Normal3(0, 1, 0))
        assert xyz(r) == pytest.approx((-1, 1, 0))

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5


class TestPointAndNormal:
    """Tests for Point3 and Normal3 and their conversions."""

    def test_point_minus_point_is_vector(self):
        v = Point3(3, 2, 1) - Point3(1, 1, 1)
        assert isinstance(v, Vector3)
        assert v == Vector3(2, 1, 0)

    def test_point_plus_vector_is_point(self):
        p = Point3(1, 1, 1) + Vector3(1, 2, 3)
        assert isinstance(p, Point3)
        assert p == Point3(2, 3, 4)

    def test_point_minus_vector_is_point(self):
        p = Point3(1, 1, 1) - Vector3(1, 2, 3)
        assert isinstance(p, Point3)
        assert p == Point3(0, -1, -2)

    def test_normal_vector_round_trip(self):
        n = Normal3(0, 1, 0)
        assert n.as_vector() == Vector3(0, 1, 0)
        assert n.as_vector().as_normal() == n

    def test_normal_is_distinct_type(self):
        assert Normal3(0, 1, 0) != Vector3(0, 1, 0)

    def test_normal_normalize(self):
        assert Normal3(0, 0, 5).normalize() == Normal3(0, 0, 1)

    def test_normal_arithmetic(self):
        assert Normal3(1, 0, 0) * 2 + Normal3(0, 1, 0) == Normal3(2, 1, 0)
        assert -Normal3(1, 0, 0) == Normal3(-1, 0, 0)


class TestColor:
    """Tests for Color arithmetic and clamping."""

    def test_add_and_scale(self):
        c = Color(0.1, 0.2, 0.3) + Color(0.1, 0.1, 0.1)
        assert c.as_tuple() == pytest.approx((0.2, 0.3, 0.4))
        assert (Color(0.5, 1, 2) * 2).as_tuple() == (1, 2, 4)
        assert (2 * Color(0.5, 1, 2)).as_tuple() == (1, 2, 4)

    def test_componentwise_product(self):
        assert Color(1, 0.5, 0) * Color(0.5, 0.5, 1) == Color(0.5, 0.25, 0)

    def test_clamp(self):
        assert Color(-1, 0.5, 3).clamp() == Color(0, 0.5, 1)

    def test_black_and_white(self):
        assert Color.black() == Color(0, 0, 0)
        assert Color.white() == Color(1, 1, 1)


class TestRay:
    """Tests for the Ray value type."""

    def test_at(self):
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))
        assert ray.at(0) == Point3(0, 0, 5)
        assert ray.at(4) == Point3(0, 0, 1)

    def test_none_members_raise(self):
        with pytest.raises(InvalidConfigurationError):
            Ray(None, Vector3(0, 0, 1))
        with pytest.raises(InvalidConfigurationError):
            Ray(Point3(0, 0, 0), None)

    def test_immutable(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))
        with pytest.raises(AttributeError):
            ray.origin = Point3(1, 1, 1)


class TestUtils:
    """Tests for reflection and Fresnel helpers."""

    def test_reflect(self):
        d = Vector3(1, -1, 0)
        assert xyz(reflect(d, Normal3(0, 1, 0))) == pytest.approx((1, 1, 0))

    def test_schlick_normal_incidence_is_r0(self):
        assert schlick(1.0, 1.0, 1.5) == pytest.approx(0.04)

    def test_schlick_grazing_is_total(self):
        assert schlick(0.0, 1.0, 1.5) == pytest.approx(1.0)
