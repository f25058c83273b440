"""Unit tests for light sources.

Tests cover:
- Directions towards point, directional and spot lights
- Shadow rays blocked by geometry between the point and the light
- Occluders behind the light or behind the point
- Spot cone limits
- A light placed exactly at the shaded point
"""

import math

import pytest

from raytracer.core.color import Color
from raytracer.core.errors import InvalidConfigurationError
from raytracer.core.vector import Point3, Vector3
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import World
from raytracer.lights.directional_light import DirectionalLight
from raytracer.lights.point_light import PointLight
from raytracer.lights.spot_light import SpotLight
from raytracer.materials.single_color import SingleColorMaterial

from conftest import RED, xyz


ORIGIN = Point3(0, 0, 0)


@pytest.fixture
def blocker_world():
    """A small sphere hovering at y = 5 above the origin."""
    return World(geometries=[Sphere(Point3(0, 5, 0), 1, SingleColorMaterial(RED))])


class TestPointLight:

    def test_direction(self):
        light = PointLight(Color.white(), Point3(0, 10, 0))
        assert xyz(light.direction_from(ORIGIN)) == pytest.approx((0, 1, 0))

    def test_shadowed_by_geometry_between(self, blocker_world):
        light = PointLight(Color.white(), Point3(0, 10, 0), casts_shadows=True)
        assert not light.illuminates(ORIGIN, blocker_world)

    def test_shadows_disabled(self, blocker_world):
        light = PointLight(Color.white(), Point3(0, 10, 0))
        assert light.illuminates(ORIGIN, blocker_world)

    def test_occluder_beyond_light(self, blocker_world):
        light = PointLight(Color.white(), Point3(0, 2, 0), casts_shadows=True)
        assert light.illuminates(ORIGIN, blocker_world)

    def test_surface_does_not_shadow_itself(self, blocker_world):
        # The point lies on the sphere's top, the light straight above it.
        light = PointLight(Color.white(), Point3(0, 10, 0), casts_shadows=True)
        assert light.illuminates(Point3(0, 6, 0), blocker_world)

    def test_light_at_point(self):
        light = PointLight(Color.white(), ORIGIN)
        assert not light.illuminates(ORIGIN, World())

    def test_non_finite_position_raises(self):
        with pytest.raises(InvalidConfigurationError):
            PointLight(Color.white(), Point3(math.inf, 0, 0))


class TestDirectionalLight:

    def test_direction_is_reversed_and_normalized(self):
        light = DirectionalLight(Color.white(), Vector3(0, -2, 0))
        assert xyz(light.direction_from(Point3(3, 4, 5))) == pytest.approx((0, 1, 0))

    def test_everything_is_lit_without_shadows(self, blocker_world):
        light = DirectionalLight(Color.white(), Vector3(0, -1, 0))
        assert light.illuminates(ORIGIN, blocker_world)

    def test_any_occluder_casts_shadow(self, blocker_world):
        light = DirectionalLight(Color.white(), Vector3(0, -1, 0), casts_shadows=True)
        assert not light.illuminates(ORIGIN, blocker_world)
        assert light.illuminates(Point3(5, 0, 0), blocker_world)

    def test_zero_direction_raises(self):
        with pytest.raises(InvalidConfigurationError):
            DirectionalLight(Color.white(), Vector3(0, 0, 0))


class TestSpotLight:

    def spot(self, **kwargs):
        return SpotLight(Color.white(), Point3(0, 10, 0), Vector3(0, -1, 0), math.pi / 8, **kwargs)

    def test_inside_cone(self):
        assert self.spot().illuminates(Point3(1, 0, 0), World())

    def test_outside_cone(self):
        assert not self.spot().illuminates(Point3(10, 0, 0), World())

    def test_behind_spot(self):
        assert not self.spot().illuminates(Point3(0, 20, 0), World())

    def test_shadowed_inside_cone(self, blocker_world):
        assert not self.spot(casts_shadows=True).illuminates(ORIGIN, blocker_world)

    def test_direction(self):
        assert xyz(self.spot().direction_from(ORIGIN)) == pytest.approx((0, 1, 0))

    def test_light_at_point(self):
        assert not self.spot().illuminates(Point3(0, 10, 0), World())

    @pytest.mark.parametrize("half_angle", [0, -0.1, 4.0, math.nan, None])
    def test_invalid_half_angle(self, half_angle):
        with pytest.raises(InvalidConfigurationError):
            SpotLight(Color.white(), ORIGIN, Vector3(0, -1, 0), half_angle)
