"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: common colors,
a unit sphere, a ground plane, and a tracer stand-in that records the
secondary rays a material asks for.
"""

import pytest

from raytracer.core.color import Color
from raytracer.core.vector import Normal3, Point3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.materials.single_color import SingleColorMaterial


RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def xyz(v):
    """Components of a vector, point or normal as a tuple for pytest.approx."""
    return (v.x, v.y, v.z)


class RecordingTracer:
    """Stand-in for Tracer that records rays and answers with a callback.

    The callback maps a ray to the color the tracer should return, so tests
    can tell the reflected and the transmitted contributions apart.
    """

    def __init__(self, color_for_ray=None):
        self.rays = []
        self.color_for_ray = color_for_ray or (lambda ray: Color.white())

    def trace(self, ray, world):
        self.rays.append(ray)
        return self.color_for_ray(ray)


@pytest.fixture
def recording_tracer():
    """Factory fixture returning a new RecordingTracer."""
    return RecordingTracer


@pytest.fixture
def red_material():
    return SingleColorMaterial(RED)


@pytest.fixture
def unit_sphere(red_material):
    """Sphere of radius 1 at the origin."""
    return Sphere(Point3(0, 0, 0), 1.0, red_material)


@pytest.fixture
def ground_plane():
    """The plane y = 0 facing up."""
    return Plane(Point3(0, 0, 0), Normal3(0, 1, 0), SingleColorMaterial(GREEN))
