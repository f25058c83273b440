"""Whitted-style recursive ray tracer.

Subpackages:
    core: vectors, points, normals, colors, rays, constants and errors
    geometry: intersectable shapes, hit records and the World scene
    lights: point, directional and spot lights
    materials: local and recursive (reflective, transparent) shading
    camera: perspective and orthographic primary-ray generation
    renderer: recursive tracer, per-pixel renderer and image export
"""

__version__ = "0.1.0"
