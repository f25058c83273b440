# main.py
import argparse
import logging
import math

from raytracer import config
from raytracer.camera.perspective import PerspectiveCamera
from raytracer.core.color import Color
from raytracer.core.constants import INDEX_OF_REFRACTION_WATER
from raytracer.core.vector import Normal3, Point3, Vector3
from raytracer.geometry.box import AxisAlignedBox
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.triangle import Triangle
from raytracer.geometry.world import World
from raytracer.lights.directional_light import DirectionalLight
from raytracer.lights.point_light import PointLight
from raytracer.lights.spot_light import SpotLight
from raytracer.materials.phong import PhongMaterial
from raytracer.materials.reflective import ReflectiveMaterial
from raytracer.materials.transparent import TransparentMaterial
from raytracer.renderer.raytracer import Renderer
from raytracer.renderer.tone_mapping import save_image

logger = logging.getLogger(__name__)


def create_world(max_depth: int) -> World:
    """
    Demo scene: a mirror floor, a row of reflective spheres, water drops
    and a water block in front, lit by a spot, a point and a directional light.
    """
    world = World(background_color=Color(0, 0, 0), ambient=Color(0.1, 0.1, 0.1),
                  max_depth=max_depth)
    white = Color(1, 1, 1)
    tint = Color(1, 0.5, 0.5)

    world.add(Plane(Point3(0, 0, 0), Normal3(0, 1, 0),
                    ReflectiveMaterial(white, white, 10, white)))

    # Two rows of reflective spheres
    sphere_colors = [
        (Point3(0, 1, 0), Color(1, 0, 0)),
        (Point3(-1.5, 1, 0), Color(0, 1, 0)),
        (Point3(1.5, 1, 0), Color(0, 0, 1)),
        (Point3(0, 1, -1.5), Color(0, 1, 1)),
        (Point3(-1.5, 1, -1.5), Color(1, 0, 1)),
        (Point3(1.5, 1, -1.5), Color(1, 1, 0)),
    ]
    for center, color in sphere_colors:
        world.add(Sphere(center, 0.5, ReflectiveMaterial(color, white, 10, tint)))

    water = TransparentMaterial(INDEX_OF_REFRACTION_WATER)
    for x in (0, -1.5, 1.5):
        world.add(Sphere(Point3(x, 2, 1.5), 0.5, water))
    world.add(AxisAlignedBox(Point3(-0.5, 0, 3), Point3(0.5, 1, 4), water))
    world.add(Triangle(Point3(0.7, 0.5, 3), Point3(1.3, 0.5, 3), Point3(0.7, 0.5, 4),
                       PhongMaterial(Color(0, 1, 0), Color(0, 1, 0), 20),
                       Normal3(0, 1, 0), Normal3(0, 1, 0), Normal3(0, 1, 0)))

    world.add_light(SpotLight(Color(0.3, 0.3, 0.3), Point3(0, 5, -10), Vector3(0, -1, 0),
                              math.pi / 8.0, casts_shadows=True))
    world.add_light(PointLight(Color(0.3, 0.3, 0.3), Point3(5, 5, -10), casts_shadows=True))
    world.add_light(DirectionalLight(Color(0.3, 0.3, 0.3), Vector3(1, -1, 0)))
    return world


def create_camera() -> PerspectiveCamera:
    return PerspectiveCamera(Point3(8, 8, 8), Vector3(-1, -1, -1), Vector3(0, 1, 0), math.pi / 4.0)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = config.RENDER_SETTINGS
    parser = argparse.ArgumentParser(description='Render the demo scene with the Whitted ray tracer')
    parser.add_argument('--output', default=defaults['output'], help='Output image path')
    parser.add_argument('--width', type=int, default=defaults['width'], help='Image width')
    parser.add_argument('--height', type=int, default=defaults['height'], help='Image height')
    parser.add_argument('--quality', default=defaults['quality'], choices=sorted(config.QUALITY_LEVELS),
                        help='Quality level (resolution scale and recursion depth)')
    parser.add_argument('--workers', type=int, default=defaults['workers'],
                        help='Number of worker processes')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=config.RENDER_SETTINGS['log_level'],
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    quality = config.get_quality(args.quality)
    width, height = config.scaled_size(args.width, args.height, quality)

    # Setup the world
    world = create_world(quality['max_depth'])
    logger.info("Scene loaded: %d geometries, %d lights", len(world.geometries), len(world.lights))

    renderer = Renderer(world, create_camera(), width, height, workers=args.workers)
    save_image(renderer.render(), args.output)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
