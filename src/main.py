# main.py
import argparse
import logging
import math
import sys
from typing import List, Optional
from camera.camera import Camera
from config import RenderConfig
from core.color import Color
from core.point import Point
from core.transforms import chain, scale, translate, view_transform
from core.vector import Vector
from geometry.object import Object
from geometry.world import World
from logging_config import setup_logging
from materials.light import PointLight
from materials.presets import ColorPresets, MaterialPresets

logger = logging.getLogger(__name__)


def create_world() -> World:
    """
    A room built from flattened spheres with three spheres standing on the
    floor, lit by one white light.
    """
    world = World()

    wall_material = MaterialPresets.matte(Color(1.0, 0.9, 0.9))
    floor = Object.sphere(scale(10, 0.01, 10), wall_material)
    world.push_object(floor)

    left_wall = Object.sphere(
        chain().scale(10, 0.01, 10).rotate_x(math.pi / 2).rotate_y(-math.pi / 4).translate(0, 0, 5).matrix,
        wall_material)
    world.push_object(left_wall)

    right_wall = Object.sphere(
        chain().scale(10, 0.01, 10).rotate_x(math.pi / 2).rotate_y(math.pi / 4).translate(0, 0, 5).matrix,
        wall_material)
    world.push_object(right_wall)

    world.push_object(Object.sphere(translate(-0.5, 1, 0.5), MaterialPresets.plastic(Color(0.1, 1.0, 0.5))))
    world.push_object(Object.sphere(
        chain().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5).matrix,
        MaterialPresets.glossy(ColorPresets.BLUE)))
    world.push_object(Object.sphere(
        chain().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75).matrix,
        MaterialPresets.metal(ColorPresets.ORANGE)))

    world.push_light_source(PointLight(Point(-10, 10, -10), Color.white()))
    return world


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a demo scene with the Phong ray tracer.")
    parser.add_argument("--width", type=int, default=RenderConfig.WIDTH, help="image width in pixels")
    parser.add_argument("--height", type=int, default=RenderConfig.HEIGHT, help="image height in pixels")
    parser.add_argument("--fov", type=float, default=math.degrees(RenderConfig.FIELD_OF_VIEW),
                        help="field of view in degrees")
    parser.add_argument("--output", default=RenderConfig.OUTPUT_PATH,
                        help="output image (.ppm is written as plain text)")
    parser.add_argument("--tone-map", action="store_true", default=RenderConfig.TONE_MAP,
                        help="apply Reinhard tone mapping instead of clamping")
    parser.add_argument("--preview", action="store_true", help="show the image in a pygame window")
    parser.add_argument("--log-level", default=RenderConfig.LOG_LEVEL, help="logging level")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if not 0 < args.fov < 180:
        parser.error("--fov must be between 0 and 180 degrees")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    world = create_world()
    camera = Camera(args.width, args.height, math.radians(args.fov),
                    view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)))
    image = camera.render(world)

    try:
        image.save(args.output, tone_map=args.tone_map)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1

    if args.preview:
        from renderer.preview import show
        show(image, tone_map=args.tone_map)
    return 0


if __name__ == "__main__":
    sys.exit(main())
