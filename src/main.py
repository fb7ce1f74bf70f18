# main.py
import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import config
from camera.camera import Camera
from camera.projection import ProjectionWall
from core.color import ColorRGBA, FullBright
from core.matrix import Matrix4
from core.vector import Point, Vector
from geometry.scene import Scene
from geometry.sphere import Sphere
from geometry.world import Limits, WorldInfo
from lights.directional_light import DirectionalLight
from lights.light import Lights
from lights.point_light import PointLight
from logging_config import setup_logging
from materials.phong import Phong
from materials.presets import ColorPresets, LightPresets, PatternPresets, PhongPresets
from renderer.image_formats import save_image
from renderer.raytracer import Renderer
from renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger(__name__)

SceneParts = Tuple[Scene, Lights, object]


def sphere_scene(width: int, height: int) -> SceneParts:
    """One grey sphere lit by a single white light."""
    material = Phong().with_diffuse(ColorRGBA(0.5, 0.5, 0.5, 1.0)).with_shininess(30.0)
    scene = Scene([Sphere(Matrix4.identity(), material)])
    lights = Lights([LightPresets.key_light()])
    return scene, lights, ProjectionWall()


def pair_scene(width: int, height: int) -> SceneParts:
    """A grey sphere with a red one stacked on top of it."""
    material = Phong().with_diffuse(ColorRGBA(0.5, 0.5, 0.5, 1.0)).with_shininess(30.0)
    material_red = Phong().with_diffuse(ColorRGBA(1.0, 0.5, 0.5, 1.0)).with_shininess(30.0)
    scene = Scene([
        Sphere(Matrix4.identity(), material),
        Sphere(Matrix4.translate(0.0, 1.0, 0.0), material_red),
    ])
    lights = Lights([LightPresets.key_light()])
    return scene, lights, ProjectionWall()


def two_lights_scene(width: int, height: int) -> SceneParts:
    """Magenta and yellow tinted lights from either side."""
    material = Phong().with_diffuse(ColorRGBA(0.5, 0.5, 0.5, 1.0)).with_shininess(30.0)
    scene = Scene([Sphere(Matrix4.identity(), material)])
    lights = Lights([
        PointLight(Point(-10.0, 10.0, -10.0), ColorRGBA(1.0, 0.5, 1.0, 250.0)),
        PointLight(Point(10.0, 10.0, -10.0), ColorRGBA(1.0, 1.0, 0.5, 250.0)),
    ])
    return scene, lights, ProjectionWall()


def checker_scene(width: int, height: int) -> SceneParts:
    """A squashed, tilted sphere wearing a shaded checker pattern."""
    transform = Matrix4.rotation_z(math.pi / 6) * Matrix4.scale(1.5, 0.75, 1.0)
    scene = Scene([Sphere(transform, PatternPresets.lit_checkerboard(FullBright.WHITE, ColorPresets.BLUE))])
    lights = Lights([LightPresets.key_light()])
    return scene, lights, ProjectionWall()


def camera_scene(width: int, height: int) -> SceneParts:
    """A row of spheres on top of a flattened "floor" sphere, seen through a perspective camera."""
    floor = Sphere(Matrix4.translate(0.0, -101.0, 0.0) * Matrix4.scale_uniform(100.0),
                   PhongPresets.matte(ColorPresets.GRAY))
    scene = Scene([
        floor,
        Sphere(Matrix4.translate(-2.5, 0.0, 0.0), PhongPresets.plastic(ColorPresets.RED)),
        Sphere(Matrix4.identity(), PhongPresets.glossy(ColorPresets.GREEN)),
        Sphere(Matrix4.translate(2.5, 0.0, 0.0), PhongPresets.matte(ColorPresets.BLUE)),
    ])
    lights = Lights([
        LightPresets.key_light(Point(-10.0, 10.0, -10.0), 300.0),
        LightPresets.cool_light(Point(10.0, 5.0, -5.0), 150.0),
        DirectionalLight(Vector(0.0, -1.0, 0.5), ColorRGBA(1.0, 1.0, 1.0, 0.3)),
    ])
    viewer = Camera.from_yaw_pitch(
        position=Point(0.0, 1.5, -8.0),
        yaw=0.0,
        pitch=-0.15,
        hsize=width / height,
        vsize=1.0,
        fov=math.radians(60),
    )
    return scene, lights, viewer


SCENES: Dict[str, Callable[[int, int], SceneParts]] = {
    "sphere": sphere_scene,
    "pair": pair_scene,
    "two-lights": two_lights_scene,
    "checker": checker_scene,
    "camera": camera_scene,
}


def build_world(scene_name: str, width: int, height: int,
                max_light_bounces: int = config.MAX_LIGHT_BOUNCES) -> Tuple[WorldInfo, object]:
    """Returns the WorldInfo and the viewer for one of the example scenes."""
    try:
        builder = SCENES[scene_name]
    except KeyError:
        raise ValueError(f"Unknown scene {scene_name!r}; choose from {sorted(SCENES)}") from None
    scene, lights, viewer = builder(width, height)
    world_info = WorldInfo(scene, lights, Limits(max_light_bounces=max_light_bounces))
    return world_info, viewer


def scaled_size(width: int, height: int, quality: str) -> Tuple[int, int]:
    """Applies the quality preset's resolution scale; never below 8x8."""
    scale = config.QUALITY_LEVELS[quality]["scale"]
    return max(8, int(width * scale)), max(8, int(height * scale))


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CPU Phong ray tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="pair",
                        help="Example scene to render")
    parser.add_argument("--width", type=int, default=config.RENDER_WIDTH, help="Image width")
    parser.add_argument("--height", type=int, default=config.RENDER_HEIGHT, help="Image height")
    parser.add_argument("--quality", choices=sorted(config.QUALITY_LEVELS), default=config.RENDER_QUALITY,
                        help="Resolution preset applied on top of width/height")
    parser.add_argument("--workers", type=int, default=config.RENDER_WORKERS,
                        help="Number of worker threads (default: CPU count)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="clamp",
                        help="How linear colors are mapped to 8 bits")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output image (.png, .ppm or .pam); default OUTPUT_DIR/<scene>.png")
    parser.add_argument("--preview", action="store_true", help="Show the result in a pygame window")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> Path:
    width, height = scaled_size(args.width, args.height, args.quality)
    world_info, viewer = build_world(args.scene, width, height)
    logger.info("Scene %r: %d bodies, %d lights", args.scene,
                len(world_info.root_object), len(world_info.lights))

    renderer = Renderer(width, height, workers=args.workers)
    canvas = renderer.render(world_info, viewer)

    tone_map = TONE_MAPPERS[args.tone_map]
    output = args.output if args.output is not None else config.OUTPUT_DIR / f"{args.scene}.png"
    save_image(canvas, output, tone_map)

    if args.preview:
        from renderer.preview import show_canvas
        show_canvas(canvas, title=f"Ray Tracer - {args.scene}", tone_map=tone_map)

    return output


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    setup_logging(None, args.log_level, args.log_file)
    try:
        run(args)
    except Exception:
        logger.exception("Render failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
