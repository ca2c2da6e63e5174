# main.py
import argparse
import logging
import math
import sys
from typing import List, Optional
from core.vector import Color, Point3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from renderer.export import save_png
from renderer.raytracer import Renderer
from renderer.tone_mapping import gamma_correct, reinhard_tone_mapping

logger = logging.getLogger(__name__)

ASPECT_RATIO = 16.0 / 9.0

QUALITY_LEVELS = {
    "preview": {"samples": 10, "bounces": 10},
    "balanced": {"samples": 50, "bounces": 25},
    "final": {"samples": 100, "bounces": 50},
}

def create_world() -> HittableList:
    """
    Ground plane with a diffuse sphere flanked by two mirrors.
    """
    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(Color(0.8, 0.8, 0.0))))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.7, 0.3, 0.3))))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.8, 0.8))))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, Metal(Color(0.8, 0.6, 0.2))))
    logger.debug("Created world with %d spheres", len(world))
    return world

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a sphere scene to a PNG image.")
    parser.add_argument("--width", type=int, default=800, help="image width in pixels")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="final",
                        help="sampling preset")
    parser.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=int, help="maximum bounces (overrides --quality)")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible image")
    parser.add_argument("--tone-map", choices=["gamma", "reinhard"], default="gamma")
    parser.add_argument("-o", "--output", default="image.png", help="output PNG path")
    parser.add_argument("-v", "--verbose", action="store_true", help="log per-scanline progress")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    quality = QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["bounces"]
    height = math.floor(args.width / ASPECT_RATIO)

    try:
        renderer = Renderer(args.width, height, samples_per_pixel=samples,
                            max_depth=max_depth, seed=args.seed)
        camera = Camera(aspect_ratio=ASPECT_RATIO)
        accumulated = renderer.render(create_world(), camera)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 2

    if args.tone_map == "reinhard":
        pixels = reinhard_tone_mapping(accumulated / samples)
    else:
        pixels = gamma_correct(accumulated, samples)
    save_png(pixels, args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
