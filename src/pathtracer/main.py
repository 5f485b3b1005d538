# main.py
import argparse
import logging
import sys
from typing import List, Optional
from pathtracer import scenes
from pathtracer.config import QUALITY_LEVELS, settings_for
from pathtracer.renderer.image_writer import write_image
from pathtracer.renderer.raytracer import Renderer

logger = logging.getLogger("pathtracer")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a demo scene with the Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=scenes.SCENE_NAMES, default="random",
                        help="Scene to render (default: random)")
    parser.add_argument("--quality", choices=tuple(QUALITY_LEVELS),
                        help="Quality level applied on top of the scene defaults")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum bounces per path")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes (default: 1)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for scene construction and sampling")
    parser.add_argument("-o", "--output", default="output.ppm",
                        help="Output path; .ppm is written as text, other formats via Pillow")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    try:
        scene = scenes.get(args.scene, seed=args.seed)
        settings = settings_for(scene, quality=args.quality, width=args.width,
                                samples_per_pixel=args.samples, max_depth=args.max_depth,
                                workers=args.workers, seed=args.seed,
                                output=args.output).validate()
    except ValueError as e:
        logger.error("%s", e)
        return 1

    renderer = Renderer(settings.width, settings.height, settings.samples_per_pixel,
                        settings.max_depth, workers=settings.workers, seed=settings.seed)
    image = renderer.render(scene.world, scene.camera, scene.background)
    write_image(settings.output, image)
    return 0

if __name__ == "__main__":
    sys.exit(main())
