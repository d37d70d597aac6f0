# main.py
import argparse
import logging
import sys
import time
from typing import List, Optional
from core.vector import Point3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from renderer.ppm import write_ppm
from renderer.image_io import save_png
from logging_config import setup_logging

logger = logging.getLogger(__name__)

ASPECT_RATIO = 16.0 / 9.0
IMAGE_WIDTH = 400
OUTPUT_PATH = "image.ppm"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a sphere scene to a plain-text PPM image.",
    )
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=ASPECT_RATIO,
        help=f"Image width divided by height (default: {ASPECT_RATIO:.4f})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=IMAGE_WIDTH,
        help=f"Image width in pixels (default: {IMAGE_WIDTH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=OUTPUT_PATH,
        help=f"Output PPM file path (default: {OUTPUT_PATH})",
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        help="Also save the image as a PNG at this path",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log messages to this file",
    )
    return parser.parse_args(argv)


def create_world() -> HittableList:
    """
    Builds the default scene: a small sphere resting on a large ground sphere.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5))
    world.add(Sphere(Point3(0, -100.5, -1), 100))
    return world


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        setup_logging(getattr(logging, args.log_level), args.log_file)
    except OSError as e:
        print(f"Error: cannot open log file {args.log_file}: {e}", file=sys.stderr)
        return 1

    try:
        camera = Camera(aspect_ratio=args.aspect_ratio, image_width=args.width)
        world = create_world()
        logger.info("Scene has %d objects", len(world))

        start_time = time.time()
        image = camera.render(world)
        logger.info("Rendered in %.2fs", time.time() - start_time)

        write_ppm(image, args.output)
        if args.png:
            save_png(image, args.png)
        return 0
    except Exception:
        logger.exception("Rendering failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
