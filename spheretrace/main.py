#!/usr/bin/env python3
"""
Command-line entry point: render a scene to a PNG
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import RenderConfig, load_config
from .errors import ConfigError, OutputWriteError, SphereTraceError
from .renderer import Renderer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_OUTPUT_FAILED = 1
EXIT_RENDER_FAILED = 1
EXIT_BAD_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spheretrace",
        description="Ray trace mirrored spheres lit by bulbs into a PNG",
    )
    parser.add_argument("--config", help="JSON file with render settings and scene")
    parser.add_argument("-o", "--output", help="output image path (default: output.png)")
    parser.add_argument("--resolution", type=int, help="output width and height in pixels")
    parser.add_argument("--supersample", type=int, help="supersampling multiplier")
    parser.add_argument("--final-only", action="store_true",
                        help="render only the full supersample level")
    parser.add_argument("--show", action="store_true",
                        help="display the final image in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def make_config(args: argparse.Namespace) -> RenderConfig:
    config = load_config(args.config) if args.config else RenderConfig()
    overrides = {}
    if args.output:
        overrides['output_path'] = args.output
    if args.resolution is not None:
        overrides['resolution'] = args.resolution
    if args.supersample is not None:
        overrides['supersample'] = args.supersample
    if args.final_only:
        overrides['progressive'] = False
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = make_config(args)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_BAD_CONFIG

    renderer = Renderer(config)
    try:
        image = renderer.render()
    except OutputWriteError as e:
        logger.error(str(e))
        print("can't save output image", file=sys.stderr)
        return EXIT_OUTPUT_FAILED
    except SphereTraceError as e:
        logger.error(f"Render failed: {e}")
        return EXIT_RENDER_FAILED

    stats = renderer.get_statistics()
    logger.info(f"Done: {len(stats['levels'])} levels, {stats['total_rays']} rays "
                f"in {stats['total_seconds']:.1f}s -> {config.output_path}")

    if args.show:
        from .preview import show_image
        show_image(image, title=str(config.output_path))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
