# cli.py
"""
Command line entry point: lay out and render a media group.

    mosaic-render a.jpg b.jpg c.jpg --width 358 --output group.png
    mosaic-render a.jpg b.jpg --width 358 --json
"""
import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image, UnidentifiedImageError

from . import config
from .layout import LayoutConfig, compute_layout, layout_to_json
from .probe import MediaProbeError, probe_aspect_ratios
from .render import render_mosaic
from .validation import InvalidArgument

LOGGER_NAME = "mosaic"


def configure_logging(log_file: Optional[Path] = None) -> logging.Logger:
    """Configure and return the application logger.

    The handler setup is idempotent to avoid duplicate handlers when the
    entry point runs more than once in a process.  An optional rotating file
    handler limits on-disk log growth; output always goes to stderr so stdout
    stays clean for ``--json``.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=1_048_576,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    logger.propagate = False

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mosaic-render",
        description="Lay out a group of images as a message mosaic",
    )
    parser.add_argument("images", nargs="+", type=Path, help="Image files in display order")
    parser.add_argument("--width", type=float, required=True, help="Container width")
    parser.add_argument(
        "--max-height",
        type=float,
        default=config.BUBBLE_MAX_HEIGHT,
        help=f"Cap on the mosaic height (default: {config.BUBBLE_MAX_HEIGHT})",
    )
    parser.add_argument("--spacing", type=float, default=config.DEFAULT_SPACING)
    parser.add_argument("--radius", type=float, default=config.DEFAULT_CORNER_RADIUS)
    parser.add_argument(
        "--not-at-bottom",
        action="store_true",
        help="Content follows the mosaic; keep its bottom corners square",
    )
    parser.add_argument("--skip-invalid", action="store_true", help="Skip unreadable images")
    parser.add_argument("--json", action="store_true", help="Print the layout instead of rendering")
    parser.add_argument("--output", type=Path, default=Path("mosaic.png"))
    parser.add_argument("--log-file", type=Path, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = configure_logging(args.log_file)

    try:
        probed = probe_aspect_ratios(args.images, skip_invalid=args.skip_invalid)
        layout_config = LayoutConfig(
            max_width=args.width, max_height=args.max_height, spacing=args.spacing
        )
        layout = compute_layout([ratio for _, ratio in probed], layout_config)
    except (InvalidArgument, MediaProbeError) as e:
        logger.error("Layout failed: %s", e)
        return 1

    if args.json:
        print(layout_to_json(layout))
        return 0

    if not layout:
        logger.error("No readable images to render")
        return 1

    images = []
    try:
        for path, _ in probed:
            with Image.open(path) as img:
                images.append(img.copy())
        rendered = render_mosaic(
            images,
            layout,
            attached_to_bottom=not args.not_at_bottom,
            corner_radius=args.radius,
        )
        rendered.save(args.output)
    except (UnidentifiedImageError, OSError) as e:
        logger.error("Render failed: %s", e)
        return 1

    logger.info("Saved mosaic of %d items to %s", len(layout), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
