"""Compose a mosaic image with Pillow.

This is the drawing side of the engine: it takes a computed layout and the
decoded images and produces a single RGBA picture with the outer corners
rounded the same way a message bubble would show them.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont, ImageOps

from . import config
from .layout import MosaicItem, Rect
from .media import MediaItem, duration_badge_frame, format_duration, play_overlay_frame
from .positions import Corner, corner_mask
from .validation import InvalidArgument

LOGGER = logging.getLogger(__name__)

Box = Tuple[int, int, int, int]


def _px(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pixel_box(frame: Rect) -> Box:
    """Snap *frame* to whole pixels as ``(left, top, right, bottom)``."""
    return _px(frame.x), _px(frame.y), _px(frame.max_x), _px(frame.max_y)


def rounded_mask(size: Tuple[int, int], corners: Corner, radius: float) -> Image.Image:
    """Return an ``L`` mask of *size* with only *corners* rounded."""
    width, height = size
    mask = Image.new("L", size, 0)
    radius = int(min(radius, width // 2, height // 2))
    draw = ImageDraw.Draw(mask)
    if radius <= 0 or corners == Corner.NONE:
        draw.rectangle((0, 0, width - 1, height - 1), fill=255)
        return mask
    draw.rounded_rectangle(
        (0, 0, width - 1, height - 1),
        radius=radius,
        fill=255,
        # Pillow order: top-left, top-right, bottom-right, bottom-left
        corners=(
            Corner.TOP_LEFT in corners,
            Corner.TOP_RIGHT in corners,
            Corner.BOTTOM_RIGHT in corners,
            Corner.BOTTOM_LEFT in corners,
        ),
    )
    return mask


def _tile_for(image: Optional[Image.Image], size: Tuple[int, int]) -> Image.Image:
    if image is None:
        return Image.new("RGBA", size, config.PLACEHOLDER_COLOR)
    oriented = ImageOps.exif_transpose(image).convert("RGBA")
    # Aspect fill: scale to cover the frame, crop the overflow.
    return ImageOps.fit(oriented, size, Image.Resampling.LANCZOS)


def _draw_play_overlay(draw: ImageDraw.ImageDraw, frame: Rect) -> None:
    overlay = play_overlay_frame(frame)
    draw.ellipse(_pixel_box(overlay), fill=(0, 0, 0, config.PLAY_OVERLAY_ALPHA))
    # Triangle nudged right by 2px for optical centering
    cx, cy = overlay.mid_x + 2, overlay.mid_y
    half = overlay.width / 5
    draw.polygon(
        [(cx - half, cy - half * 1.2), (cx - half, cy + half * 1.2), (cx + half * 1.2, cy)],
        fill=(255, 255, 255, 255),
    )


def _draw_duration_badge(draw: ImageDraw.ImageDraw, frame: Rect, duration: float) -> None:
    text = format_duration(duration)
    font = ImageFont.load_default()
    badge = duration_badge_frame(frame, draw.textlength(text, font=font))
    draw.rounded_rectangle(
        _pixel_box(badge),
        radius=config.DURATION_BADGE_RADIUS,
        fill=(0, 0, 0, config.DURATION_BADGE_ALPHA),
    )
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    origin = (badge.mid_x - (right - left) / 2 - left, badge.mid_y - (bottom - top) / 2 - top)
    draw.text(origin, text, font=font, fill=(255, 255, 255, 255))


def render_mosaic(
    images: Sequence[Optional[Image.Image]],
    layout: Sequence[MosaicItem],
    *,
    attached_to_bottom: bool = True,
    corner_radius: float = config.DEFAULT_CORNER_RADIUS,
    media_items: Optional[Sequence[MediaItem]] = None,
) -> Image.Image:
    """Draw *images* into the frames of *layout*.

    Args:
        images: One decoded image per layout item; ``None`` draws a placeholder.
        layout: Result of :func:`mosaic.layout.compute_layout`.
        attached_to_bottom: Whether the mosaic is the last element of its
            container; when False its bottom corners stay square.
        corner_radius: Radius for rounded outer corners.
        media_items: Optional descriptors; videos get a play button and a
            duration badge.

    Returns:
        An RGBA image sized to the outer extent of *layout*.
    """
    if len(images) != len(layout):
        raise InvalidArgument(f"Expected {len(layout)} images, got {len(images)}")
    if media_items is not None and len(media_items) != len(layout):
        raise InvalidArgument(f"Expected {len(layout)} media items, got {len(media_items)}")

    width = max((_px(item.frame.max_x) for item in layout), default=0)
    height = max((_px(item.frame.max_y) for item in layout), default=0)
    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    if not layout:
        return canvas

    overlays = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    overlay_draw = ImageDraw.Draw(overlays)

    for item in layout:
        left, top, right, bottom = _pixel_box(item.frame)
        size = (right - left, bottom - top)
        if size[0] <= 0 or size[1] <= 0:
            LOGGER.warning("Skipping item %d with empty frame %s", item.index, item.frame)
            continue

        image = images[item.index]
        if image is None:
            LOGGER.debug("No image for item %d, drawing placeholder", item.index)
        tile = _tile_for(image, size)
        mask = rounded_mask(size, corner_mask(item.position, attached_to_bottom), corner_radius)
        canvas.paste(tile, (left, top), mask)

        media = media_items[item.index] if media_items is not None else None
        if media is not None and media.is_video:
            _draw_play_overlay(overlay_draw, item.frame)
            if media.duration is not None:
                _draw_duration_badge(overlay_draw, item.frame, media.duration)

    if media_items is not None:
        canvas.alpha_composite(overlays)
    return canvas
