"""Mosaic layout engine for media groups."""

from .aspect import AspectRatioType, aspect_ratio_from_size, classify
from .layout import (
    LayoutConfig,
    LayoutResult,
    MosaicItem,
    Rect,
    compute_height,
    compute_layout,
    item_at,
    layout_to_json,
)
from .media import MediaItem, duration_badge_frame, format_duration, play_overlay_frame
from .positions import Corner, PositionFlags, corner_mask
from .validation import InvalidArgument

__all__ = [
    "AspectRatioType",
    "aspect_ratio_from_size",
    "classify",
    "LayoutConfig",
    "LayoutResult",
    "MosaicItem",
    "Rect",
    "compute_height",
    "compute_layout",
    "item_at",
    "layout_to_json",
    "MediaItem",
    "duration_badge_frame",
    "format_duration",
    "play_overlay_frame",
    "Corner",
    "PositionFlags",
    "corner_mask",
    "InvalidArgument",
]
