"""Aspect ratio helpers."""
from __future__ import annotations

from enum import Enum

from . import config


class AspectRatioType(Enum):
    """Coarse orientation of a media item."""

    WIDE = "wide"      # w/h > 1.2
    NARROW = "narrow"  # w/h < 0.8
    SQUARE = "square"


def classify(ratio: float) -> AspectRatioType:
    """Classify a width/height *ratio*.  The caller validates the ratio."""
    if ratio > config.WIDE_THRESHOLD:
        return AspectRatioType.WIDE
    if ratio < config.NARROW_THRESHOLD:
        return AspectRatioType.NARROW
    return AspectRatioType.SQUARE


def aspect_ratio_from_size(width: float, height: float) -> float:
    """Return ``width / height``, or ``1.0`` for degenerate sizes.

    Video tracks occasionally report a zero dimension; treating those as
    square keeps them usable as layout input.
    """
    width = abs(width)
    height = abs(height)
    if not width > 0 or not height > 0:
        return 1.0
    return width / height
