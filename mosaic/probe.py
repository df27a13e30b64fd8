"""Read aspect ratios from image files with Pillow.

Only the image header is parsed; pixel data is never decoded here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from PIL import ExifTags, Image, UnidentifiedImageError

from . import config
from .aspect import aspect_ratio_from_size
from .validation import InvalidArgument, validate_image_path

LOGGER = logging.getLogger(__name__)

# EXIF orientations that rotate the image by 90 or 270 degrees
_TRANSPOSED_ORIENTATIONS = {5, 6, 7, 8}

SUPPORTED_EXTENSIONS = {f".{ext}" for ext in config.SUPPORTED_IMAGE_FORMATS}


class MediaProbeError(Exception):
    """Raised when a media file cannot be inspected."""


def aspect_ratio_of_image(image: Image.Image) -> float:
    """Return the displayed width/height ratio of *image*.

    EXIF orientation is honoured so portrait photos taken on a rotated
    sensor are classified as narrow, not wide.
    """
    width, height = image.size
    orientation = image.getexif().get(ExifTags.Base.Orientation)
    if orientation in _TRANSPOSED_ORIENTATIONS:
        width, height = height, width
    return aspect_ratio_from_size(width, height)


def probe_aspect_ratio(path: Union[str, Path]) -> float:
    """Open the image at *path* and return its aspect ratio.

    Raises:
        MediaProbeError: If the path is invalid or the file is not a readable image.
    """
    try:
        safe_path = validate_image_path(path, SUPPORTED_EXTENSIONS)
    except InvalidArgument as exc:
        raise MediaProbeError(str(exc)) from exc

    try:
        with Image.open(safe_path) as img:
            return aspect_ratio_of_image(img)
    except (UnidentifiedImageError, OSError) as exc:
        raise MediaProbeError(f"Cannot read image {safe_path}: {exc}") from exc


def probe_aspect_ratios(
    paths: Iterable[Union[str, Path]], *, skip_invalid: bool = False
) -> List[Tuple[Path, float]]:
    """Probe every path and return ``(path, ratio)`` pairs in input order.

    With ``skip_invalid`` unreadable files are logged and left out;
    otherwise the first failure is raised.
    """
    results: List[Tuple[Path, float]] = []
    for path in paths:
        try:
            ratio = probe_aspect_ratio(path)
        except MediaProbeError as e:
            if not skip_invalid:
                raise
            LOGGER.warning("Skipping invalid image %s: %s", path, e)
            continue
        results.append((Path(path), ratio))
    return results
