"""Input validation for layout requests and media files."""
from __future__ import annotations

import math
import numbers
from pathlib import Path
from typing import Any, Iterable, List, Union
from urllib.parse import urlparse


class InvalidArgument(ValueError):
    """Raised when layout input falls outside the engine's contract."""


def _is_finite_real(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def validate_aspect_ratios(aspect_ratios: Iterable[float]) -> List[float]:
    """Return *aspect_ratios* as a list of floats.

    Every ratio must be a positive, finite real number.  The whole sequence
    is checked before anything is returned so callers never see a partially
    validated list.
    """
    if isinstance(aspect_ratios, (str, bytes)):
        raise InvalidArgument("Aspect ratios must be a sequence of numbers")
    try:
        ratios = list(aspect_ratios)
    except TypeError as exc:
        raise InvalidArgument("Aspect ratios must be a sequence of numbers") from exc

    for index, ratio in enumerate(ratios):
        if not _is_finite_real(ratio) or ratio <= 0:
            raise InvalidArgument(
                f"Aspect ratio at index {index} must be a positive finite number, got {ratio!r}"
            )
    return [float(ratio) for ratio in ratios]


def validate_dimension(name: str, value: Any, *, allow_zero: bool = False) -> float:
    """Validate a width, height or spacing value and return it as ``float``."""
    if not _is_finite_real(value):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}")
    if allow_zero and value < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {value!r}")
    if not allow_zero and value <= 0:
        raise InvalidArgument(f"{name} must be > 0, got {value!r}")
    return float(value)


def _has_url_scheme(path_str: str) -> bool:
    """Return True if *path_str* looks like a URL with a scheme.

    Single-letter schemes such as ``"C"`` are treated as drive letters on
    Windows and therefore ignored.
    """
    parsed = urlparse(path_str)
    return bool(parsed.scheme and len(parsed.scheme) > 1)


def validate_image_path(path: Union[str, Path], allowed_exts: Iterable[str]) -> Path:
    """Validate a media *path* before probing it.

    The path must point to an existing file with an allowed extension and must
    not include a URL scheme.  Returns the resolved ``Path`` object.
    """
    path_str = str(path)
    if _has_url_scheme(path_str):
        raise InvalidArgument("URLs are not allowed")

    p = Path(path_str).expanduser()
    try:
        p = p.resolve(strict=True)
    except FileNotFoundError as exc:
        raise InvalidArgument(f"File does not exist: {path_str}") from exc

    if not p.is_file():
        raise InvalidArgument(f"Not a file: {path_str}")

    allowed = {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in allowed_exts}
    if p.suffix.lower() not in allowed:
        raise InvalidArgument(f"Unsupported file extension: {p.suffix}")

    return p
