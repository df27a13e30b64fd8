import math
from fractions import Fraction

import pytest

from mosaic.validation import (
    InvalidArgument,
    validate_aspect_ratios,
    validate_dimension,
    validate_image_path,
)


def test_validate_aspect_ratios_returns_floats():
    assert validate_aspect_ratios([1, Fraction(1, 2), 2.5]) == [1.0, 0.5, 2.5]
    assert validate_aspect_ratios(()) == []


def test_validate_aspect_ratios_reports_index():
    with pytest.raises(InvalidArgument, match="index 2"):
        validate_aspect_ratios([1.0, 2.0, -3.0])


@pytest.mark.parametrize("bad", ["1.5", 5, None])
def test_validate_aspect_ratios_rejects_non_sequences(bad):
    with pytest.raises(InvalidArgument):
        validate_aspect_ratios(bad)


def test_validate_dimension():
    assert validate_dimension("spacing", 0, allow_zero=True) == 0.0
    with pytest.raises(InvalidArgument):
        validate_dimension("max_width", 0)
    with pytest.raises(InvalidArgument):
        validate_dimension("spacing", -0.5, allow_zero=True)
    with pytest.raises(InvalidArgument):
        validate_dimension("max_width", math.inf)


def test_validate_image_path(tmp_path):
    image = tmp_path / "photo.JPG"
    image.write_bytes(b"")
    assert validate_image_path(image, {".jpg"}) == image.resolve()
    assert validate_image_path(image, ["jpg"]) == image.resolve()

    with pytest.raises(InvalidArgument):
        validate_image_path(tmp_path / "missing.jpg", {".jpg"})
    with pytest.raises(InvalidArgument):
        validate_image_path(tmp_path, {".jpg"})
    with pytest.raises(InvalidArgument):
        validate_image_path(image, {".png"})
    with pytest.raises(InvalidArgument):
        validate_image_path("https://example.com/a.jpg", {".jpg"})
