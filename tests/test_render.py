import pytest
from PIL import Image

from mosaic import config
from mosaic.layout import LayoutConfig, compute_layout
from mosaic.media import MediaItem
from mosaic.positions import Corner
from mosaic.render import render_mosaic, rounded_mask
from mosaic.validation import InvalidArgument


def assert_color_close(actual, expected, tolerance=30):
    assert len(actual) == len(expected)
    for component_actual, component_expected in zip(actual, expected, strict=True):
        assert abs(component_actual - component_expected) <= tolerance


def test_single_image_fills_frame_with_rounded_corners():
    layout = compute_layout([2.0], LayoutConfig(max_width=100, max_height=100))
    result = render_mosaic([Image.new("RGB", (40, 20), "red")], layout)

    assert result.size == (100, 50)
    assert result.mode == "RGBA"
    assert_color_close(result.getpixel((50, 25)), (255, 0, 0, 255))
    assert result.getpixel((0, 0))[3] == 0
    assert result.getpixel((0, 49))[3] == 0


def test_bottom_corners_square_when_not_attached():
    layout = compute_layout([2.0], LayoutConfig(max_width=100, max_height=100))
    result = render_mosaic(
        [Image.new("RGB", (40, 20), "red")], layout, attached_to_bottom=False
    )
    assert result.getpixel((0, 0))[3] == 0
    assert result.getpixel((0, 49))[3] == 255
    assert result.getpixel((99, 49))[3] == 255


def test_inner_corners_stay_square_and_gaps_transparent():
    layout = compute_layout([1.0, 1.0], LayoutConfig(max_width=102, max_height=200))
    images = [Image.new("RGB", (10, 10), "red"), Image.new("RGB", (10, 10), "blue")]
    result = render_mosaic(images, layout)

    assert result.size == (102, 102)
    assert result.getpixel((49, 0))[3] == 255  # inner top-right of the left item
    assert result.getpixel((50, 51))[3] == 0  # spacing gap
    assert_color_close(result.getpixel((80, 51)), (0, 0, 255, 255))


def test_missing_image_draws_placeholder():
    layout = compute_layout([1.0], LayoutConfig(max_width=60, max_height=60))
    result = render_mosaic([None], layout)
    assert result.getpixel((30, 30)) == config.PLACEHOLDER_COLOR


def test_video_items_get_play_overlay():
    layout = compute_layout([1.0], LayoutConfig(max_width=200, max_height=400))
    white = Image.new("RGB", (50, 50), "white")
    media = [MediaItem.video("clip.mp4", "thumb.jpg", 65)]

    plain = render_mosaic([white], layout)
    with_overlay = render_mosaic([white], layout, media_items=media)

    assert plain.getpixel((85, 100))[0] == 255
    assert with_overlay.getpixel((85, 100))[0] < 200


def test_mismatched_inputs_raise():
    layout = compute_layout([1.0, 1.0], LayoutConfig(max_width=100, max_height=100))
    with pytest.raises(InvalidArgument):
        render_mosaic([None], layout)
    with pytest.raises(InvalidArgument):
        render_mosaic([None, None], layout, media_items=[MediaItem.photo("a.jpg")])


def test_empty_layout_renders_empty_canvas():
    assert render_mosaic([], []).size == (0, 0)


def test_rounded_mask_only_rounds_requested_corners():
    mask = rounded_mask((40, 40), Corner.TOP_LEFT | Corner.BOTTOM_RIGHT, 10)
    assert mask.getpixel((0, 0)) == 0
    assert mask.getpixel((39, 39)) == 0
    assert mask.getpixel((39, 0)) == 255
    assert mask.getpixel((0, 39)) == 255

    square = rounded_mask((40, 40), Corner.NONE, 10)
    assert square.getpixel((0, 0)) == 255
