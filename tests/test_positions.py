import pytest

from mosaic.positions import Corner, PositionFlags, corner_mask

TOP = PositionFlags.TOP
BOTTOM = PositionFlags.BOTTOM
LEFT = PositionFlags.LEFT
RIGHT = PositionFlags.RIGHT


def test_corner_predicates():
    flags = TOP | LEFT | RIGHT
    assert flags.is_top_left and flags.is_top_right
    assert not flags.is_bottom_left and not flags.is_bottom_right
    assert PositionFlags.ALL.is_bottom_right
    assert not PositionFlags.NONE.is_top_left


def test_edge_names_sorted():
    assert (BOTTOM | LEFT).edge_names() == ["bottom", "left"]
    assert PositionFlags.NONE.edge_names() == []


@pytest.mark.parametrize(
    "position, expected",
    [
        (PositionFlags.ALL, Corner.ALL),
        (TOP | BOTTOM | LEFT, Corner.TOP_LEFT | Corner.BOTTOM_LEFT),
        (TOP | LEFT | RIGHT, Corner.TOP_LEFT | Corner.TOP_RIGHT),
        (BOTTOM | RIGHT, Corner.BOTTOM_RIGHT),
        (BOTTOM, Corner.NONE),
        (TOP, Corner.NONE),
        (PositionFlags.NONE, Corner.NONE),
    ],
)
def test_corner_mask_attached_to_bottom(position, expected):
    assert corner_mask(position, attached_to_bottom=True) == expected


@pytest.mark.parametrize(
    "position, expected",
    [
        (PositionFlags.ALL, Corner.TOP_LEFT | Corner.TOP_RIGHT),
        (TOP | BOTTOM | LEFT, Corner.TOP_LEFT),
        (BOTTOM | LEFT, Corner.NONE),
        (BOTTOM | RIGHT, Corner.NONE),
    ],
)
def test_corner_mask_not_attached_drops_bottom(position, expected):
    assert corner_mask(position, attached_to_bottom=False) == expected


def test_corner_mask_defaults_to_attached():
    assert corner_mask(PositionFlags.ALL) == Corner.ALL
