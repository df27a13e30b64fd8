"""Edge flags of mosaic items and the corner masks derived from them."""
from __future__ import annotations

from enum import Flag
from typing import List


class PositionFlags(Flag):
    """Edges of the whole composed block that an item touches."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8

    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT
    ALL = TOP | BOTTOM | LEFT | RIGHT

    @property
    def is_top_left(self) -> bool:
        return PositionFlags.TOP_LEFT in self

    @property
    def is_top_right(self) -> bool:
        return PositionFlags.TOP_RIGHT in self

    @property
    def is_bottom_left(self) -> bool:
        return PositionFlags.BOTTOM_LEFT in self

    @property
    def is_bottom_right(self) -> bool:
        return PositionFlags.BOTTOM_RIGHT in self

    def edge_names(self) -> List[str]:
        """Return the set edges as lowercase names, sorted."""
        return sorted(edge.name.lower() for edge in EDGES if edge in self)


EDGES = (PositionFlags.TOP, PositionFlags.BOTTOM, PositionFlags.LEFT, PositionFlags.RIGHT)


class Corner(Flag):
    """Outer corners of an item that are drawn rounded."""

    NONE = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 8
    ALL = TOP_LEFT | TOP_RIGHT | BOTTOM_LEFT | BOTTOM_RIGHT


CORNERS = (Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT)


def corner_mask(position: PositionFlags, attached_to_bottom: bool = True) -> Corner:
    """Return the corners to round for an item at *position*.

    When the mosaic is not the last element of its container the bottom
    edge is dropped first, so content rendered below keeps square corners.
    """
    if not attached_to_bottom:
        position &= ~PositionFlags.BOTTOM

    mask = Corner.NONE
    if position.is_top_left:
        mask |= Corner.TOP_LEFT
    if position.is_top_right:
        mask |= Corner.TOP_RIGHT
    if position.is_bottom_left:
        mask |= Corner.BOTTOM_LEFT
    if position.is_bottom_right:
        mask |= Corner.BOTTOM_RIGHT
    return mask
