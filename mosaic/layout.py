"""Mosaic layout for media groups.

Given the aspect ratios of the photos and videos shown together in one
message and the width of the container, compute a frame and a set of outer
edge flags for every item.  The arrangement depends only on how many items
there are and on the orientation of the leading item(s):

* 1 item   - full width, height from the aspect ratio
* 2 items  - stacked when both are wide, otherwise side by side
* 3 items  - one on top (wide lead) or one on the left
* 4 items  - one on top (wide lead) or a 2x2 grid
* 5+ items - one on top, one on the left, or two on top

The module is UI agnostic and free of state between calls, so it can be
used from any thread and unit tested without a rendering surface.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from . import config
from .aspect import AspectRatioType, classify
from .positions import PositionFlags
from .validation import InvalidArgument, validate_aspect_ratios, validate_dimension

LOGGER = logging.getLogger(__name__)

TOP = PositionFlags.TOP
BOTTOM = PositionFlags.BOTTOM
LEFT = PositionFlags.LEFT
RIGHT = PositionFlags.RIGHT


@dataclass(frozen=True, slots=True)
class Rect:
    """Container-relative rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        """Return True when the point lies inside; right and bottom edges are exclusive."""
        return self.x <= x < self.max_x and self.y <= y < self.max_y

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Sizing of the composed block.

    Attributes:
        max_width: Container width.
        max_height: Cap on the total composed height.  There is no default;
            message bubbles use :data:`mosaic.config.BUBBLE_MAX_HEIGHT`.
        spacing: Gap between neighbouring items.
    """

    max_width: float
    max_height: float
    spacing: float = config.DEFAULT_SPACING

    def __post_init__(self) -> None:
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "max_width", validate_dimension("max_width", self.max_width))
        object.__setattr__(self, "max_height", validate_dimension("max_height", self.max_height))
        object.__setattr__(
            self, "spacing", validate_dimension("spacing", self.spacing, allow_zero=True)
        )


@dataclass(frozen=True, slots=True)
class MosaicItem:
    """Placement of one media item inside the mosaic."""

    frame: Rect
    position: PositionFlags
    index: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "frame": self.frame.to_dict(),
            "position": self.position.edge_names(),
        }


LayoutResult = List[MosaicItem]


def _round_half_up(value: float) -> float:
    # Python's round() is banker's rounding; widths round half away from zero.
    return float(math.floor(value + 0.5)) if value >= 0 else -float(math.floor(-value + 0.5))


# ----------------------------------------------------------------------
# Single item
# ----------------------------------------------------------------------
def _layout_single(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    width = cfg.max_width
    height = min(width / ratios[0], cfg.max_height)
    return [MosaicItem(Rect(0.0, 0.0, width, height), PositionFlags.ALL, 0)]


# ----------------------------------------------------------------------
# Two items
# ----------------------------------------------------------------------
def _layout_two(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    if classify(ratios[0]) is AspectRatioType.WIDE and classify(ratios[1]) is AspectRatioType.WIDE:
        return _layout_two_stacked(cfg)
    return _layout_two_side_by_side(ratios, cfg)


def _layout_two_stacked(cfg: LayoutConfig) -> LayoutResult:
    width = cfg.max_width
    total_height = min(cfg.max_height, width / 2)
    height = (total_height - cfg.spacing) / 2
    return [
        MosaicItem(Rect(0.0, 0.0, width, height), TOP | LEFT | RIGHT, 0),
        MosaicItem(Rect(0.0, height + cfg.spacing, width, height), BOTTOM | LEFT | RIGHT, 1),
    ]


def _layout_two_side_by_side(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    ratio0, ratio1 = ratios[0], ratios[1]
    usable = cfg.max_width - cfg.spacing
    width0 = _round_half_up(usable * ratio0 / (ratio0 + ratio1))
    width1 = usable - width0

    average_ratio = (ratio0 + ratio1) / 2
    height = min(cfg.max_width / average_ratio, cfg.max_height)
    return [
        MosaicItem(Rect(0.0, 0.0, width0, height), TOP | BOTTOM | LEFT, 0),
        MosaicItem(Rect(width0 + cfg.spacing, 0.0, width1, height), TOP | BOTTOM | RIGHT, 1),
    ]


# ----------------------------------------------------------------------
# Three items
# ----------------------------------------------------------------------
def _layout_three(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    total_height = min(cfg.max_height, cfg.max_width * config.THREE_ITEMS_HEIGHT_FACTOR)
    if classify(ratios[0]) is AspectRatioType.WIDE:
        return _top_one_over_row(3, total_height, config.THREE_ITEMS_TOP_SHARE, cfg)

    spacing = cfg.spacing
    left_width = cfg.max_width * config.THREE_ITEMS_LEFT_SHARE
    right_width = cfg.max_width - left_width - spacing
    right_height = (total_height - spacing) / 2
    right_x = left_width + spacing
    return [
        MosaicItem(Rect(0.0, 0.0, left_width, total_height), TOP | BOTTOM | LEFT, 0),
        MosaicItem(Rect(right_x, 0.0, right_width, right_height), TOP | RIGHT, 1),
        MosaicItem(
            Rect(right_x, right_height + spacing, right_width, right_height), BOTTOM | RIGHT, 2
        ),
    ]


# ----------------------------------------------------------------------
# Four items
# ----------------------------------------------------------------------
def _layout_four(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    if classify(ratios[0]) is AspectRatioType.WIDE:
        total_height = min(cfg.max_height, cfg.max_width * config.THREE_ITEMS_HEIGHT_FACTOR)
        return _top_one_over_row(4, total_height, config.FOUR_ITEMS_TOP_SHARE, cfg)
    return _layout_four_grid(cfg)


def _layout_four_grid(cfg: LayoutConfig) -> LayoutResult:
    spacing = cfg.spacing
    cell_width = (cfg.max_width - spacing) / 2
    # Cells are square unless the height cap squeezes them.
    total_height = min(cfg.max_height, 2 * cell_width + spacing)
    cell_height = (total_height - spacing) / 2
    second_x = cell_width + spacing
    second_y = cell_height + spacing
    return [
        MosaicItem(Rect(0.0, 0.0, cell_width, cell_height), TOP | LEFT, 0),
        MosaicItem(Rect(second_x, 0.0, cell_width, cell_height), TOP | RIGHT, 1),
        MosaicItem(Rect(0.0, second_y, cell_width, cell_height), BOTTOM | LEFT, 2),
        MosaicItem(Rect(second_x, second_y, cell_width, cell_height), BOTTOM | RIGHT, 3),
    ]


# ----------------------------------------------------------------------
# Five or more items
# ----------------------------------------------------------------------
def _layout_many(ratios: Sequence[float], cfg: LayoutConfig) -> LayoutResult:
    count = len(ratios)
    total_height = min(cfg.max_height, cfg.max_width * config.MANY_ITEMS_HEIGHT_FACTOR)
    lead = classify(ratios[0])
    if lead is AspectRatioType.WIDE:
        return _top_one_over_row(count, total_height, config.MANY_ITEMS_TOP_SHARE, cfg)
    if lead is AspectRatioType.NARROW:
        return _layout_many_left_one(count, total_height, cfg)
    return _layout_many_two_top(count, total_height, cfg)


def _layout_many_left_one(count: int, total_height: float, cfg: LayoutConfig) -> LayoutResult:
    spacing = cfg.spacing
    left_width = cfg.max_width * config.MANY_ITEMS_LEFT_SHARE
    right_width = cfg.max_width - left_width - spacing

    rows = math.ceil((count - 1) / 2)
    cell_height = (total_height - (rows - 1) * spacing) / rows
    cell_width = (right_width - spacing) / 2

    items = [MosaicItem(Rect(0.0, 0.0, left_width, total_height), TOP | BOTTOM | LEFT, 0)]
    for index in range(1, count):
        row, column = divmod(index - 1, 2)
        position = PositionFlags.NONE
        if row == 0:
            position |= TOP
        if row == rows - 1:
            position |= BOTTOM
        if column == 1:
            position |= RIGHT
        x = left_width + spacing + column * (cell_width + spacing)
        y = row * (cell_height + spacing)
        items.append(MosaicItem(Rect(x, y, cell_width, cell_height), position, index))
    return items


def _layout_many_two_top(count: int, total_height: float, cfg: LayoutConfig) -> LayoutResult:
    spacing = cfg.spacing
    top_height = total_height * config.MANY_ITEMS_TOP_SHARE
    top_width = (cfg.max_width - spacing) / 2
    items = [
        MosaicItem(Rect(0.0, 0.0, top_width, top_height), TOP | LEFT, 0),
        MosaicItem(Rect(top_width + spacing, 0.0, top_width, top_height), TOP | RIGHT, 1),
    ]
    items.extend(_bottom_row(2, count, top_height, total_height, cfg))
    return items


# ----------------------------------------------------------------------
# Shared building blocks
# ----------------------------------------------------------------------
def _top_one_over_row(
    count: int, total_height: float, top_share: float, cfg: LayoutConfig
) -> LayoutResult:
    """One full-width item on top, the rest in a single row below."""
    top_height = total_height * top_share
    items = [MosaicItem(Rect(0.0, 0.0, cfg.max_width, top_height), TOP | LEFT | RIGHT, 0)]
    items.extend(_bottom_row(1, count, top_height, total_height, cfg))
    return items


def _bottom_row(
    first: int, count: int, top_height: float, total_height: float, cfg: LayoutConfig
) -> LayoutResult:
    """Equal-width row for items ``first..count-1`` below a top band."""
    spacing = cfg.spacing
    row_count = count - first
    width = (cfg.max_width - (row_count - 1) * spacing) / row_count
    height = total_height - top_height - spacing
    y = top_height + spacing

    items = []
    for index in range(first, count):
        position = BOTTOM
        if index == first:
            position |= LEFT
        if index == count - 1:
            position |= RIGHT
        x = (index - first) * (width + spacing)
        items.append(MosaicItem(Rect(x, y, width, height), position, index))
    return items


_LAYOUT_DISPATCH: Dict[int, Callable[[Sequence[float], LayoutConfig], LayoutResult]] = {
    1: _layout_single,
    2: _layout_two,
    3: _layout_three,
    4: _layout_four,
}


def _ensure_fits(items: LayoutResult, cfg: LayoutConfig) -> None:
    for item in items:
        if item.frame.width < 0 or item.frame.height < 0:
            raise InvalidArgument(
                f"Container {cfg.max_width}x{cfg.max_height} is too small for "
                f"{len(items)} items with spacing {cfg.spacing}"
            )


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------
def compute_layout(aspect_ratios: Iterable[float], cfg: LayoutConfig) -> LayoutResult:
    """Compute frames and edge flags for a media group.

    Args:
        aspect_ratios: Width/height ratio of each item, in display order.
        cfg: Container sizing.

    Returns:
        One :class:`MosaicItem` per ratio, in input order.

    Raises:
        InvalidArgument: If a ratio is not a positive finite number, *cfg* is
            not a :class:`LayoutConfig`, or the container cannot fit the
            gaps of the chosen arrangement.
    """
    if not isinstance(cfg, LayoutConfig):
        raise InvalidArgument(f"Expected LayoutConfig, got {type(cfg).__name__}")
    ratios = validate_aspect_ratios(aspect_ratios)
    if not ratios:
        return []

    builder = _LAYOUT_DISPATCH.get(len(ratios), _layout_many)
    items = builder(ratios, cfg)
    _ensure_fits(items, cfg)
    LOGGER.debug("Laid out %d items with %s", len(items), builder.__name__)
    return items


def compute_height(aspect_ratios: Iterable[float], cfg: LayoutConfig) -> float:
    """Return the total height :func:`compute_layout` produces, 0 when empty."""
    items = compute_layout(aspect_ratios, cfg)
    return max((item.frame.max_y for item in items), default=0.0)


def item_at(layout: Sequence[MosaicItem], x: float, y: float) -> Optional[int]:
    """Return the index of the item under the point, or None for gaps."""
    for item in layout:
        if item.frame.contains(x, y):
            return item.index
    return None


def layout_to_json(layout: Sequence[MosaicItem]) -> str:
    """Serialize *layout* for tooling and debugging output."""
    return json.dumps([item.to_dict() for item in layout], separators=(",", ":"))
