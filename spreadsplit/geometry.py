"""
Page boxes and the down-the-middle cut.

Units are PDF points (1 point = 1/72 inch). The origin is the lower left
corner of the page space, y grows upwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import MalformedGeometryError


class Orientation(Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class BoundingBox:
    lower_left_x: float
    lower_left_y: float
    upper_right_x: float
    upper_right_y: float

    @property
    def width(self) -> float:
        return self.upper_right_x - self.lower_left_x

    @property
    def height(self) -> float:
        return self.upper_right_y - self.lower_left_y

    @property
    def lower_left(self) -> Tuple[float, float]:
        return self.lower_left_x, self.lower_left_y

    @property
    def upper_right(self) -> Tuple[float, float]:
        return self.upper_right_x, self.upper_right_y

    def as_list(self):
        return [self.lower_left_x, self.lower_left_y, self.upper_right_x, self.upper_right_y]

    def validate(self) -> "BoundingBox":
        if self.width <= 0 or self.height <= 0:
            raise MalformedGeometryError(
                f"Box {self.as_list()} has a non-positive size ({self.width} x {self.height})"
            )
        return self


@dataclass(frozen=True)
class SplitRectangle:
    """One half of a source page box."""
    side: Side
    box: BoundingBox


def classify_orientation(box: BoundingBox) -> Orientation:
    """Square boxes count as landscape."""
    if box.height <= box.width:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


def split_box(box: BoundingBox, orientation: Orientation) -> Tuple[SplitRectangle, SplitRectangle]:
    """
    Cut a box in two down the middle.

    Landscape boxes are cut vertically and yield (LEFT, RIGHT), portrait boxes
    are cut horizontally and yield (TOP, BOTTOM). The returned order is the
    order the halves are added to the destination document.
    """
    box.validate()

    if orientation is Orientation.LANDSCAPE:
        # shared edge of both halves, computed once
        left_width = box.lower_left_x + box.width / 2
        left = BoundingBox(box.lower_left_x, box.lower_left_y, left_width, box.upper_right_y)
        right = BoundingBox(left_width, box.lower_left_y, box.upper_right_x, box.upper_right_y)
        return SplitRectangle(Side.LEFT, left), SplitRectangle(Side.RIGHT, right)

    mid_y = box.lower_left_y + box.height / 2
    top = BoundingBox(box.lower_left_x, mid_y, box.upper_right_x, box.upper_right_y)
    bottom = BoundingBox(box.lower_left_x, box.lower_left_y, box.upper_right_x, mid_y)
    return SplitRectangle(Side.TOP, top), SplitRectangle(Side.BOTTOM, bottom)
