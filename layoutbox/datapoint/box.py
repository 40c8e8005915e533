# -*- coding: utf-8 -*-
# File: box.py

# Copyright 2024 Dr. Janis Meyer. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
`Box` class and geometry functions for pairs of boxes.

A box is an axis-aligned rectangle in integer pixel coordinates, given by its upper left point `(x, y)` and its
extent `(w, h)`. The right and bottom sides are inclusive pixel locations:

```python
right = x + w - 1
bottom = y + h - 1
```

Boxes with `w == 0` or `h == 0` are valid. They are used as placeholders and have no area.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from ..utils.error import BoxError
from ..utils.settings import BoxSide, TypeOrStr, get_type
from ..utils.types import BoxArray, BoxCoordinate, ClipParams, Point, PointCoordinate

__all__ = [
    "Box",
    "box_contains",
    "box_intersects",
    "overlap_region",
    "bounding_region",
    "overlap_fraction",
    "overlap_area",
    "separation_distance",
    "horizontal_separation",
    "vertical_separation",
    "box_contains_point",
    "box_intersect_by_line",
    "clip_to_rectangle",
    "clip_to_rectangle_params",
    "relocate_one_side",
    "adjust_sides",
    "boxes_equal",
    "box_similar",
]

# Slopes above this value are treated as vertical lines
VERTICAL_SLOPE = 1_000_000.0


@dataclass(frozen=True)
class Box:
    """
    Rectangular box with integer upper left point and extent.

    `Box` is a value type: Instances are frozen and every derivation returns a new box. Coordinates are rounded to
    integers on initialization.

    Example:
        ```python
        box = Box(0, 0, 10, 10)
        box.right  # 9
        box.area  # 100
        ```

    Attributes:
        x: Left side
        y: Top side
        w: Width, must be >= 0
        h: Height, must be >= 0
    """

    x: BoxCoordinate
    y: BoxCoordinate
    w: BoxCoordinate
    h: BoxCoordinate

    def __post_init__(self) -> None:
        for name in ("x", "y", "w", "h"):
            value = getattr(self, name)
            if value is None:
                raise BoxError(f"Box not fully initialized, {name} is None")
            object.__setattr__(self, name, int(round(value)))
        if self.w < 0 or self.h < 0:
            raise BoxError(f"Box must have width and height >= 0, got w: {self.w}, h: {self.h}")

    @classmethod
    def from_xyxy(cls, ulx: BoxCoordinate, uly: BoxCoordinate, lrx: BoxCoordinate, lry: BoxCoordinate) -> Box:
        """
        Create a box from its upper left and its lower right point. The lower right point is exclusive, i.e.
        `Box.from_xyxy(0, 0, 10, 10) == Box(0, 0, 10, 10)`.
        """
        return cls(ulx, uly, lrx - ulx, lry - uly)

    @classmethod
    def from_dict(cls, **kwargs: Any) -> Box:
        """from dict"""
        return cls(kwargs["x"], kwargs["y"], kwargs["w"], kwargs["h"])

    @property
    def left(self) -> int:
        """left side"""
        return self.x

    @property
    def top(self) -> int:
        """top side"""
        return self.y

    @property
    def right(self) -> int:
        """right side, inclusive"""
        return self.x + self.w - 1

    @property
    def bottom(self) -> int:
        """bottom side, inclusive"""
        return self.y + self.h - 1

    @property
    def area(self) -> int:
        """number of pixels"""
        return self.w * self.h

    @property
    def is_valid(self) -> bool:
        """`False` for placeholder boxes with no area"""
        return self.w > 0 and self.h > 0

    @property
    def center(self) -> tuple[float, float]:
        """center point"""
        return self.x + 0.5 * self.w, self.y + 0.5 * self.h

    @property
    def side_locations(self) -> tuple[int, int, int, int]:
        """`(left, right, top, bottom)` with inclusive right and bottom"""
        return self.left, self.right, self.top, self.bottom

    def to_list(self, mode: str = "xywh") -> list[int]:
        """
        Returns the coordinates as list

        Args:
            mode: `xywh` for upper left point and extent or `xyxy` for upper left and lower right point. The lower
                  right point is exclusive, i.e. `(x + w, y + h)`.
        """
        if mode == "xywh":
            return [self.x, self.y, self.w, self.h]
        if mode == "xyxy":
            return [self.x, self.y, self.x + self.w, self.y + self.h]
        raise ValueError(f"Not a valid mode: {mode}")

    def to_np_array(self, mode: str = "xywh") -> BoxArray:
        """
        Returns the coordinates as `np.array` of shape `(4,)`. See `to_list` for `mode`.
        """
        return np.array(self.to_list(mode), dtype=np.int64)

    def __str__(self) -> str:
        return f"Box(x: {self.x}, y: {self.y}, w: {self.w}, h: {self.h})"


def _check_boxes(*boxes: Any) -> None:
    for box in boxes:
        if not isinstance(box, Box):
            raise BoxError(f"Expected Box, got {type(box).__name__}")


def box_contains(box_1: Box, box_2: Box) -> bool:
    """
    Whether `box_2` lies entirely within `box_1`.

    Note:
        Uses the exclusive lower right point `(x + w, y + h)`. A box with zero area on the lower or right border of
        `box_1` is therefore contained, even though it does not intersect.

    Args:
        box_1: The containing box
        box_2: The contained box
    """
    _check_boxes(box_1, box_2)
    return (
        box_1.x <= box_2.x
        and box_1.y <= box_2.y
        and box_1.x + box_1.w >= box_2.x + box_2.w
        and box_1.y + box_1.h >= box_2.y + box_2.h
    )


def box_intersects(box_1: Box, box_2: Box) -> bool:
    """
    Whether both boxes share at least one pixel. Boxes that only touch along a side do not intersect.
    """
    _check_boxes(box_1, box_2)
    return not (
        box_2.bottom < box_1.top
        or box_1.bottom < box_2.top
        or box_1.right < box_2.left
        or box_2.right < box_1.left
    )


def overlap_region(box_1: Box, box_2: Box) -> Optional[Box]:
    """
    The geometric intersection of two boxes.

    Example:
        ```python
        overlap_region(Box(0, 0, 10, 10), Box(5, 5, 10, 10))  # Box(5, 5, 5, 5)
        ```

    Returns:
        Overlap box, or `None` if the boxes do not intersect.
    """
    if not box_intersects(box_1, box_2):
        return None
    left = max(box_1.left, box_2.left)
    top = max(box_1.top, box_2.top)
    right = min(box_1.right, box_2.right)
    bottom = min(box_1.bottom, box_2.bottom)
    return Box(left, top, right - left + 1, bottom - top + 1)


def bounding_region(box_1: Box, box_2: Box) -> Box:
    """
    The smallest box containing both boxes. Defined for disjoint boxes as well.
    """
    _check_boxes(box_1, box_2)
    left = min(box_1.left, box_2.left)
    top = min(box_1.top, box_2.top)
    right = max(box_1.right, box_2.right)
    bottom = max(box_1.bottom, box_2.bottom)
    return Box(left, top, right - left + 1, bottom - top + 1)


def overlap_fraction(box_1: Box, box_2: Box) -> float:
    """
    The fraction of `box_2` covered by `box_1`. The result depends on the order of the arguments.

    Returns:
        `area(overlap) / area(box_2)`, or `0.0` if the boxes do not overlap
    """
    overlap = overlap_region(box_1, box_2)
    if overlap is None or box_2.area == 0:
        return 0.0
    return overlap.area / box_2.area


def overlap_area(box_1: Box, box_2: Box) -> int:
    """
    Number of pixels in the overlap region, `0` if there is no overlap.
    """
    overlap = overlap_region(box_1, box_2)
    if overlap is None:
        return 0
    return overlap.area


def horizontal_separation(box_1: Box, box_2: Box) -> int:
    """
    Horizontal gap between two boxes. See `separation_distance`.
    """
    _check_boxes(box_1, box_2)
    if box_2.x >= box_1.x:
        return box_2.x - (box_1.x + box_1.w)
    return box_1.x - (box_2.x + box_2.w)


def vertical_separation(box_1: Box, box_2: Box) -> int:
    """
    Vertical gap between two boxes. See `separation_distance`.
    """
    _check_boxes(box_1, box_2)
    if box_2.y >= box_1.y:
        return box_2.y - (box_1.y + box_1.h)
    return box_1.y - (box_2.y + box_2.h)


def separation_distance(box_1: Box, box_2: Box) -> tuple[int, int]:
    """
    Horizontal and vertical separation of two boxes, given in any order.

    If the boxes are touching but have no pixels in common, the separation is `0`. If the boxes overlap by a distance
    `d` along an axis, the separation along this axis is `-d`.

    Example:
        ```python
        separation_distance(Box(0, 0, 10, 10), Box(15, 0, 10, 10))  # (5, -10)
        ```

    Returns:
        `(h_sep, v_sep)`
    """
    return horizontal_separation(box_1, box_2), vertical_separation(box_1, box_2)


def box_contains_point(box: Box, x: PointCoordinate, y: PointCoordinate) -> bool:
    """
    Whether the point `(x, y)` lies in the box.
    """
    _check_boxes(box)
    return box.x <= x < box.x + box.w and box.y <= y < box.y + box.h


def box_intersect_by_line(box: Box, x: int, y: int, slope: float) -> list[Point]:
    """
    Points where a line through `(x, y)` crosses the border of the box.

    Note:
        A vertical line can be represented by a slope above `1e6`. If the line only touches a corner, one point is
        returned.

    Args:
        box: Box
        x: x coordinate of a point on the line
        y: y coordinate of a point on the line
        slope: Slope of the line

    Returns:
        List with 0, 1 or 2 distinct points
    """
    _check_boxes(box)
    candidates: list[Point] = []
    if slope == 0.0:
        if box.y <= y < box.y + box.h:
            candidates = [(box.left, y), (box.right, y)]
    elif slope > VERTICAL_SLOPE:
        if box.x <= x < box.x + box.w:
            candidates = [(x, box.top), (x, box.bottom)]
    else:
        inv_slope = 1.0 / slope
        # top and bottom side
        for y_side in (box.top, box.bottom):
            x_p = int(x + inv_slope * (y - y_side))
            if box.x <= x_p < box.x + box.w:
                candidates.append((x_p, y_side))
        # left and right side
        for x_side in (box.left, box.right):
            y_p = int(y + slope * (x - x_side))
            if box.y <= y_p < box.y + box.h:
                candidates.append((x_side, y_p))

    points: list[Point] = []
    for point in candidates:
        if point not in points:
            points.append(point)
        if len(points) == 2:
            break
    return points


def clip_to_rectangle(box: Box, width: int, height: int) -> Optional[Box]:
    """
    Clip a box to the rectangle `[0, width) x [0, height)`, e.g. to the extent of an image.

    Returns:
        The part of the box inside the rectangle, or `None` if the box lies entirely outside.
    """
    _check_boxes(box)
    if box.x >= width or box.y >= height or box.x + box.w <= 0 or box.y + box.h <= 0:
        return None
    x, y, w, h = box.x, box.y, box.w, box.h
    if x < 0:
        w += x
        x = 0
    if y < 0:
        h += y
        y = 0
    w = min(w, width - x)
    h = min(h, height - y)
    return Box(x, y, w, h)


def clip_to_rectangle_params(box: Optional[Box], width: int, height: int) -> ClipParams:
    """
    Loop bounds for visiting all pixels of a box clipped to the rectangle `[0, width) x [0, height)`:

    ```python
    x_start, y_start, x_end, y_end, bw, bh = clip_to_rectangle_params(box, width, height)
    for i in range(y_start, y_end):
        for j in range(x_start, x_end):
            ...
    ```

    Args:
        box: Requested box. If `None`, the parameters of the full rectangle are returned.
        width: Width of the clipping rectangle
        height: Height of the clipping rectangle

    Returns:
        `(x_start, y_start, x_end, y_end, bw, bh)` where the end values are one pixel beyond the clipped box.

    Raises:
        BoxError: If the box lies outside the rectangle or the clipped box has no area.
    """
    if box is None:
        return 0, 0, width, height, width, height
    clipped = clip_to_rectangle(box, width, height)
    if clipped is None:
        raise BoxError(f"{box} outside of rectangle with width: {width}, height: {height}")
    if not clipped.is_valid:
        raise BoxError(f"Invalid clipping box {clipped}")
    return clipped.x, clipped.y, clipped.x + clipped.w, clipped.y + clipped.h, clipped.w, clipped.h


def relocate_one_side(box: Box, loc: int, side: TypeOrStr) -> Box:
    """
    Move one side of a box to a new location, keeping the opposite side fixed.

    Args:
        box: Starting box
        loc: New location of the side. For `right` and `bottom` this is the inclusive location.
        side: `BoxSide` member

    Returns:
        New box
    """
    _check_boxes(box)
    side = get_type(side, BoxSide)
    if side == BoxSide.LEFT:
        return Box(loc, box.y, box.w + box.x - loc, box.h)
    if side == BoxSide.RIGHT:
        return Box(box.x, box.y, loc - box.x + 1, box.h)
    if side == BoxSide.TOP:
        return Box(box.x, loc, box.w, box.h + box.y - loc)
    return Box(box.x, box.y, box.w, loc - box.y + 1)


def adjust_sides(box: Box, del_left: int, del_right: int, del_top: int, del_bot: int) -> Box:
    """
    Shift each side of a box. Negative values move a side to the left resp. to the top. Left and top are cropped at
    `0`.

    Example:
        ```python
        # expand by 20 pixels on each side
        adjust_sides(box, -20, 20, -20, 20)
        ```

    Raises:
        BoxError: If the resulting box has no area.
    """
    _check_boxes(box)
    x_left = max(0, box.x + del_left)
    y_top = max(0, box.y + del_top)
    x_right = box.x + box.w + del_right
    y_bottom = box.y + box.h + del_bot
    w_new = x_right - x_left
    h_new = y_bottom - y_top
    if w_new < 1 or h_new < 1:
        raise BoxError(f"Adjusted box has no area: width: {w_new}, height: {h_new}")
    return Box(x_left, y_top, w_new, h_new)


def boxes_equal(box_1: Box, box_2: Box) -> bool:
    """
    Whether both boxes have identical `x, y, w, h`.
    """
    _check_boxes(box_1, box_2)
    return box_1 == box_2


def box_similar(box_1: Box, box_2: Box, left_diff: int, right_diff: int, top_diff: int, bot_diff: int) -> bool:
    """
    Whether the corresponding sides of two boxes differ by no more than the given tolerances. With all tolerances
    set to `0` this is the same as `boxes_equal`.

    Args:
        box_1: Box
        box_2: Box
        left_diff: Max allowed deviation of the left sides
        right_diff: Max allowed deviation of the (inclusive) right sides
        top_diff: Max allowed deviation of the top sides
        bot_diff: Max allowed deviation of the (inclusive) bottom sides
    """
    _check_boxes(box_1, box_2)
    left_1, right_1, top_1, bottom_1 = box_1.side_locations
    left_2, right_2, top_2, bottom_2 = box_2.side_locations
    return (
        abs(left_1 - left_2) <= left_diff
        and abs(right_1 - right_2) <= right_diff
        and abs(top_1 - top_2) <= top_diff
        and abs(bottom_1 - bottom_2) <= bot_diff
    )
