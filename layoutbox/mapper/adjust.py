# -*- coding: utf-8 -*-
# File: adjust.py

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
Aligning sides and sizes of all boxes of a collection.

Every adjustment comes in two flavours: A function returning a new collection and an `..._inplace` function that
replaces the boxes of the given collection and returns nothing.
"""

from typing import Callable

from ..datapoint.box import Box
from ..datapoint.boxa import BoxCollection
from ..utils.settings import BoxSide, HeightAdjust, TypeOrStr, WidthAdjust, get_type
from .maputils import check_box_collection

__all__ = [
    "set_side",
    "set_side_inplace",
    "adjust_width_to_target",
    "adjust_width_to_target_inplace",
    "adjust_height_to_target",
    "adjust_height_to_target_inplace",
]


def _set_box_side(box: Box, side: BoxSide, val: int, thresh: int) -> Box:
    if side == BoxSide.LEFT:
        diff = box.x - val
        if abs(diff) >= thresh:
            return Box(val, box.y, box.w + diff, box.h)
    elif side == BoxSide.RIGHT:
        diff = box.right - val
        if abs(diff) >= thresh:
            return Box(box.x, box.y, val - box.x + 1, box.h)
    elif side == BoxSide.TOP:
        diff = box.y - val
        if abs(diff) >= thresh:
            return Box(box.x, val, box.w, box.h + diff)
    else:
        diff = box.bottom - val
        if abs(diff) >= thresh:
            return Box(box.x, box.y, box.w, val - box.y + 1)
    return box


def _adjust_box_width(box: Box, sides: WidthAdjust, target: int, thresh: int) -> Box:
    if not box.is_valid:
        return box
    diff = box.w - target
    if abs(diff) < thresh:
        return box
    if sides == WidthAdjust.LEFT:
        return Box(max(0, box.x + diff), box.y, target, box.h)
    if sides == WidthAdjust.RIGHT:
        return Box(box.x, box.y, target, box.h)
    return Box(max(0, box.x + int(diff / 2)), box.y, target, box.h)


def _adjust_box_height(box: Box, sides: HeightAdjust, target: int, thresh: int) -> Box:
    if not box.is_valid:
        return box
    diff = box.h - target
    if abs(diff) < thresh:
        return box
    if sides == HeightAdjust.TOP:
        return Box(box.x, max(0, box.y + diff), box.w, target)
    if sides == HeightAdjust.BOTTOM:
        return Box(box.x, box.y, box.w, target)
    return Box(box.x, max(0, box.y + int(diff / 2)), box.w, target)


def _apply(boxes: BoxCollection, func: Callable[[Box], Box]) -> BoxCollection:
    return BoxCollection(func(box) for box in boxes)


def _apply_inplace(boxes: BoxCollection, func: Callable[[Box], Box]) -> None:
    # compute everything first, so that a failing box leaves the collection untouched
    adjusted = [func(box) for box in boxes]
    for index, box in enumerate(adjusted):
        boxes.replace(index, box)


def _get_set_side_func(side: TypeOrStr, val: int, thresh: int) -> Callable[[Box], Box]:
    side = get_type(side, BoxSide)
    if val < 0:
        raise ValueError(f"val must be >= 0, got {val}")
    return lambda box: _set_box_side(box, side, val, thresh)  # type: ignore


def set_side(boxes: BoxCollection, side: TypeOrStr, val: int, thresh: int) -> BoxCollection:
    """
    Set one side of each box to `val`, if it differs from `val` by at least `thresh`. The opposite side stays fixed.

    Example:
        ```python
        # align all left sides within 5 pixels of x=100
        set_side(boxes, BoxSide.LEFT, 100, 0)
        ```

    Args:
        boxes: Collection
        side: `BoxSide` member. For `right` and `bottom`, `val` is the inclusive location.
        val: New location of the side
        thresh: Min absolute difference to cause resetting to `val`

    Returns:
        New collection

    Raises:
        ValueError: If `side` is not a `BoxSide` or `val < 0`
    """
    check_box_collection(boxes)
    return _apply(boxes, _get_set_side_func(side, val, thresh))


def set_side_inplace(boxes: BoxCollection, side: TypeOrStr, val: int, thresh: int) -> None:
    """
    Same as `set_side`, but replaces the boxes of `boxes`.
    """
    check_box_collection(boxes)
    _apply_inplace(boxes, _get_set_side_func(side, val, thresh))


def _get_width_func(sides: TypeOrStr, target: int, thresh: int) -> Callable[[Box], Box]:
    sides = get_type(sides, WidthAdjust)
    if target < 1:
        raise ValueError(f"target must be >= 1, got {target}")
    return lambda box: _adjust_box_width(box, sides, target, thresh)  # type: ignore


def adjust_width_to_target(boxes: BoxCollection, sides: TypeOrStr, target: int, thresh: int) -> BoxCollection:
    """
    Set the width of each box to `target`, if it differs from `target` by at least `thresh`. Boxes without area are
    left as they are, for the width as well as for the height. Placeholders, e.g. from
    `split_even_odd(..., fill=True)`, keep their zero width instead of being widened to `target`.

    Args:
        boxes: Collection
        sides: `WidthAdjust.LEFT` moves the left side, `WidthAdjust.RIGHT` the right side and
               `WidthAdjust.LEFT_AND_RIGHT` both sides by half of the difference, rounded towards zero. The left
               side is clipped at `0`.
        target: Target width
        thresh: Min absolute difference in width to cause adjustment

    Returns:
        New collection

    Raises:
        ValueError: If `sides` is not a `WidthAdjust` or `target < 1`
    """
    check_box_collection(boxes)
    return _apply(boxes, _get_width_func(sides, target, thresh))


def adjust_width_to_target_inplace(boxes: BoxCollection, sides: TypeOrStr, target: int, thresh: int) -> None:
    """
    Same as `adjust_width_to_target`, but replaces the boxes of `boxes`.
    """
    check_box_collection(boxes)
    _apply_inplace(boxes, _get_width_func(sides, target, thresh))


def _get_height_func(sides: TypeOrStr, target: int, thresh: int) -> Callable[[Box], Box]:
    sides = get_type(sides, HeightAdjust)
    if target < 1:
        raise ValueError(f"target must be >= 1, got {target}")
    return lambda box: _adjust_box_height(box, sides, target, thresh)  # type: ignore


def adjust_height_to_target(boxes: BoxCollection, sides: TypeOrStr, target: int, thresh: int) -> BoxCollection:
    """
    Set the height of each box to `target`, if it differs from `target` by at least `thresh`. Boxes without area are
    left as they are. `sides` is a `HeightAdjust` member, see `adjust_width_to_target`.
    """
    check_box_collection(boxes)
    return _apply(boxes, _get_height_func(sides, target, thresh))


def adjust_height_to_target_inplace(boxes: BoxCollection, sides: TypeOrStr, target: int, thresh: int) -> None:
    """
    Same as `adjust_height_to_target`, but replaces the boxes of `boxes`.
    """
    check_box_collection(boxes)
    _apply_inplace(boxes, _get_height_func(sides, target, thresh))
