# -*- coding: utf-8 -*-
# File: combine.py

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
Joining collections and splitting a collection by even and odd positions
"""

from typing import Optional

from ..datapoint.box import Box
from ..datapoint.boxa import BoxCollection, BoxCollectionGroup
from ..utils.error import BoxCollectionError
from .maputils import check_box_collection

__all__ = ["join", "join_groups", "split_even_odd", "merge_even_odd"]


def _get_join_range(num_items: int, start: int, end: int) -> range:
    if start < 0:
        start = 0
    if end < 0 or end >= num_items:
        end = num_items - 1
    if start > end:
        raise ValueError(f"start > end: {start} > {end}")
    return range(start, end + 1)


def join(boxes_dst: BoxCollection, boxes_src: Optional[BoxCollection], start: int = 0, end: int = -1) -> None:
    """
    Append the boxes `boxes_src[start], ..., boxes_src[end]` to `boxes_dst`.

    Example:
        ```python
        join(boxes_dst, boxes_src, 1)  # appends all boxes of boxes_src but the first
        ```

    Args:
        boxes_dst: Collection to extend
        boxes_src: Collection to take boxes from. Nothing happens if it is `None` or empty.
        start: First index to take. Negative values are treated as `0`.
        end: Last index to take (inclusive). Negative or too large values are treated as the last index.

    Raises:
        ValueError: If `start > end` after the adjustments above
    """
    check_box_collection(boxes_dst, "boxes_dst")
    if not boxes_src:
        return
    check_box_collection(boxes_src, "boxes_src")
    boxes_dst.extend(boxes_src[index] for index in _get_join_range(len(boxes_src), start, end))


def join_groups(
    group_dst: BoxCollectionGroup, group_src: Optional[BoxCollectionGroup], start: int = 0, end: int = -1
) -> None:
    """
    Append the collections `group_src[start], ..., group_src[end]` to `group_dst`. Same index rules as `join`.
    """
    if not isinstance(group_dst, BoxCollectionGroup):
        raise BoxCollectionError(f"group_dst must be a BoxCollectionGroup, got {type(group_dst).__name__}")
    if not group_src:
        return
    if not isinstance(group_src, BoxCollectionGroup):
        raise BoxCollectionError(f"group_src must be a BoxCollectionGroup, got {type(group_src).__name__}")
    for index in _get_join_range(len(group_src), start, end):
        group_dst.append(group_src[index])


def split_even_odd(boxes: BoxCollection, fill: bool = False) -> tuple[BoxCollection, BoxCollection]:
    """
    Split a collection into the boxes at even and the boxes at odd positions.

    Args:
        boxes: Collection
        fill: If `True`, both outputs have the length of `boxes` and carry a placeholder `Box(0, 0, 0, 0)` at each
              position of the other parity.

    Returns:
        Tuple of the even and the odd collection
    """
    check_box_collection(boxes)
    boxes_even, boxes_odd = BoxCollection(), BoxCollection()
    placeholder = Box(0, 0, 0, 0)
    for index, box in enumerate(boxes):
        if index % 2 == 0:
            boxes_even.append(box)
            if fill:
                boxes_odd.append(placeholder)
        else:
            boxes_odd.append(box)
            if fill:
                boxes_even.append(placeholder)
    return boxes_even, boxes_odd


def merge_even_odd(boxes_even: BoxCollection, boxes_odd: BoxCollection, fill: bool = False) -> BoxCollection:
    """
    Inverse of `split_even_odd`.

    Args:
        boxes_even: Boxes for the even positions
        boxes_odd: Boxes for the odd positions
        fill: Whether the inputs have been generated with `split_even_odd(..., fill=True)`. The boxes at the same
              parity position are taken then, the placeholders are dropped.

    Returns:
        New collection

    Raises:
        BoxCollectionError: If the sizes do not fit. Without `fill`, `boxes_even` must have the same size as or one
                            more box than `boxes_odd`. With `fill`, both must have the same size.
    """
    check_box_collection(boxes_even, "boxes_even")
    check_box_collection(boxes_odd, "boxes_odd")
    num_even, num_odd = len(boxes_even), len(boxes_odd)

    if fill:
        if num_even != num_odd:
            raise BoxCollectionError(f"filled collections must have equal size, got {num_even} and {num_odd}")
        return BoxCollection(
            boxes_even[index] if index % 2 == 0 else boxes_odd[index] for index in range(num_even)
        )

    if not num_odd <= num_even <= num_odd + 1:
        raise BoxCollectionError(f"invalid sizes: {num_even} even boxes and {num_odd} odd boxes")
    merged = BoxCollection()
    for index in range(num_even):
        merged.append(boxes_even[index])
        if index < num_odd:
            merged.append(boxes_odd[index])
    return merged
