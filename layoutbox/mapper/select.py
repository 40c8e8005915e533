# -*- coding: utf-8 -*-
# File: select.py

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
Selecting boxes of a collection by their position relative to a reference box or point
"""

from ..datapoint.box import Box, box_contains, box_intersects, overlap_region
from ..datapoint.boxa import BoxCollection
from ..utils.error import BoxCollectionError
from ..utils.types import PointCoordinate
from .maputils import check_box, check_box_collection

__all__ = ["contained_in_box", "intersects_box", "clip_to_box", "get_nearest_to_point"]


def contained_in_box(boxes: BoxCollection, box: Box) -> BoxCollection:
    """
    All boxes that lie entirely within `box`.

    Args:
        boxes: Collection to select from
        box: Containing box

    Returns:
        New collection, empty if nothing is contained
    """
    check_box_collection(boxes)
    check_box(box)
    return BoxCollection(box_t for box_t in boxes if box_contains(box, box_t))


def intersects_box(boxes: BoxCollection, box: Box) -> BoxCollection:
    """
    All boxes that are completely or partially contained in `box`.
    """
    check_box_collection(boxes)
    check_box(box)
    return BoxCollection(box_t for box_t in boxes if box_intersects(box, box_t))


def clip_to_box(boxes: BoxCollection, box: Box) -> BoxCollection:
    """
    Clip all boxes to `box`. Boxes that do not intersect `box` are removed, all others are replaced by their
    overlap region with `box`.
    """
    check_box_collection(boxes)
    check_box(box)
    clipped = BoxCollection()
    for box_t in boxes:
        box_o = overlap_region(box, box_t)
        if box_o is not None:
            clipped.append(box_o)
    return clipped


def get_nearest_to_point(boxes: BoxCollection, x: PointCoordinate, y: PointCoordinate) -> Box:
    """
    The box whose center is closest to the point `(x, y)` in euclidean distance. On ties the first box wins.

    Raises:
        BoxCollectionError: If the collection is empty
    """
    check_box_collection(boxes)
    if not boxes:
        raise BoxCollectionError("Cannot get nearest box of an empty collection")
    min_index = 0
    min_dist = float("inf")
    for index, box in enumerate(boxes):
        c_x, c_y = box.center
        dist = (c_x - x) ** 2 + (c_y - y) ** 2
        if dist < min_dist:
            min_index = index
            min_dist = dist
    return boxes[min_index]
