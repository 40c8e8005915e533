# -*- coding: utf-8 -*-
# File: overlap.py

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
Resolving mutual overlaps of boxes within one collection.

There are two strategies:

- `combine_overlaps` merges overlapping boxes into their bounding region until no two boxes of the result
  intersect anymore.
- `handle_overlaps` looks at each pair within a forward window once and, if the pair passes two ratio thresholds,
  either merges the smaller box into the larger one or drops the smaller box.

Both functions only use pairwise geometric tests on the ordered collection. Painting the boxes and labelling
connected components is not an option: two disjoint boxes can be 4-connected when rendered and would be joined.
"""

from typing import Union

from ..datapoint.box import bounding_region, box_intersects, overlap_area
from ..datapoint.boxa import BoxCollection
from ..utils.logger import LoggingRecord, logger
from ..utils.settings import OverlapOp, TypeOrStr, get_type
from ..utils.types import IndexMap
from .maputils import check_box_collection

__all__ = ["combine_overlaps", "handle_overlaps"]


def combine_overlaps(boxes: BoxCollection) -> BoxCollection:
    """
    Combine every set of overlapping boxes into one bounding box, so that no two boxes of the result intersect.

    Each pass takes the boxes of the previous pass in order and tests every box against the boxes already placed in
    this pass. The first intersecting box is replaced by the bounding region of both. If nothing intersects, the box
    is placed unchanged. The loop stops once a pass does not reduce the number of boxes.

    Example:
        ```python
        boxes = BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10), Box(100, 100, 5, 5)])
        combine_overlaps(boxes)  # [Box(0, 0, 15, 15), Box(100, 100, 5, 5)]
        ```

    Note:
        Every pass with a merge reduces the number of boxes, hence there are at most `n` passes. A single pass costs
        `O(n^2)` comparisons in the worst case, which is still faster than painting the boxes for realistic inputs.
        Which box absorbs which depends on the order of the input.

    Args:
        boxes: Input collection. Will not be changed.

    Returns:
        New collection without pairwise intersections. A copy of the input if no boxes overlap.
    """
    check_box_collection(boxes)

    boxes_prev = boxes.copy()
    iteration = 0
    while True:
        iteration += 1
        boxes_next = BoxCollection()
        for box in boxes_prev:
            for index in range(len(boxes_next)):
                box_placed = boxes_next[index]
                if box_intersects(box, box_placed):
                    boxes_next.replace(index, bounding_region(box, box_placed))
                    break
            else:
                boxes_next.append(box)

        logger.debug(
            LoggingRecord(
                "combine_overlaps iteration",
                {"iteration": iteration, "num_boxes_in": len(boxes_prev), "num_boxes_out": len(boxes_next)},
            )
        )
        if len(boxes_next) == len(boxes_prev):
            return boxes_next
        boxes_prev = boxes_next


def _get_index_map(
    boxes: BoxCollection, search_range: int, min_overlap: float, max_area_ratio: float
) -> IndexMap:
    """
    For each box the index of the larger box of a qualifying pair it is the smaller box of. `None` if there is no
    such pair. If a box is the smaller box of several qualifying pairs, the last pair wins.
    """
    num_boxes = len(boxes)
    index_map: IndexMap = [None] * num_boxes
    for i in range(num_boxes):
        box_1 = boxes[i]
        area_1 = box_1.area
        if area_1 == 0:
            continue
        for j in range(i + 1, min(i + 1 + search_range, num_boxes)):
            box_2 = boxes[j]
            overlap = overlap_area(box_1, box_2)
            if overlap == 0:
                continue
            area_2 = box_2.area
            if area_2 == 0:
                continue
            if area_1 >= area_2:
                overlap_ratio = overlap / area_2
                area_ratio = area_2 / area_1
                if overlap_ratio >= min_overlap and area_ratio <= max_area_ratio:
                    index_map[j] = i
            else:
                overlap_ratio = overlap / area_1
                area_ratio = area_1 / area_2
                if overlap_ratio >= min_overlap and area_ratio <= max_area_ratio:
                    index_map[i] = j
    return index_map


def handle_overlaps(
    boxes: BoxCollection,
    op: TypeOrStr,
    search_range: int,
    min_overlap: float = 0.0,
    max_area_ratio: float = 1.0,
    return_index_map: bool = False,
) -> Union[BoxCollection, tuple[BoxCollection, IndexMap]]:
    """
    Combine or remove the smaller box of each overlapping pair within a forward window.

    Every box `i` is compared with its successors `i+1, ..., i+search_range`. A pair of boxes with positive area
    counts, if

    - the overlap covers at least `min_overlap` of the area of the smaller box and
    - the ratio of the smaller to the larger area is at most `max_area_ratio`.

    On equal areas the box with the lower index counts as the larger one. For each counting pair the smaller box is
    removed from the output. With `op=OverlapOp.COMBINE` the larger box is additionally replaced by the bounding
    region of both boxes.

    Note:
        If `search_range` is small, the collection should be sorted spatially beforehand. Use a large value to
        compare all pairs.

    Note:
        If several smaller boxes belong to the same larger box, all of them are removed, but the larger box is only
        replaced by the bounding region with the last of them.

    Example:
        ```python
        boxes = BoxCollection([Box(0, 0, 100, 100), Box(10, 10, 5, 5)])
        handle_overlaps(boxes, OverlapOp.REMOVE_SMALL, search_range=1)  # [Box(0, 0, 100, 100)]
        ```

    Args:
        boxes: Input collection. Will not be changed.
        op: `OverlapOp.COMBINE` or `OverlapOp.REMOVE_SMALL`, also as string value.
        search_range: Forward window size. `0` returns a copy of the input.
        min_overlap: Minimum fraction of the smaller box that must be covered. `0.0` disables this condition,
                     `1.0` only lets fully contained boxes count.
        max_area_ratio: Maximum ratio of smaller to larger area. `1.0` disables this condition, `0.0` lets no pair
                        count.
        return_index_map: If `True`, also return the index map.

    Returns:
        New collection, or the new collection and an index map if `return_index_map=True`. Entry `i` of the index
        map is the index of the larger box that took over box `i`, or `None` if box `i` has been kept.

    Raises:
        ValueError: If `op` is not an `OverlapOp` or `search_range` is not a non-negative int.
    """
    check_box_collection(boxes)
    op = get_type(op, OverlapOp)
    if not isinstance(search_range, int) or search_range < 0:
        raise ValueError(f"search_range must be an int >= 0, got {search_range!r}")

    num_boxes = len(boxes)
    if num_boxes == 0 or search_range == 0:
        if num_boxes and search_range == 0:
            logger.warning(LoggingRecord("handle_overlaps: search_range is 0, will return a copy of the input"))
        index_map: IndexMap = [None] * num_boxes
        return (boxes.copy(), index_map) if return_index_map else boxes.copy()

    index_map = _get_index_map(boxes, search_range, min_overlap, max_area_ratio)

    boxes_tmp = boxes.copy()
    if op == OverlapOp.COMBINE:
        for index_small, index_large in enumerate(index_map):
            if index_large is not None:
                boxes_tmp.replace(index_large, bounding_region(boxes[index_small], boxes[index_large]))

    boxes_out = BoxCollection(box for box, index_large in zip(boxes_tmp, index_map) if index_large is None)
    logger.debug(
        LoggingRecord(
            "handle_overlaps",
            {"op": op.value, "num_boxes_in": num_boxes, "num_boxes_out": len(boxes_out)},
        )
    )
    if return_index_map:
        return boxes_out, index_map
    return boxes_out
