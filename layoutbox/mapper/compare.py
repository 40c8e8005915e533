# -*- coding: utf-8 -*-
# File: compare.py

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
Comparing two collections box by box, either exactly with some latitude in the ordering or with positional
tolerance for each side.
"""

from typing import Optional, Union

from tabulate import tabulate
from termcolor import colored

from ..datapoint.box import box_similar
from ..datapoint.boxa import BoxCollection
from ..utils.error import BoxCountMismatchError
from ..utils.logger import LoggingRecord, logger
from .maputils import check_box_collection

__all__ = ["match_collections", "collections_equal", "collections_similar"]


def match_collections(boxes_1: BoxCollection, boxes_2: BoxCollection, max_dist: int = 0) -> Optional[list[int]]:
    """
    Find for each box of `boxes_1` an identical box of `boxes_2` whose position differs by at most `max_dist`.

    Boxes are matched in order of `boxes_1`: Box `i` takes the first unused identical box with index in
    `[i - max_dist, i + max_dist]`. Each box of `boxes_2` is used at most once.

    Example:
        ```python
        boxes_1 = BoxCollection([Box(0, 0, 1, 1), Box(5, 5, 1, 1)])
        boxes_2 = BoxCollection([Box(5, 5, 1, 1), Box(0, 0, 1, 1)])
        match_collections(boxes_1, boxes_2, max_dist=1)  # [1, 0]
        match_collections(boxes_1, boxes_2, max_dist=0)  # None
        ```

    Args:
        boxes_1: Collection
        boxes_2: Collection
        max_dist: Max allowed difference of positions. `0` requires identical ordering.

    Returns:
        List with the index in `boxes_2` corresponding to each box of `boxes_1`, or `None` if the collections are not
        equal.

    Raises:
        ValueError: If `max_dist` is negative
    """
    check_box_collection(boxes_1, "boxes_1")
    check_box_collection(boxes_2, "boxes_2")
    if max_dist < 0:
        raise ValueError(f"max_dist must be >= 0, got {max_dist}")

    num_boxes = len(boxes_1)
    if num_boxes != len(boxes_2):
        return None

    used = [False] * num_boxes
    index_map: list[int] = []
    for i, box_1 in enumerate(boxes_1):
        for j in range(max(0, i - max_dist), min(num_boxes - 1, i + max_dist) + 1):
            if not used[j] and box_1 == boxes_2[j]:
                used[j] = True
                index_map.append(j)
                break
        else:
            return None
    return index_map


def collections_equal(boxes_1: BoxCollection, boxes_2: BoxCollection, max_dist: int = 0) -> bool:
    """
    Whether both collections contain the same boxes, each within `max_dist` of its counterpart's position. See
    `match_collections`.
    """
    return match_collections(boxes_1, boxes_2, max_dist) is not None


def collections_similar(
    boxes_1: BoxCollection,
    boxes_2: BoxCollection,
    left_diff: int,
    right_diff: int,
    top_diff: int,
    bot_diff: int,
    debug: bool = False,
    return_indicators: bool = False,
) -> Union[bool, tuple[bool, list[bool]]]:
    """
    Whether corresponding boxes of both collections are similar, see `box_similar`. Boxes are compared by position,
    there is no search.

    The comparison stops at the first box pair that is not similar, unless `debug` or `return_indicators` is set.

    Args:
        boxes_1: Collection
        boxes_2: Collection with the same number of boxes
        left_diff: Max allowed deviation of the left sides
        right_diff: Max allowed deviation of the right sides
        top_diff: Max allowed deviation of the top sides
        bot_diff: Max allowed deviation of the bottom sides
        debug: Log every pair that is not similar
        return_indicators: Also return one indicator for each pair

    Returns:
        `True` if all pairs are similar. With `return_indicators=True` a tuple of this value and the list of
        indicators.

    Raises:
        BoxCountMismatchError: If the collections have different length
    """
    check_box_collection(boxes_1, "boxes_1")
    check_box_collection(boxes_2, "boxes_2")
    if len(boxes_1) != len(boxes_2):
        raise BoxCountMismatchError(len(boxes_1), len(boxes_2))

    indicators: list[bool] = []
    mismatches: list[list[object]] = []
    for index, (box_1, box_2) in enumerate(zip(boxes_1, boxes_2)):
        match = box_similar(box_1, box_2, left_diff, right_diff, top_diff, bot_diff)
        indicators.append(match)
        if not match:
            if not debug and not return_indicators:
                return False
            if debug:
                mismatches.append([index, *box_1.side_locations, *box_2.side_locations])

    if mismatches:
        table = tabulate(
            mismatches,
            headers=["index", "left_1", "right_1", "top_1", "bottom_1", "left_2", "right_2", "top_2", "bottom_2"],
            tablefmt="pipe",
        )
        logger.info(
            LoggingRecord(
                f"{len(mismatches)} box pairs not similar:\n {colored(table, 'cyan')}",
                {"indices": [row[0] for row in mismatches]},
            )
        )

    similar = all(indicators)
    if return_indicators:
        return similar, indicators
    return similar
