# -*- coding: utf-8 -*-
# File: test_select.py

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
Testing the module mapper.select
"""

from pytest import raises

from layoutbox.datapoint import Box, BoxCollection
from layoutbox.mapper import clip_to_box, contained_in_box, get_nearest_to_point, intersects_box
from layoutbox.utils.error import BoxCollectionError, BoxError


def test_contained_in_box(overlapping_boxes: BoxCollection) -> None:
    """
    Testing contained_in_box
    """

    # Act
    output = contained_in_box(overlapping_boxes, Box(0, 0, 20, 20))

    # Assert
    assert output == BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10)])
    assert len(contained_in_box(overlapping_boxes, Box(200, 200, 5, 5))) == 0


def test_intersects_box(overlapping_boxes: BoxCollection) -> None:
    """
    Testing intersects_box
    """

    # Act
    output = intersects_box(overlapping_boxes, Box(8, 8, 2, 2))

    # Assert
    assert output == BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10)])


def test_clip_to_box(overlapping_boxes: BoxCollection) -> None:
    """
    Boxes outside are dropped, the others are replaced by their overlap region
    """

    # Act
    output = clip_to_box(overlapping_boxes, Box(0, 0, 8, 8))

    # Assert
    assert output == BoxCollection([Box(0, 0, 8, 8), Box(5, 5, 3, 3)])
    assert len(overlapping_boxes) == 3


def test_get_nearest_to_point(overlapping_boxes: BoxCollection) -> None:
    """
    Testing get_nearest_to_point. The first box wins on ties.
    """

    # Arrange
    boxes = BoxCollection([Box(0, 0, 2, 2), Box(4, 0, 2, 2)])

    # Assert
    assert get_nearest_to_point(overlapping_boxes, 101, 101) == Box(100, 100, 5, 5)
    assert get_nearest_to_point(overlapping_boxes, 0, 0) == Box(0, 0, 10, 10)
    assert get_nearest_to_point(boxes, 3, 1) == Box(0, 0, 2, 2)

    with raises(BoxCollectionError):
        get_nearest_to_point(BoxCollection(), 0, 0)


def test_invalid_arguments_raise_error(overlapping_boxes: BoxCollection) -> None:
    """
    Arguments are checked before selecting
    """

    # Act and Assert
    with raises(BoxCollectionError):
        contained_in_box([Box(0, 0, 1, 1)], Box(0, 0, 20, 20))  # type: ignore

    with raises(BoxError):
        intersects_box(overlapping_boxes, (0, 0, 20, 20))  # type: ignore
