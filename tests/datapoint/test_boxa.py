# -*- coding: utf-8 -*-
# File: test_boxa.py

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
Testing the module datapoint.boxa
"""

import numpy as np
from numpy.testing import assert_array_equal
from pytest import raises

from layoutbox.datapoint import Box, BoxCollection, BoxCollectionGroup
from layoutbox.utils.error import BoxCollectionError


class TestBoxCollection:
    """
    Testing BoxCollection methods
    """

    @staticmethod
    def test_only_boxes_are_accepted(overlapping_boxes: BoxCollection) -> None:
        """
        Non-Box elements and nested collections are rejected
        """

        # Act and Assert
        with raises(BoxCollectionError):
            overlapping_boxes.append([0, 0, 1, 1])  # type: ignore

        with raises(BoxCollectionError):
            overlapping_boxes.insert(0, BoxCollection())  # type: ignore

        with raises(BoxCollectionError):
            overlapping_boxes.replace(0, None)  # type: ignore

        with raises(BoxCollectionError):
            BoxCollection([Box(0, 0, 1, 1), "box"])  # type: ignore

        assert len(overlapping_boxes) == 3

    @staticmethod
    def test_extend_is_atomic(overlapping_boxes: BoxCollection) -> None:
        """
        Nothing is appended if one element is invalid
        """

        # Act
        with raises(BoxCollectionError):
            overlapping_boxes.extend([Box(1, 1, 1, 1), 5])  # type: ignore

        # Assert
        assert len(overlapping_boxes) == 3

    @staticmethod
    def test_indexing(overlapping_boxes: BoxCollection) -> None:
        """
        Integer index gives a box, slice gives a new collection
        """

        # Act
        first = overlapping_boxes[0]
        last = overlapping_boxes[-1]
        head = overlapping_boxes[:2]

        # Assert
        assert first == Box(0, 0, 10, 10)
        assert last == Box(100, 100, 5, 5)
        assert isinstance(head, BoxCollection)
        assert head == BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10)])

        with raises(IndexError):
            overlapping_boxes[3]  # pylint: disable=W0104

    @staticmethod
    def test_mutation(overlapping_boxes: BoxCollection) -> None:
        """
        Testing insert, replace and remove
        """

        # Act
        overlapping_boxes.insert(1, Box(1, 1, 1, 1))
        overlapping_boxes.replace(0, Box(2, 2, 2, 2))
        removed = overlapping_boxes.remove(3)

        # Assert
        assert removed == Box(100, 100, 5, 5)
        assert list(overlapping_boxes) == [Box(2, 2, 2, 2), Box(1, 1, 1, 1), Box(5, 5, 10, 10)]

        with raises(IndexError):
            overlapping_boxes.replace(10, Box(0, 0, 1, 1))

    @staticmethod
    def test_copy_is_independent(overlapping_boxes: BoxCollection) -> None:
        """
        Changing a copy leaves the original collection untouched
        """

        # Act
        boxes_copy = overlapping_boxes.copy()
        boxes_copy.append(Box(0, 0, 1, 1))

        # Assert
        assert len(overlapping_boxes) == 3
        assert len(boxes_copy) == 4
        assert boxes_copy[:3] == overlapping_boxes

    @staticmethod
    def test_to_np_array(overlapping_boxes: BoxCollection) -> None:
        """
        Testing export to numpy
        """

        # Act
        np_array = overlapping_boxes.to_np_array(mode="xyxy")

        # Assert
        assert np_array.shape == (3, 4)
        assert np_array.dtype == np.int64
        assert_array_equal(np_array[1], [5, 5, 15, 15])
        assert BoxCollection().to_np_array().shape == (0, 4)
        assert overlapping_boxes.to_list()[2] == [100, 100, 5, 5]

    @staticmethod
    def test_from_np_array() -> None:
        """
        Testing import from numpy
        """

        # Arrange
        np_array = np.array([[0, 0, 10, 10], [5, 5, 15, 15]])

        # Act
        boxes = BoxCollection.from_np_array(np_array, mode="xyxy")

        # Assert
        assert boxes == BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10)])
        assert len(BoxCollection.from_np_array(np.zeros((0, 4)))) == 0

        with raises(ValueError):
            BoxCollection.from_np_array(np.zeros((2, 3)))

        with raises(ValueError):
            BoxCollection.from_np_array(np_array, mode="cxcy")


class TestBoxCollectionGroup:
    """
    Testing BoxCollectionGroup methods
    """

    @staticmethod
    def test_only_collections_are_accepted() -> None:
        """
        A group holds collections only
        """

        # Arrange
        group = BoxCollectionGroup()

        # Act and Assert
        with raises(BoxCollectionError):
            group.append(Box(0, 0, 1, 1))  # type: ignore

        assert len(group) == 0

    @staticmethod
    def test_flatten(overlapping_boxes: BoxCollection, nested_boxes: BoxCollection) -> None:
        """
        Flattening keeps the order of collections and boxes
        """

        # Arrange
        group = BoxCollectionGroup([overlapping_boxes, nested_boxes])

        # Act
        flat = group.flatten()

        # Assert
        assert len(group) == 2
        assert group[1] is nested_boxes
        assert len(flat) == 5
        assert flat[3] == Box(0, 0, 100, 100)
