# -*- coding: utf-8 -*-
# File: boxa.py

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
`BoxCollection`, an ordered sequence of boxes, and `BoxCollectionGroup`, an ordered sequence of collections.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Union, overload

import numpy as np
import numpy.typing as npt

from ..utils.error import BoxCollectionError
from ..utils.types import BoxArray
from .box import Box

__all__ = ["BoxCollection", "BoxCollectionGroup"]


class BoxCollection:
    """
    Ordered sequence of `Box`. The order is meaningful: It is the basis for the windowed overlap search and for the
    even/odd split. Duplicates and boxes with no area are allowed. A collection is flat, it never contains another
    collection.

    Because `Box` is frozen, reading an element always gives a value that cannot change the collection. Mutation is
    only possible through `append`, `extend`, `insert`, `replace` and `remove`.

    Example:
        ```python
        boxes = BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10)])
        boxes.append(Box(100, 100, 5, 5))
        len(boxes)  # 3
        ```
    """

    def __init__(self, boxes: Optional[Iterable[Box]] = None) -> None:
        self._boxes: list[Box] = []
        if boxes is not None:
            self.extend(boxes)

    @staticmethod
    def _check_box(box: Any) -> Box:
        if not isinstance(box, Box):
            raise BoxCollectionError(f"BoxCollection only accepts Box elements, got {type(box).__name__}")
        return box

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self._boxes)

    @overload
    def __getitem__(self, index: int) -> Box:
        ...

    @overload
    def __getitem__(self, index: slice) -> BoxCollection:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Box, BoxCollection]:
        if isinstance(index, slice):
            return BoxCollection(self._boxes[index])
        return self._boxes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxCollection):
            return NotImplemented
        return self._boxes == other._boxes

    def __repr__(self) -> str:
        return f"BoxCollection({self._boxes!r})"

    def append(self, box: Box) -> None:
        """Append a box at the end"""
        self._boxes.append(self._check_box(box))

    def extend(self, boxes: Iterable[Box]) -> None:
        """Append all boxes of an iterable. Nothing is appended if one element is not a `Box`."""
        boxes = [self._check_box(box) for box in boxes]
        self._boxes.extend(boxes)

    def insert(self, index: int, box: Box) -> None:
        """Insert a box before `index`"""
        self._boxes.insert(index, self._check_box(box))

    def replace(self, index: int, box: Box) -> None:
        """
        Replace the box at `index`.

        Raises:
            IndexError: If `index` is out of range.
        """
        box = self._check_box(box)
        self._boxes[index] = box

    def remove(self, index: int) -> Box:
        """Remove the box at `index` and return it"""
        return self._boxes.pop(index)

    def copy(self) -> BoxCollection:
        """A new collection with the same boxes"""
        return BoxCollection(self._boxes)

    def to_list(self, mode: str = "xywh") -> list[list[int]]:
        """
        Returns the coordinates of all boxes as nested list. See `Box.to_list` for `mode`.
        """
        return [box.to_list(mode) for box in self._boxes]

    def to_np_array(self, mode: str = "xywh") -> BoxArray:
        """
        Returns the coordinates of all boxes as `np.array` of shape `(N, 4)`. See `Box.to_list` for `mode`.
        """
        if not self._boxes:
            return np.zeros((0, 4), dtype=np.int64)
        return np.array(self.to_list(mode), dtype=np.int64)

    @classmethod
    def from_np_array(cls, array: npt.ArrayLike, mode: str = "xywh") -> BoxCollection:
        """
        Generate a collection from an array of shape `(N, 4)`.

        Args:
            array: Array-like of box coordinates
            mode: `xywh` or `xyxy`, see `Box.to_list`

        Raises:
            ValueError: If the array does not have shape `(N, 4)` or the mode is unknown
        """
        np_array = np.asarray(array)
        if np_array.size == 0:
            return cls()
        if np_array.ndim != 2 or np_array.shape[1] != 4:
            raise ValueError(f"Array must have shape (N, 4), got {np_array.shape}")
        if mode == "xywh":
            return cls(Box(*row) for row in np_array.tolist())
        if mode == "xyxy":
            return cls(Box.from_xyxy(*row) for row in np_array.tolist())
        raise ValueError(f"Not a valid mode: {mode}")


class BoxCollectionGroup:
    """
    Ordered sequence of `BoxCollection`, e.g. one collection of word boxes per text line.
    """

    def __init__(self, collections: Optional[Iterable[BoxCollection]] = None) -> None:
        self._collections: list[BoxCollection] = []
        if collections is not None:
            for boxes in collections:
                self.append(boxes)

    def __len__(self) -> int:
        return len(self._collections)

    def __iter__(self) -> Iterator[BoxCollection]:
        return iter(self._collections)

    def __getitem__(self, index: int) -> BoxCollection:
        return self._collections[index]

    def __repr__(self) -> str:
        return f"BoxCollectionGroup({self._collections!r})"

    def append(self, boxes: BoxCollection) -> None:
        """Append a collection at the end"""
        if not isinstance(boxes, BoxCollection):
            raise BoxCollectionError(
                f"BoxCollectionGroup only accepts BoxCollection elements, got {type(boxes).__name__}"
            )
        self._collections.append(boxes)

    def flatten(self) -> BoxCollection:
        """All boxes of all collections in one collection, in order"""
        flat = BoxCollection()
        for boxes in self._collections:
            flat.extend(boxes)
        return flat
