# -*- coding: utf-8 -*-
# File: settings.py

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
Module for the operation mode and side selectors used across the package.

All selectors are `str` enums, so that they can be passed either as member or as plain string value, e.g. from a
config file. Every enum is registered in `object_types_registry` and can be resolved with `get_type`.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

import catalogue  # type: ignore

__all__ = [
    "ObjectTypes",
    "TypeOrStr",
    "object_types_registry",
    "OverlapOp",
    "BoxSide",
    "WidthAdjust",
    "HeightAdjust",
    "get_type",
]


class ObjectTypes(str, Enum):
    """Base Class for describing objects as attributes of Enums"""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}>"

    @classmethod
    def from_value(cls, value: str) -> ObjectTypes:
        """Getting the enum member from a given string value

        :param value: string value to get the enum member
        :return: Enum member
        """
        for member in cls.__members__.values():
            if member.value == value:
                return member
        raise ValueError(f"value {value} does not have corresponding member of {cls.__name__}")


TypeOrStr = Union[ObjectTypes, str]  # pylint: disable=C0103

object_types_registry = catalogue.create("layoutbox", "settings", entry_points=True)


# pylint: disable=invalid-name
@object_types_registry.register("OverlapOp")
class OverlapOp(ObjectTypes):
    """What `handle_overlaps` does with the smaller box of a qualifying pair"""

    COMBINE = "combine"
    REMOVE_SMALL = "remove_small"


@object_types_registry.register("BoxSide")
class BoxSide(ObjectTypes):
    """A single side of a box"""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@object_types_registry.register("WidthAdjust")
class WidthAdjust(ObjectTypes):
    """Sides to move when adjusting the width of a box"""

    LEFT = "adjust_left"
    RIGHT = "adjust_right"
    LEFT_AND_RIGHT = "adjust_left_and_right"


@object_types_registry.register("HeightAdjust")
class HeightAdjust(ObjectTypes):
    """Sides to move when adjusting the height of a box"""

    TOP = "adjust_top"
    BOTTOM = "adjust_bottom"
    TOP_AND_BOTTOM = "adjust_top_and_bottom"


# pylint: enable=invalid-name


def get_type(obj_type: TypeOrStr, expected: type[ObjectTypes]) -> ObjectTypes:
    """
    Get an object type member from a given string. Does nothing if a member of `expected` is passed.

    Example:
        ```python
        get_type("combine", OverlapOp)  # <OverlapOp.COMBINE>
        ```

    Args:
        obj_type: String or ObjectTypes
        expected: The enum class the result must belong to. Must be registered in `object_types_registry`.

    Returns:
        `ObjectType` member of `expected`

    Raises:
        ValueError: If `obj_type` is not a member resp. a value of a member of `expected`.
    """
    if expected not in object_types_registry.get_all().values():
        raise ValueError(f"{expected.__name__} is not a registered ObjectType")
    if isinstance(obj_type, expected):
        return obj_type
    if isinstance(obj_type, ObjectTypes) or not isinstance(obj_type, str):
        raise ValueError(f"{obj_type!r} is not a member of {expected.__name__}")
    return expected.from_value(obj_type.lower())
