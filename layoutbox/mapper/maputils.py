# -*- coding: utf-8 -*-
# File: maputils.py

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
Argument checks shared by all functions operating on collections. Every public function validates its arguments
before building any output, so that a failing call never leaves a half-processed result.
"""

from typing import Any

from ..datapoint.box import Box
from ..datapoint.boxa import BoxCollection
from ..utils.error import BoxCollectionError, BoxError

__all__ = ["check_box", "check_box_collection"]


def check_box(box: Any, name: str = "box") -> Box:
    """
    Raises:
        BoxError: If `box` is not a `Box`
    """
    if not isinstance(box, Box):
        raise BoxError(f"{name} must be a Box, got {type(box).__name__}")
    return box


def check_box_collection(boxes: Any, name: str = "boxes") -> BoxCollection:
    """
    Raises:
        BoxCollectionError: If `boxes` is not a `BoxCollection`
    """
    if not isinstance(boxes, BoxCollection):
        raise BoxCollectionError(f"{name} must be a BoxCollection, got {type(boxes).__name__}")
    return boxes
