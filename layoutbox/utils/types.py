# -*- coding: utf-8 -*-
# File: types.py

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
Typing sheet for the whole package
"""

import os
from typing import Optional, Union

import numpy.typing as npt
from numpy import int64
from typing_extensions import TypeAlias

# Box coordinates are always integer pixel locations. Points may be fractional, e.g. box centers.
BoxCoordinate: TypeAlias = int
PointCoordinate: TypeAlias = Union[int, float]
Point: TypeAlias = tuple[int, int]

# Numpy export of a box or a box collection
BoxArray = npt.NDArray[int64]

# Side output of the overlap and equality functions. Entry `i` refers to the input box `i`.
IndexMap: TypeAlias = list[Optional[int]]

# x_start, y_start, x_end, y_end, width, height
ClipParams: TypeAlias = tuple[int, int, int, int, int, int]

# A path to a file, directory etc. can be given as a string or Path object
PathLikeOrStr: TypeAlias = Union[str, os.PathLike]
