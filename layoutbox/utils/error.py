# -*- coding: utf-8 -*-
# File: error.py

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
Custom exceptions
"""

__all__ = ["BoxError", "BoxCollectionError", "BoxCountMismatchError"]


class BoxError(BaseException):
    """Special exception only for `datapoint.box.Box` and the single box geometry functions"""


class BoxCollectionError(BaseException):
    """Special exception only for `datapoint.boxa.BoxCollection` and functions operating on collections"""


class BoxCountMismatchError(BoxCollectionError):
    """
    Raised when two collections must have the same length but do not.

    This is not the same as "not similar": A caller comparing two collections of different size has made a mistake
    and will not get a boolean answer.
    """

    def __init__(self, count_1: int, count_2: int) -> None:
        super().__init__(f"box collection counts differ: {count_1} vs {count_2}")
        self.count_1 = count_1
        self.count_2 = count_2
