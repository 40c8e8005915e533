# -*- coding: utf-8 -*-
# File: conftest.py

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
Module for globally accessible fixtures
"""

from typing import Iterator

from pytest import LogCaptureFixture, fixture

from layoutbox.datapoint import Box, BoxCollection
from layoutbox.utils.logger import logger


@fixture(name="package_caplog")
def fixture_package_caplog(caplog: LogCaptureFixture) -> Iterator[LogCaptureFixture]:
    """
    caplog with its handler attached to the package logger, which does not propagate. Adding the handler twice is a
    no-op, so each record is captured exactly once.
    """
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


@fixture(name="box")
def fixture_box() -> Box:
    """
    Box(0, 0, 10, 10)
    """
    return Box(0, 0, 10, 10)


@fixture(name="overlapping_boxes")
def fixture_overlapping_boxes() -> BoxCollection:
    """
    Two overlapping boxes and one far away box
    """
    return BoxCollection([Box(0, 0, 10, 10), Box(5, 5, 10, 10), Box(100, 100, 5, 5)])


@fixture(name="disjoint_boxes")
def fixture_disjoint_boxes() -> BoxCollection:
    """
    Three boxes without any common pixel. The first two are touching.
    """
    return BoxCollection([Box(0, 0, 10, 10), Box(10, 0, 10, 10), Box(50, 50, 5, 5)])


@fixture(name="nested_boxes")
def fixture_nested_boxes() -> BoxCollection:
    """
    A large box followed by a small box inside of it
    """
    return BoxCollection([Box(0, 0, 100, 100), Box(10, 10, 5, 5)])
