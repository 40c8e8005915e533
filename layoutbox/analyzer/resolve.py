# -*- coding: utf-8 -*-
# File: resolve.py

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
- `OverlapResolver`, resolving overlaps of a collection in two configurable steps
- factory `get_overlap_resolver` building a resolver from the defaults, a `.yaml` file and overwrites
"""

from __future__ import annotations

from typing import Optional

from ..datapoint.boxa import BoxCollection
from ..mapper.maputils import check_box_collection
from ..mapper.overlap import combine_overlaps, handle_overlaps
from ..utils.logger import LoggingRecord, logger
from ..utils.metacfg import AttrDict, set_config_by_yaml
from ..utils.settings import OverlapOp, get_type
from ..utils.types import PathLikeOrStr
from ._config import cfg

__all__ = ["config_sanity_checks", "OverlapResolver", "get_overlap_resolver"]


def config_sanity_checks(config: AttrDict) -> None:
    """Some config sanity checks"""
    get_type(config.HANDLE_OVERLAPS.OP, OverlapOp)
    search_range = config.HANDLE_OVERLAPS.RANGE
    if not isinstance(search_range, int) or search_range < 0:
        raise ValueError(f"HANDLE_OVERLAPS.RANGE must be an int >= 0, got {search_range!r}")
    for key in ("MIN_OVERLAP", "MAX_AREA_RATIO"):
        value = getattr(config.HANDLE_OVERLAPS, key)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"HANDLE_OVERLAPS.{key} must be in [0, 1], got {value}")


class OverlapResolver:
    """
    Resolves overlaps of a collection. First `handle_overlaps` merges or removes small boxes that overlap a larger
    neighbour, then `combine_overlaps` merges the remaining intersecting boxes. Each step can be switched off.

    Example:
        ```python
        resolver = get_overlap_resolver(config_overwrite=["USE_HANDLE_OVERLAPS=True"])
        boxes_out = resolver(boxes)
        ```
    """

    def __init__(self, config: AttrDict) -> None:
        config_sanity_checks(config)
        self.cfg = config

    def __call__(self, boxes: BoxCollection) -> BoxCollection:
        check_box_collection(boxes)
        boxes_out = boxes.copy()
        if self.cfg.USE_HANDLE_OVERLAPS:
            boxes_out = handle_overlaps(  # type: ignore
                boxes_out,
                self.cfg.HANDLE_OVERLAPS.OP,
                self.cfg.HANDLE_OVERLAPS.RANGE,
                self.cfg.HANDLE_OVERLAPS.MIN_OVERLAP,
                self.cfg.HANDLE_OVERLAPS.MAX_AREA_RATIO,
            )
        if self.cfg.USE_COMBINE_OVERLAPS:
            boxes_out = combine_overlaps(boxes_out)
        logger.debug(
            LoggingRecord("OverlapResolver", {"num_boxes_in": len(boxes), "num_boxes_out": len(boxes_out)})
        )
        return boxes_out


def get_overlap_resolver(
    path_config_file: Optional[PathLikeOrStr] = None,
    config_overwrite: Optional[list[str]] = None,
) -> OverlapResolver:
    """
    Factory function for creating an `OverlapResolver`.

    The default config is copied and never changed. Values from `path_config_file` take precedence over the defaults,
    `config_overwrite` takes precedence over both.

    Args:
        path_config_file: Path to a `.yaml` config file, e.g. saved with `save_config_to_yaml`.
        config_overwrite: Passing a list of string arguments and values to overwrite the configuration with highest
            priority, e.g. `["USE_HANDLE_OVERLAPS=True", "HANDLE_OVERLAPS.OP=remove_small"]`.

    Returns:
        OverlapResolver: An `OverlapResolver` with the given config.

    Raises:
        KeyError: If `config_overwrite` contains an unknown key.
        ValueError: If the final config does not pass `config_sanity_checks`.
    """
    config_overwrite = [] if config_overwrite is None else config_overwrite

    config = AttrDict()
    config.from_dict(cfg.to_dict())
    if path_config_file:
        file_cfg = set_config_by_yaml(path_config_file)
        config.overwrite_config(file_cfg)
    if config_overwrite:
        config.update_args(config_overwrite)
    config.freeze()

    config_sanity_checks(config)
    logger.info(LoggingRecord(f"Config: \n {str(config)}", config.to_dict()))  # type: ignore

    return OverlapResolver(config)
