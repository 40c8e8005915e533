# -*- coding: utf-8 -*-
# File: _config.py

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

"""Default configuration of the overlap resolver."""

from ..utils.metacfg import AttrDict
from ..utils.settings import OverlapOp

cfg = AttrDict()

# Enables handle_overlaps as first step. Configure via HANDLE_OVERLAPS.*
cfg.USE_HANDLE_OVERLAPS = False

# 'combine' merges the smaller box of a pair into the larger one, 'remove_small' drops the smaller box.
cfg.HANDLE_OVERLAPS.OP = OverlapOp.COMBINE.value

# Number of successors each box is compared with. Sort the boxes spatially when using a small value.
cfg.HANDLE_OVERLAPS.RANGE = 100

# Fraction of the smaller box that must be covered by the overlap. Must be in [0, 1].
cfg.HANDLE_OVERLAPS.MIN_OVERLAP = 0.0

# Max ratio of the smaller to the larger area. Must be in [0, 1].
cfg.HANDLE_OVERLAPS.MAX_AREA_RATIO = 1.0

# Enables combine_overlaps as last step, so that no two boxes of the output intersect.
cfg.USE_COMBINE_OVERLAPS = True

cfg.freeze()
