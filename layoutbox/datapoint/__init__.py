# -*- coding: utf-8 -*-
# File: __init__.py

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
# Core data model

`Box` is a small value type. Every geometry function takes boxes and returns new boxes, booleans or numbers and
never changes its inputs. `BoxCollection` keeps boxes in order and is the unit all batch operations work on.
"""

from .box import *
from .boxa import *
