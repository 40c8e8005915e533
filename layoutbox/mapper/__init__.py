# -*- coding: utf-8 -*-
# File: __init__.py

"""
# Batch operations on box collections

Selecting, resolving overlaps, comparing, aligning, joining and splitting. All functions check their arguments before
building any output.
"""

from .adjust import *
from .combine import *
from .compare import *
from .maputils import *
from .overlap import *
from .select import *
