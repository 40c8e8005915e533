# -*- coding: utf-8 -*-
# File: __init__.py

"""
Init file for layoutbox package
"""

from .analyzer import *
from .datapoint import *
from .mapper import *
from .utils import *
from .utils.logger import logger

__version__ = "0.1.0"
