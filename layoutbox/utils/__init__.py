# -*- coding: utf-8 -*-
# File: __init__.py

"""
Init file for utils package
"""

from .error import *
from .logger import *
from .metacfg import *
from .settings import *
