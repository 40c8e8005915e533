# -*- coding: utf-8 -*-
# File: __init__.py

"""
Init file for analyzer package. Provides the config driven overlap resolver.
"""

from .resolve import *
