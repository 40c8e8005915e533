# -*- coding: utf-8 -*-
# File: __init__.py
