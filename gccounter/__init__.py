# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

__version__ = '1.0.0'
