# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""gf256: Arithmetic in GF(2**8).

A table driven library (and diagnostic cli) for addition, subtraction,
multiplication, division and exponentiation of bytes as elements of a
finite field with 256 elements.
"""

__version__ = "2022.1009-beta"
