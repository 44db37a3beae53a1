# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Types used across multiple modules."""

from typing import Any
from typing import Tuple

# from typing import TypeAlias
TypeAlias = Any

# 0 <= FieldElement < 256
FieldElement: TypeAlias = int
# 0 <= Exponent < 255
Exponent: TypeAlias = int
# Low byte of the reduction polynomial, the x**8 term is implicit
Polynomial: TypeAlias = int

ExpTable: TypeAlias = Tuple[FieldElement, ...]
# Exponents, with -1 for the undefined logarithm of zero
LogTable: TypeAlias = Tuple[int, ...]
MulTable: TypeAlias = Tuple[Tuple[FieldElement, ...], ...]
