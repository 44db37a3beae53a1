# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Galois Field arithmetic functions without lookup tables.

These are slow and only used to validate the lookup tables.
"""

from . import gf
from . import gf_lut
from . import common_types as ct

# https://en.wikipedia.org/wiki/Finite_field_arithmetic
#
# x**8 + x**4 + x**3 + x**2 + 1  (0b100011101 = 0x11D)
#
# For example, 0x53 * 0xCA = 0x8F in the field with this reducing
# polynomial because
#
# 0x53 = 0b01010011
# 0xCA = 0b11001010
#
#    (x6 + x4 + x + 1)(x7 + x6 + x3 + x)
# = x13 + x12 + x11 + x10 + x9 + x8 + x6 + x5 + x4 + x3 + x2 + x
# = 0b11111101111110 = 0x3F7E
#
# and 0x3F7E mod 0x11D is found through long division (shown using binary
# notation; exclusive OR is applied and not arithmetic subtraction):
#
#         11111101111110 (mod) 100011101
#        ^10001110100000
#          1110011011110
#         ^1000111010000
#           110100001110
#          ^100011101000
#            10111100110
#           ^10001110100
#              110010010
#             ^100011101
#               10001111


def reducing_polynomial(polynomial: ct.Polynomial) -> int:
    """Add the implicit x**8 term."""
    return gf_lut.FIELD_SIZE | gf_lut.normalize_polynomial(polynomial)


def div_slow(a: int, b: int) -> int:
    """Remainder of the polynomial a divided by b (which has degree 8)."""
    # long division
    val     = a
    divisor = b
    assert divisor > 0xFF

    while divisor < val:
        divisor = divisor << 1

    mask = 1
    while mask < divisor:
        mask = mask << 1
    mask = mask >> 1

    while divisor > 0xFF:
        if (val & mask) > 0:
            val = val ^ divisor

        divisor = divisor >> 1
        mask    = mask    >> 1

    return val


def mul_slow(a: int, b: int, polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL) -> int:
    assert 0 <= a < 256, a
    assert 0 <= b < 256, b

    # carry-less multiplication
    res = 0
    while a > 0:
        if a & 1 != 0:
            res = res ^ b
        a = a // 2
        b = b * 2

    return div_slow(res, reducing_polynomial(polynomial))


def pow_slow(a: int, n: int, polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL) -> int:
    assert n >= 0, n
    res = 1
    while n > 0:
        res = mul_slow(res, a, polynomial)
        n -= 1
    return res


def inverse_slow(val: int, polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL) -> int:
    """Calculate multiplicative inverse in GF(256).

    Since the nonzero elements of GF(p^n) form a finite group with
    respect to multiplication,

      a^((p^n)−1) = 1         (for a != 0)

      thus the inverse of a is

      a^((p^n)−2).
    """
    if val == 0:
        raise gf.GFZeroDivisionError("Zero has no multiplicative inverse")

    inv = pow_slow(val, gf_lut.ORDER - 1, polynomial)
    assert mul_slow(val, inv, polynomial) == 1
    return inv


def poly2str(polynomial: ct.Polynomial) -> str:
    """Render a reducing polynomial, eg. 0x1D -> 'x^8 + x^4 + x^3 + x^2 + 1'."""
    full  = reducing_polynomial(polynomial)
    terms = []
    for degree in range(8, -1, -1):
        if full & (1 << degree):
            if degree == 0:
                terms.append("1")
            elif degree == 1:
                terms.append("x")
            else:
                terms.append(f"x^{degree}")
    return " + ".join(terms)
