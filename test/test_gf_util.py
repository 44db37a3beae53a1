import random

import pytest

from gf256 import gf
from gf256.gf_util import *


def test_div_slow():
    # example from the module comment
    assert div_slow(0x3F7E, 0x11D) == 0x8F
    assert div_slow(0x100, 0x11D) == 0x1D
    assert div_slow(0x1D, 0x11D) == 0x1D
    assert div_slow(0x00, 0x11D) == 0x00


def test_mul_slow_basic():
    cases = [
        (0x00, 0x00, 0x00),
        (0x00, 0x01, 0x00),
        (0x01, 0x00, 0x00),
        (0x03, 0x07, 0x09),
        (0x53, 0xCA, 0x8F),
        (0x57, 0x83, 0x31),
        (0x57, 0x13, 0xE0),
        (0x80, 0x02, 0x1D),
        (0xFF, 0xFF, 0xE2),
    ]
    for a, b, expected in cases:
        assert mul_slow(a, b) == expected
        assert mul_slow(b, a) == expected


def test_mul_slow_other_polynomial():
    assert mul_slow(0x80, 0x02, 0x2B ) == 0x2B
    assert mul_slow(0x80, 0x02, 0x12B) == 0x2B
    assert mul_slow(0x57, 0x83, 0x2B ) == 0x90
    # no reduction needed
    assert mul_slow(0x03, 0x07, 0x2B ) == 0x09


def test_pow_slow():
    assert pow_slow(0x00, 0) == 1
    assert pow_slow(0x00, 3) == 0
    assert pow_slow(0x02, 8) == 0x1D
    assert pow_slow(0x07, 3) == 0x6B
    assert pow_slow(0x02, 255) == 1


def test_inverse_slow():
    assert inverse_slow(0x01) == 0x01
    assert inverse_slow(0x02) == 0x8E
    assert inverse_slow(0x8E) == 0x02

    with pytest.raises(gf.GFZeroDivisionError):
        inverse_slow(0)


def test_mul_lut_vs_slow():
    field = gf.new_field()
    for _ in range(100):
        a = random.randrange(256)
        b = random.randrange(256)
        assert mul_slow(a, b) == field.mul(a, b)


def test_reducing_polynomial():
    assert reducing_polynomial(0x1D) == 0x11D
    assert reducing_polynomial(0x11D) == 0x11D


def test_poly2str():
    assert poly2str(0x1D) == "x^8 + x^4 + x^3 + x^2 + 1"
    assert poly2str(0x2B) == "x^8 + x^5 + x^3 + x + 1"
    assert poly2str(0x00) == "x^8"
