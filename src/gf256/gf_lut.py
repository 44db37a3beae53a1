# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Lookup tables for multiplication in GF(2**8).

Multiplication can be more quickly done with a 256 entry log table and
an exponentiation table. For example, to multiply 0x03 by 0x07 (using
the standard polynomial 0x11D) we do the following:

- Look up 0x03 on the log table. We get 0x19
- Look up 0x07 on the log table. We get 0xC6
- Add up these two numbers together (using normal, not galois field,
  addition): 0x19 + 0xC6 = 0xDF
- Look up the sum, 0xDF, on the exponentiation table. We get 0x09.

The sum of two logarithms is at most 254 + 254, so the exponentiation
table is extended with a second copy of itself and the usual modulo 255
step can be skipped.
"""

import logging
import functools
import typing as typ

from . import common_types as ct

logger = logging.getLogger(__name__)


FIELD_SIZE = 256

# Number of elements in the multiplicative group
ORDER = FIELD_SIZE - 1

EXP_LUT_LEN = 2 * ORDER - 1

LOG_UNDEFINED = -1

# x**8 + x**4 + x**3 + x**2 + 1  (0b100011101 = 0x11D)
#
# This is the polynomial commonly used for Reed Solomon codes. Note that the
# Rijndael polynomial 0x11B is irreducible but not primitive: the element 2
# only has order 51 in that field, so it cannot be used to build the tables.
STANDARD_POLYNOMIAL: ct.Polynomial = 0x1D


class InvalidPolynomial(ValueError):
    pass


class FieldTables(typ.NamedTuple):
    polynomial: ct.Polynomial
    exp_lut   : ct.ExpTable
    log_lut   : ct.LogTable


def normalize_polynomial(polynomial: int) -> ct.Polynomial:
    """Strip the (implicit) x**8 term, so that 0x11D and 0x1D are equivalent."""
    if 0 <= polynomial < FIELD_SIZE:
        return polynomial
    elif FIELD_SIZE <= polynomial < 2 * FIELD_SIZE:
        return polynomial - FIELD_SIZE
    else:
        errmsg = f"Invalid polynomial {polynomial}: expected a value 0 <= p < {2 * FIELD_SIZE}"
        raise InvalidPolynomial(errmsg)


def parse_polynomial(text: str) -> ct.Polynomial:
    """Parse a polynomial given as 0x11D, 0x1D, 285 etc."""
    try:
        polynomial = int(text.strip(), 0)
    except ValueError as err:
        raise InvalidPolynomial(f"Invalid polynomial '{text}'") from err
    return normalize_polynomial(polynomial)


def build_exp_table(polynomial: ct.Polynomial, extended: bool = True) -> ct.ExpTable:
    assert 0 <= polynomial < FIELD_SIZE, polynomial

    exp_lut: typ.List[ct.FieldElement] = []

    val = 1
    for _ in range(ORDER):
        exp_lut.append(val)
        # multiply by x, reduce if the x**8 term is set
        val = val << 1
        if val >= FIELD_SIZE:
            val = (val - FIELD_SIZE) ^ polynomial

    if extended:
        exp_lut.extend(exp_lut[: ORDER - 1])
        assert len(exp_lut) == EXP_LUT_LEN

    return tuple(exp_lut)


def build_log_table(exp_lut: ct.ExpTable) -> ct.LogTable:
    """Invert the first ORDER entries of an exponentiation table.

    Raises InvalidPolynomial if any element is reached more than once,
    which means the generator does not enumerate all 255 nonzero
    elements of the field.
    """
    log_lut = [LOG_UNDEFINED] * FIELD_SIZE

    for exp in range(ORDER):
        val = exp_lut[exp]
        if val == 0:
            raise InvalidPolynomial(f"Zero element reached at exponent {exp} (bad polynomial?)")
        if log_lut[val] != LOG_UNDEFINED:
            errmsg = (
                f"Duplicate logarithm for 0x{val:02X} at exponent {exp}, "
                f"previously {log_lut[val]} (bad polynomial?)"
            )
            raise InvalidPolynomial(errmsg)
        log_lut[val] = exp

    return tuple(log_lut)


@functools.lru_cache(maxsize=None)
def _init_tables(polynomial: ct.Polynomial) -> FieldTables:
    exp_lut = build_exp_table(polynomial)
    log_lut = build_log_table(exp_lut)
    logger.debug(f"initialized tables for polynomial 0x1{polynomial:02X}")
    return FieldTables(polynomial, exp_lut, log_lut)


def init_tables(polynomial: int = STANDARD_POLYNOMIAL) -> FieldTables:
    return _init_tables(normalize_polynomial(polynomial))


def is_valid_polynomial(polynomial: int) -> bool:
    try:
        init_tables(polynomial)
        return True
    except InvalidPolynomial as err:
        logger.debug(f"rejected polynomial {polynomial}: {err}")
        return False


def all_possible_polynomials() -> typ.List[ct.Polynomial]:
    """Find all polynomials for which the tables can be built."""
    result = []
    for polynomial in range(FIELD_SIZE):
        exp_lut = build_exp_table(polynomial, extended=False)
        try:
            build_log_table(exp_lut)
        except InvalidPolynomial:
            continue
        result.append(polynomial)
    return result


def format_table(table: typ.Sequence[int]) -> str:
    lines = []
    for offset in range(0, len(table), 16):
        row = table[offset : offset + 16]
        lines.append(" ".join("--" if val == LOG_UNDEFINED else f"{val:02x}" for val in row))
    return "\n".join(lines)
