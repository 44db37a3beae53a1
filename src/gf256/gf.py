# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Main Galois Field Types and API.

There are two ways to do arithmetic: the functions of this module
(and the methods of Field) operate on plain ints in 0 <= val < 256,
while GF256 wraps such an int and implements the operators. Both are
backed by the same tables from gf_lut.

The module level functions use a default field, which is initialized
on first use with the polynomial from the GF256_POLYNOMIAL environment
variable (or 0x11D if it is not set).
"""

import os
import logging
import functools
import threading
from typing import Any
from typing import Tuple
from typing import Union
from typing import Optional

from . import gf_lut
from . import common_types as ct

logger = logging.getLogger(__name__)


POLYNOMIAL_ENVVAR = 'GF256_POLYNOMIAL'

InvalidPolynomial = gf_lut.InvalidPolynomial


class GFZeroDivisionError(ZeroDivisionError):
    pass


@functools.total_ordering
class GF256:

    val  : int
    field: 'Field'
    order: int = 256

    def __init__(self, val: int, field: 'Field') -> None:
        assert 0 <= val < 256, val
        self.val   = val
        self.field = field

    def _val_of(self, other: Any) -> int:
        if isinstance(other, GF256):
            if other.field is not self.field and other.field.polynomial != self.field.polynomial:
                errmsg = "Can only combine elements from the same finite field"
                raise ValueError(errmsg)
            return other.val
        elif isinstance(other, int):
            if not (0 <= other < 256):
                errmsg = f"GF256 operation with integer failed: 0 <= {other} < 256"
                raise ValueError(errmsg)
            return other
        else:
            errmsg = f"Cannot combine {repr(self)} with {repr(other)}"
            raise NotImplementedError(errmsg)

    def __add__(self, other: Union[int, 'GF256']) -> 'GF256':
        return self.field[self.val ^ self._val_of(other)]

    __radd__ = __add__

    # In characteristic 2 subtraction is the same as addition
    __sub__  = __add__
    __rsub__ = __add__

    def __neg__(self) -> 'GF256':
        return self

    def __mul__(self, other: Union[int, 'GF256']) -> 'GF256':
        return self.field[self.field.mul(self.val, self._val_of(other))]

    __rmul__ = __mul__

    def __truediv__(self, other: Union[int, 'GF256']) -> 'GF256':
        return self.field[self.field.div(self.val, self._val_of(other))]

    def __rtruediv__(self, other: int) -> 'GF256':
        return self.field[self.field.div(self._val_of(other), self.val)]

    def __pow__(self, n: int) -> 'GF256':
        if isinstance(n, GF256):
            n = n.val
        return self.field[self.field.exp(self.val, n)]

    def inverse(self) -> 'GF256':
        return self.field[self.field.inverse(self.val)]

    def __int__(self) -> int:
        return self.val

    def _check_comparable(self, other: object) -> None:
        if isinstance(other, int):
            if not (0 <= other < 256):
                errmsg = f"GF comparison with integer faild: 0 <= {other} < 256"
                raise ValueError(errmsg)
        elif not isinstance(other, GF256):
            errmsg = f"Cannot compare {repr(self)} with {repr(other)}"
            raise NotImplementedError(errmsg)

    def __hash__(self) -> int:
        return hash(self.val)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True

        if isinstance(other, GF256):
            return self.field.polynomial == other.field.polynomial and self.val == other.val

        self._check_comparable(other)
        assert isinstance(other, int)
        return self.val == other

    def __lt__(self, other: object) -> bool:
        if self is other:
            return False

        if isinstance(other, GF256):
            return self.val < other.val

        self._check_comparable(other)
        assert isinstance(other, int)
        return self.val < other

    def __repr__(self) -> str:
        return f"GF256({self.val:>3})"


class Field:
    """GF(2**8) for one particular reducing polynomial.

    Don't instantiate directly, use new_field(polynomial), which
    validates the polynomial and caches the Field.
    """

    order: int = 256

    polynomial: ct.Polynomial

    def __init__(self, tables: gf_lut.FieldTables) -> None:
        self.polynomial = tables.polynomial
        self._tables    = tables
        self._exp_lut   = tables.exp_lut
        self._log_lut   = tables.log_lut

        # Cache so we don't end up with millions of objects
        # that all represent the same set of integers.
        self._elements = tuple(GF256(n, self) for n in range(256))

    @property
    def tables(self) -> gf_lut.FieldTables:
        return self._tables

    @property
    def elements(self) -> Tuple[GF256, ...]:
        return self._elements

    @property
    def zero(self) -> GF256:
        return self._elements[0]

    @property
    def one(self) -> GF256:
        return self._elements[1]

    def __getitem__(self, val: int) -> GF256:
        assert 0 <= val < 256, val
        return self._elements[val]

    def __repr__(self) -> str:
        return f"Field(polynomial=0x1{self.polynomial:02X})"

    def add(self, a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
        assert 0 <= a < 256, a
        assert 0 <= b < 256, b
        return a ^ b

    sub = add

    def mul(self, a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
        assert 0 <= a < 256, a
        assert 0 <= b < 256, b
        if a == 0 or b == 0:
            return 0

        log_lut = self._log_lut
        # the exp table is extended, so no modulo is needed for the sum
        return self._exp_lut[log_lut[a] + log_lut[b]]

    def div(self, a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
        assert 0 <= a < 256, a
        assert 0 <= b < 256, b
        if a == 0:
            return 0
        if b == 0:
            raise GFZeroDivisionError(f"Division of 0x{a:02X} by zero")

        log_res = self._log_lut[a] - self._log_lut[b]
        if log_res < 0:
            log_res += gf_lut.ORDER
        return self._exp_lut[log_res]

    def exp(self, a: ct.FieldElement, n: int) -> ct.FieldElement:
        """Raise a to the (integer) power n.

        By convention exp(0, 0) == 1. Negative powers are powers of
        the multiplicative inverse of a.
        """
        assert 0 <= a < 256, a
        if n == 0:
            return 1

        if a == 0:
            if n < 0:
                raise GFZeroDivisionError(f"Zero raised to negative power {n}")
            return 0

        log_res = (self._log_lut[a] * n) % gf_lut.ORDER
        return self._exp_lut[log_res]

    def inverse(self, a: ct.FieldElement) -> ct.FieldElement:
        return self.div(1, a)

    @functools.cached_property
    def mul_lut(self) -> ct.MulTable:
        """Full multiplication table, mul_lut[a][b] == mul(a, b)."""
        logger.debug(f"initializing multiplication table for {self}")
        return tuple(tuple(self.mul(a, b) for b in range(256)) for a in range(256))


@functools.lru_cache(maxsize=None)
def _new_field(polynomial: ct.Polynomial) -> Field:
    return Field(gf_lut.init_tables(polynomial))


def new_field(polynomial: int = gf_lut.STANDARD_POLYNOMIAL) -> Field:
    """Create the Field for a primitive polynomial.

    Raises InvalidPolynomial if the polynomial does not generate all 255
    nonzero elements of the field.
    """
    return _new_field(gf_lut.normalize_polynomial(polynomial))


def default_polynomial() -> ct.Polynomial:
    env_val = os.getenv(POLYNOMIAL_ENVVAR)
    if env_val is None:
        return gf_lut.STANDARD_POLYNOMIAL

    polynomial = gf_lut.parse_polynomial(env_val)
    logger.info(f"Using polynomial 0x1{polynomial:02X} from {POLYNOMIAL_ENVVAR}")
    return polynomial


_DEFAULT_FIELD     : Optional[Field] = None
_DEFAULT_FIELD_LOCK = threading.Lock()


def default_field() -> Field:
    # pylint: disable=global-statement
    global _DEFAULT_FIELD

    field = _DEFAULT_FIELD
    if field is None:
        with _DEFAULT_FIELD_LOCK:
            if _DEFAULT_FIELD is None:
                _DEFAULT_FIELD = new_field(default_polynomial())
            field = _DEFAULT_FIELD
    return field


def add(a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
    return default_field().add(a, b)


def sub(a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
    return default_field().sub(a, b)


def mul(a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
    return default_field().mul(a, b)


def div(a: ct.FieldElement, b: ct.FieldElement) -> ct.FieldElement:
    return default_field().div(a, b)


def exp(a: ct.FieldElement, n: int) -> ct.FieldElement:
    return default_field().exp(a, n)


def inverse(a: ct.FieldElement) -> ct.FieldElement:
    return default_field().inverse(a)


def mul_lut() -> ct.MulTable:
    return default_field().mul_lut
