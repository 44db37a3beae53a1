#!/usr/bin/env python3
# This file is part of the gf256 project
# https://github.com/mbarkhau/gf256
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI for inspection of GF(2**8) tables and arithmetic."""

import sys
import logging
from typing import Any
from typing import List
from typing import Optional
from typing import NamedTuple

import click

from . import gf
from . import gf_lut
from . import gf_util
from . import __version__
from . import common_types as ct

click.disable_unicode_literals_warning = True  # type: ignore[attr-defined]


logger = logging.getLogger("gf256.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-16s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


_PREV_VERBOSITY: int = -1


def _configure_logging(verbosity: int = 0) -> None:
    # pylint: disable=global-statement
    global _PREV_VERBOSITY

    if verbosity <= _PREV_VERBOSITY:
        # allow function to be called multiple times
        return

    _PREV_VERBOSITY = verbosity

    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def echo(msg: str = "") -> bool:
    click.echo(msg)
    return True


def _parse_polynomial(ctx: Any, param: Any, value: Optional[str]) -> ct.Polynomial:
    if value is None:
        return gf_lut.STANDARD_POLYNOMIAL
    try:
        return gf_lut.parse_polynomial(value)
    except gf_lut.InvalidPolynomial as err:
        raise click.BadParameter(str(err)) from err


def _parse_int(ctx: Any, param: Any, value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as err:
        raise click.BadParameter(f"Invalid integer '{value}'") from err


def _init_field(polynomial: ct.Polynomial) -> gf.Field:
    try:
        return gf.new_field(polynomial)
    except gf_lut.InvalidPolynomial as err:
        echo(f"Error: {err}")
        sys.exit(1)


_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)

_opt_polynomial = click.option(
    '-p',
    '--polynomial',
    default=None,
    envvar=gf.POLYNOMIAL_ENVVAR,
    callback=_parse_polynomial,
    help=(
        "Reducing polynomial, eg. 0x11D or 0x1D (default). "
        f"May also be set with the {gf.POLYNOMIAL_ENVVAR} environment variable."
    ),
)


@click.group(context_settings={'help_option_names': ["-h", "--help"]})
@_opt_verbose
def cli(verbose: int = 0) -> None:
    """CLI for gf256: arithmetic in GF(2**8)."""
    _configure_logging(verbose)


@cli.command()
def version() -> None:
    """Show version number."""
    echo(f"gf256 version: {__version__}")


@cli.command()
@_opt_polynomial
@_opt_verbose
def tables(polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL, verbose: int = 0) -> None:
    """Show the exponent, logarithm and inverse tables."""
    _configure_logging(verbose)
    field = _init_field(polynomial)

    exp_lut = field.tables.exp_lut[: gf_lut.ORDER]
    log_lut = field.tables.log_lut
    inv_lut = [gf_lut.LOG_UNDEFINED] + [field.inverse(n) for n in range(1, 256)]

    echo(f"Polynomial: 0x1{polynomial:02X} ({gf_util.poly2str(polynomial)})")
    for title, table in [("EXP", exp_lut), ("LOG", log_lut), ("INV", inv_lut)]:
        echo()
        echo(title)
        echo(gf_lut.format_table(table))


@cli.command()
@_opt_verbose
def polynomials(verbose: int = 0) -> None:
    """List all polynomials that generate the field."""
    _configure_logging(verbose)
    for polynomial in gf_lut.all_possible_polynomials():
        echo(f"0x1{polynomial:02X}  {gf_util.poly2str(polynomial)}")


OPERATIONS = ["add", "sub", "mul", "div", "exp"]


@cli.command()
@click.argument('operation', type=click.Choice(OPERATIONS))
@click.argument('a', callback=_parse_int)
@click.argument('b', callback=_parse_int)
@_opt_polynomial
@_opt_verbose
def calc(
    operation : str,
    a         : int,
    b         : int,
    polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL,
    verbose   : int = 0,
) -> None:
    """Evaluate OPERATION for elements A and B (or power B for exp)."""
    _configure_logging(verbose)
    field = _init_field(polynomial)

    if not 0 <= a < 256:
        raise click.BadParameter(f"Expected 0 <= A < 256, got {a}")
    if operation != 'exp' and not 0 <= b < 256:
        raise click.BadParameter(f"Expected 0 <= B < 256, got {b}")

    op_fn = getattr(field, operation)
    try:
        res = op_fn(a, b)
    except gf.GFZeroDivisionError as err:
        echo(f"Error: {err}")
        sys.exit(1)

    echo(f"0x{res:02X}")


@cli.command()
@_opt_polynomial
@_opt_verbose
def verify(polynomial: ct.Polynomial = gf_lut.STANDARD_POLYNOMIAL, verbose: int = 0) -> None:
    """Check the tables against arithmetic without tables."""
    _configure_logging(verbose)
    field = _init_field(polynomial)

    errors: List[str] = []
    for a in range(256):
        for b in range(256):
            expected = gf_util.mul_slow(a, b, polynomial)
            if field.mul(a, b) != expected:
                errors.append(f"mul(0x{a:02X}, 0x{b:02X}) != 0x{expected:02X}")
            if b != 0 and field.div(expected, b) != a:
                errors.append(f"div(0x{expected:02X}, 0x{b:02X}) != 0x{a:02X}")

    logger.info(f"checked {256 * 256} pairs for {field}")
    if errors:
        for error in errors[:10]:
            echo(f"Error: {error}")
        echo(f"{len(errors)} errors")
        sys.exit(1)
    else:
        echo(f"OK: 0x1{polynomial:02X}")
