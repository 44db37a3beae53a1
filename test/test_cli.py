import pytest
import click.testing

import gf256
import gf256.cli


def _run(*argv, env=None):
    runner = click.testing.CliRunner()
    return runner.invoke(gf256.cli.cli, list(argv), env=env)


def test_version():
    result = _run("version")
    assert result.exit_code == 0
    assert gf256.__version__ in result.output


def test_help():
    result = _run("--help")
    assert result.exit_code == 0
    for cmd in ["tables", "polynomials", "calc", "verify", "version"]:
        assert cmd in result.output


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["add", "3", "7"], "0x04"),
        (["sub", "3", "7"], "0x04"),
        (["mul", "3", "7"], "0x09"),
        (["mul", "0x53", "0xCA"], "0x8F"),
        (["div", "9", "3"], "0x07"),
        (["div", "0", "0"], "0x00"),
        (["exp", "2", "8"], "0x1D"),
        (["exp", "0", "0"], "0x01"),
        (["exp", "2", "--", "-1"], "0x8E"),
    ],
)
def test_calc(argv, expected):
    result = _run("calc", *argv)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_calc_polynomial():
    result = _run("calc", "mul", "0x80", "2", "--polynomial", "0x12B")
    assert result.exit_code == 0
    assert result.output.strip() == "0x2B"

    result = _run("calc", "mul", "0x80", "2", env={'GF256_POLYNOMIAL': "0x12B"})
    assert result.exit_code == 0
    assert result.output.strip() == "0x2B"


def test_calc_div_by_zero():
    result = _run("calc", "div", "1", "0")
    assert result.exit_code == 1
    assert "by zero" in result.output


def test_calc_bad_args():
    result = _run("calc", "mul", "256", "1")
    assert result.exit_code == 2

    result = _run("calc", "mul", "abc", "1")
    assert result.exit_code == 2
    assert "Invalid integer" in result.output

    result = _run("calc", "pow", "1", "1")
    assert result.exit_code == 2


def test_invalid_polynomial():
    result = _run("calc", "mul", "3", "7", "--polynomial", "0x11B")
    assert result.exit_code == 1
    assert "Duplicate logarithm" in result.output

    result = _run("tables", "--polynomial", "nope")
    assert result.exit_code == 2
    assert "Invalid polynomial" in result.output


def test_polynomials():
    result = _run("polynomials")
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 16
    assert lines[0] == "0x11D  x^8 + x^4 + x^3 + x^2 + 1"
    assert lines[-1].startswith("0x1F5")


def test_tables():
    result = _run("tables")
    assert result.exit_code == 0
    output = result.output
    assert "Polynomial: 0x11D (x^8 + x^4 + x^3 + x^2 + 1)" in output
    assert "\nEXP\n01 02 04 08 10 20 40 80 1d 3a 74 e8 cd 87 13 26\n" in output
    assert "\nLOG\n-- 00 01 19 02 32 1a c6 03 df 33 ee 1b 68 c7 4b\n" in output
    assert "\nINV\n-- 01 8e f4 47 a7 7a ba ad 9d dd 98 3d aa 5d 96\n" in output


@pytest.mark.parametrize("polynomial", ["0x11D", "0x12B"])
def test_verify(polynomial):
    result = _run("verify", "-p", polynomial)
    assert result.exit_code == 0
    assert result.output.strip() == f"OK: {polynomial}"
