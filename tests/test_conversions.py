# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Test driver for package 'bigrational' (conversions)."""

from decimal import Context, Decimal
from fractions import Fraction
import math
import sys

import pytest

from bigrational import (
    BigRational, NumberFormat, get_dflt_number_format, get_dflt_precision,
    set_dflt_number_format, set_dflt_precision)


def from_str(value):
    f = Fraction(value)
    return BigRational(f.numerator, f.denominator)


@pytest.mark.parametrize("value",
                         ("17.8",
                          ".".join(("1" * 3297, "4" * 33)),
                          "14/900"),
                         ids=("compact", "large", "fraction"))
def test_true(value):
    q = from_str(value)
    assert q


@pytest.mark.parametrize(("num", "den"), ((0, 1), (0, -999999999)),
                         ids=("0", "0/-999999999"))
def test_false(num, den):
    q = BigRational(num, den)
    assert not q


@pytest.mark.parametrize("value",
                         ("0.000",
                          "-17.03",
                          Fraction(9 ** 394, 10 ** 247),
                          Fraction(-19, 4000)),
                         ids=("zero", "compact", "large", "fraction"))
def test_int(value):
    f = Fraction(value)
    q = BigRational(f.numerator * 3, f.denominator * 3)
    assert int(f) == int(q)
    assert isinstance(int(q), int)


@pytest.mark.parametrize("value",
                         ("0.00000",
                          17,
                          "-33000.17",
                          Fraction(9 ** 394, 10 ** 247),
                          Fraction(-19, 400000)),
                         ids=("zero", "int", "compact", "large", "fraction"))
@pytest.mark.parametrize("func",
                         (math.trunc, math.floor, math.ceil),
                         ids=("trunc", "floor", "ceil"))
def test_math_funcs(func, value):
    f = Fraction(value)
    q = BigRational(f.numerator * 7, f.denominator * 7)
    assert func(f) == func(q)
    assert isinstance(func(q), int)


@pytest.mark.parametrize(("num", "den"),
                         ((17, 1),
                          (9 ** 394, 10 ** 247),
                          (-190, 400000),
                          (10 ** 400, 10 ** 100),
                          (1, 10 ** 400)),
                         ids=("compact", "large", "fraction", "large-pair",
                              "tiny"))
def test_to_float(num, den):
    f = Fraction(num, den)
    q = BigRational(num, den)
    assert float(f) == float(q)


@pytest.mark.parametrize(("num", "den"),
                         ((10 ** 400, 1),
                          (-10 ** 400, 3),
                          (int(sys.float_info.max) + 1, 1)),
                         ids=("large", "neg-large", "max+1"))
def test_to_float_overflow(num, den):
    q = BigRational(num, den)
    with pytest.raises(OverflowError):
        float(q)


def test_to_float_max():
    q = BigRational(-int(sys.float_info.max) * 2, 2)
    assert float(q) == -sys.float_info.max


@pytest.mark.parametrize(("num", "den", "context", "dec"),
                         ((1, 8, None, Decimal("0.125")),
                          (2, 6, Context(prec=5), Decimal("0.33333")),
                          (-2, 3, Context(prec=3), Decimal("-0.667")),
                          (10 ** 11 - 1, 1, Context(Emax=10),
                           Decimal(10 ** 11 - 1))),
                         ids=("1/8", "1/3", "-2/3", "max"))
def test_to_decimal(num, den, context, dec):
    q = BigRational(num, den)
    assert q.to_decimal(context) == dec


@pytest.mark.parametrize(("num", "den"),
                         ((10 ** 11, 1), (-10 ** 12, 3)),
                         ids=("10**11", "neg"))
def test_to_decimal_overflow(num, den):
    q = BigRational(num, den)
    with pytest.raises(OverflowError):
        q.to_decimal(Context(Emax=10))


@pytest.mark.parametrize("traps", (None, []), ids=("trapped", "untrapped"))
def test_to_decimal_overflow_after_rounding(traps):
    q = BigRational(9999, 10)
    with pytest.raises(OverflowError):
        q.to_decimal(Context(prec=2, Emax=2, traps=traps))
    assert q.to_decimal(Context(prec=4, Emax=2)) == Decimal("999.9")


@pytest.mark.parametrize("value",
                         ("0.00000",
                          17,
                          "-33000.17",
                          Fraction(9 ** 394, 10 ** 247),
                          Fraction(-19, 400000)),
                         ids=("zero", "int", "compact", "large", "fraction"))
def test_as_integer_ratio(value):
    f = Fraction(value)
    q = BigRational(f.numerator * -11, f.denominator * -11)
    assert q.as_integer_ratio() == (f.numerator, f.denominator)


@pytest.mark.parametrize("value",
                         ("0.00000",
                          17,
                          "-33000.17",
                          Fraction(9 ** 394, 10 ** 247),
                          Fraction(-19, 400000)),
                         ids=("zero", "int", "compact", "large", "fraction"))
def test_as_fraction(value):
    f = Fraction(value)
    q = BigRational(f.numerator * 2, f.denominator * 2)
    assert q.as_fraction() == f


@pytest.mark.parametrize(("num", "den", "prec", "str_"),
                         ((1, 3, 5, "0.33333"),
                          (2, 3, 5, "0.66666"),
                          (1, 2, 5, "0.50000"),
                          (-1, 2, 3, "-0.500"),
                          (-7, 2, 2, "-3.50"),
                          (1, 1000, 2, "0.00"),
                          (-1, 1000, 2, "-0.00"),
                          (12345, 100, 1, "123.4"),
                          (7, 2, 0, "3"),
                          (-7, 2, 0, "-3"),
                          (-1, 2, 0, "0"),
                          (5, 1, 3, "5"),
                          (10, 2, 3, "5"),
                          (-20, 4, 3, "-5"),
                          (0, 7, 3, "0"),
                          (1, 7, 20, "0.14285714285714285714"),
                          (887 * 10 ** 14, 1, 2, "887" + "0" * 14),
                          (-319, 10 ** 27, 30, "-0." + "0" * 24 + "319000")),
                         ids=lambda p: str(p))
def test_to_decimal_string(num, den, prec, str_):
    q = BigRational(num, den)
    assert q.to_decimal_string(prec) == str_


def test_text_beyond_int_str_limit():
    big = 10 ** 5000
    q = BigRational(big, 3)
    assert q.to_decimal_string(5) == "3" * 5000 + ".33333"
    assert repr(q) == "BigRational(1" + "0" * 5000 + ", 3)"
    assert BigRational(2 * big, 6).to_rational_string() == \
        "1" + "0" * 5000 + " / 3"
    assert str(BigRational(-big)) == "-1" + "0" * 5000
    assert BigRational(1, 3).to_decimal_string(5000) == "0." + "3" * 5000
    with pytest.raises(ZeroDivisionError):
        BigRational(big, 0)


@pytest.mark.parametrize(("num", "den", "str_"),
                         ((5, 1, "5.0"),
                          (-10, 2, "-5.0"),
                          (0, 3, "0.0"),
                          (1, 4, "0.250")),
                         ids=("5", "-10/2", "0", "1/4"))
def test_to_decimal_string_padded(num, den, str_):
    q = BigRational(num, den)
    assert q.to_decimal_string(3, pad=True) == str_


def test_to_decimal_string_number_format():
    fmt = NumberFormat(decimal_separator=',', group_separator='.')
    q = BigRational(-1234567, 2)
    assert q.to_decimal_string(2, fmt) == "-617283,50"
    assert BigRational(3).to_decimal_string(2, fmt, pad=True) == "3,0"


def test_to_decimal_string_dflt_number_format(with_comma_format):
    assert BigRational(7, 4).to_decimal_string(2) == "1,75"
    assert BigRational.parse(BigRational(7, 4).to_decimal_string(2)) == \
        BigRational(7, 4)


@pytest.mark.parametrize("prec", (-1, 1.5, "5", None),
                         ids=("-1", "1.5", "'5'", "None"))
def test_set_dflt_precision_invalid(prec):
    exc = ValueError if prec == -1 else TypeError
    with pytest.raises(exc):
        set_dflt_precision(prec)
    if prec is not None:
        with pytest.raises(exc):
            BigRational(1, 3).to_decimal_string(prec)


def test_set_dflt_number_format_invalid():
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        set_dflt_number_format(",")


def test_dflts():
    assert get_dflt_precision() == 100
    assert get_dflt_number_format() == NumberFormat('.', ',')


def test_str():
    assert str(BigRational(1, 3)) == "0." + "3" * 100
    assert str(BigRational(-1, 8)) == "-0.125" + "0" * 97
    assert str(BigRational(12, 4)) == "3"
    assert str(BigRational()) == "0"


def test_str_dflt_precision(with_precision_5):
    assert str(BigRational(1, 8)) == "0.12500"
    assert str(BigRational(-2, 3)) == "-0.66666"


@pytest.mark.parametrize(("num", "den", "str_"),
                         ((2, 4, "1 / 2"),
                          (-6, 3, "-2 / 1"),
                          (0, 5, "0 / 1"),
                          (12345, 100, "2469 / 20"),
                          (3, -9, "-1 / 3")),
                         ids=lambda p: str(p))
def test_to_rational_string(num, den, str_):
    q = BigRational(num, den)
    assert q.to_rational_string() == str_


@pytest.mark.parametrize(("num", "den", "repr_"),
                         ((0, 1, "BigRational(0)"),
                          (15, 1, "BigRational(15)"),
                          (15000, 1000, "BigRational(15000, 1000)"),
                          (1, -2, "BigRational(-1, 2)"),
                          (887 * 10 ** 14, 1,
                           "BigRational(887" + "0" * 14 + ")"),
                          (12345678901234567890123456, 1234567,
                           "BigRational(12345678901234567890123456, "
                           "1234567)")),
                         ids=lambda p: str(p))
def test_repr(num, den, repr_):
    q = BigRational(num, den)
    assert repr(q) == repr_
