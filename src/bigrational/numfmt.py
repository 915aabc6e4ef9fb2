# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Decimal text representation of rational numbers.

Provides the symbols used in decimal text (:class:`NumberFormat`), the
context defaults for them and for the number of fractional digits, and
the conversions between decimal text and numerator / denominator pairs.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple


__all__ = [
    'NumberFormat',
    'INVARIANT',
    'DFLT_PRECISION',
    'get_dflt_number_format',
    'set_dflt_number_format',
    'get_dflt_precision',
    'set_dflt_precision',
    'parse_decimal',
    'format_decimal',
    'int_to_str',
]


@dataclass(frozen=True)
class NumberFormat:
    """Symbols used when parsing and rendering decimal text.

    Args:
        decimal_separator (str): separates whole and fractional digits
        group_separator (str): separates groups of digits; removed when
            parsing, never emitted when rendering (may be empty)

    Raises:
        TypeError: a separator is not a string
        ValueError: `decimal_separator` is empty or both separators are
            equal
    """

    decimal_separator: str = '.'
    group_separator: str = ','

    def __post_init__(self) -> None:
        if not (isinstance(self.decimal_separator, str)
                and isinstance(self.group_separator, str)):
            raise TypeError("Separators must be strings.")
        if not self.decimal_separator:
            raise ValueError("Decimal separator must not be empty.")
        if self.decimal_separator == self.group_separator:
            raise ValueError("Decimal and group separator must differ.")


INVARIANT = NumberFormat()
DFLT_PRECISION = 100

_dflt_number_format: ContextVar[NumberFormat] = \
    ContextVar("dflt_number_format", default=INVARIANT)
_dflt_precision: ContextVar[int] = \
    ContextVar("dflt_precision", default=DFLT_PRECISION)


def get_dflt_number_format() -> NumberFormat:
    """Return default number format."""
    return _dflt_number_format.get()


def set_dflt_number_format(number_format: NumberFormat) -> Token:
    """Set default number format.

    Args:
        number_format (NumberFormat): number format to be set as default

    Raises:
        TypeError: given 'number_format' is not a NumberFormat
    """
    if not isinstance(number_format, NumberFormat):
        raise TypeError(f"Illegal number format: {number_format!r}")
    return _dflt_number_format.set(number_format)


def get_dflt_precision() -> int:
    """Return default number of fractional digits used in formatting."""
    return _dflt_precision.get()


def set_dflt_precision(precision: int) -> Token:
    """Set default number of fractional digits used in formatting.

    Args:
        precision (int): number of fractional digits to be set as default

    Raises:
        TypeError: given 'precision' is not an int
        ValueError: given 'precision' is negative
    """
    _check_precision(precision)
    return _dflt_precision.set(precision)


def _check_precision(precision: int) -> None:
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise TypeError(f"Precision must be an int, not {precision!r}.")
    if precision < 0:
        raise ValueError(f"Precision must be >= 0, not {precision}.")


def int_to_str(value: int) -> str:
    """Return the decimal digits of `value`.

    Unlike `str(value)`, the conversion is not restricted by
    `sys.get_int_max_str_digits()`.
    """
    return str(Decimal(value))


def _str_to_int(digits: str) -> int:
    return int(Decimal(digits))


def parse_decimal(text: str, number_format: Optional[NumberFormat] = None
                  ) -> Tuple[int, int]:
    """Return numerator and denominator of the value given by `text`.

    `text` may contain surrounding whitespace, a leading sign, decimal
    digits, group separators and at most one decimal separator. The
    denominator returned is a power of ten, the pair is not reduced.

    Raises:
        TypeError: `text` is not a string
        ValueError: `text` is not a valid decimal literal
    """
    if not isinstance(text, str):
        raise TypeError(f"Can't parse {type(text).__name__} object.")
    if number_format is None:
        number_format = get_dflt_number_format()
    dec_sep = number_format.decimal_separator
    grp_sep = number_format.group_separator
    lit = text.strip()
    if grp_sep:
        lit = lit.replace(grp_sep, '')
    negative = lit[:1] == '-'
    if lit[:1] in ('+', '-'):
        lit = lit[1:]
    point = lit.find(dec_sep)
    if point >= 0:
        lit = lit[:point] + lit[point + len(dec_sep):]
        if dec_sep in lit:
            raise ValueError(f"Invalid literal (more than one decimal "
                             f"separator): {text!r}")
    if not lit or not lit.isdecimal():
        raise ValueError(f"Invalid literal: {text!r}")
    num = _str_to_int(lit)
    if negative:
        num = -num
    if point < 0:
        return num, 1
    return num, 10 ** (len(lit) - point)


def format_decimal(numerator: int, denominator: int,
                   precision: Optional[int] = None,
                   number_format: Optional[NumberFormat] = None,
                   pad: bool = False) -> str:
    """Return decimal text for `numerator` / `denominator`.

    Digits beyond `precision` fractional digits are truncated, not
    rounded. Trailing zeros are kept, so a non-integral value always
    renders with exactly `precision` fractional digits. An integral value
    renders without fractional part unless `pad` is true.

    Raises:
        TypeError: `precision` is not an int
        ValueError: `precision` is negative
    """
    if precision is None:
        precision = get_dflt_precision()
    else:
        _check_precision(precision)
    if number_format is None:
        number_format = get_dflt_number_format()
    sign = '-' if numerator < 0 else ''
    whole, rem = divmod(abs(numerator), denominator)
    if rem == 0:
        if pad:
            return (f"{sign}{int_to_str(whole)}"
                    f"{number_format.decimal_separator}0")
        return f"{sign}{int_to_str(whole)}"
    if precision == 0:
        return f"{sign}{int_to_str(whole)}" if whole else "0"
    frac = rem * 10 ** precision // denominator
    return (f"{sign}{int_to_str(whole)}{number_format.decimal_separator}"
            f"{int_to_str(frac).zfill(precision)}")
