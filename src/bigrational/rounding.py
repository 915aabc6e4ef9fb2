# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for arbitrary-precision rational numbers."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


__all__ = ['Rounding', 'get_dflt_rounding_mode', 'set_dflt_rounding_mode',
           'round_quotient']


# rounding modes equivalent to those defined in standard lib module 'decimal'
@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, 'Round away from zero if last digit after rounding '
                     'towards zero would have been 0 or 5; otherwise round '
                     'towards zero.')
    ROUND_CEILING = (2, 'Round towards Infinity.')
    ROUND_DOWN = (3, 'Round towards zero.')
    ROUND_FLOOR = (4, 'Round towards -Infinity.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'integer.')
    ROUND_HALF_UP = (7, 'Round to nearest with ties going away from zero.')
    ROUND_UP = (8, 'Round away from zero.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_UP)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (Rounding): rounding mode to be set as default

    Returns:
        Token: token which can be used to restore the previous default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def round_quotient(quot: int, rem: int, divisor: int, negative: bool,
                   rounding: Rounding) -> int:
    """Return magnitude of `quot` adjusted according to `rounding`.

    `quot` and `rem` are the non-negative quotient and remainder of the
    magnitude of the value to be rounded divided by `divisor`, i.e.
    `0 <= rem < divisor`. `negative` gives the sign of the value.
    """
    if rem == 0:
        return quot
    if rounding is Rounding.ROUND_DOWN:
        return quot
    if rounding is Rounding.ROUND_UP:
        return quot + 1
    if rounding is Rounding.ROUND_CEILING:
        return quot if negative else quot + 1
    if rounding is Rounding.ROUND_FLOOR:
        return quot + 1 if negative else quot
    if rounding is Rounding.ROUND_05UP:
        return quot + 1 if quot % 5 == 0 else quot
    # remaining modes round to nearest
    twice_rem = 2 * rem
    if twice_rem > divisor:
        return quot + 1
    if twice_rem < divisor:
        return quot
    # tie
    if rounding is Rounding.ROUND_HALF_UP:
        return quot + 1
    if rounding is Rounding.ROUND_HALF_DOWN:
        return quot
    if rounding is Rounding.ROUND_HALF_EVEN:
        return quot + (quot & 1)
    raise TypeError(f"Illegal rounding mode: {rounding!r}")
