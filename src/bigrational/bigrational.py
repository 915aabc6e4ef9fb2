# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exact rational numbers with arbitrary-precision numerator and
denominator.

A :class:`BigRational` keeps the numerator / denominator pair it was built
from. Arithmetic never reduces the result to lowest terms, because
computing the greatest common divisor dominates the cost for large
operands; use :meth:`BigRational.reduced` to canonicalize explicitly.
Parsing, rounding and hashing work on the canonical form.
"""

from __future__ import annotations

from decimal import Context, Decimal, Overflow, getcontext
from fractions import Fraction
import math
import numbers
import operator
import sys
from typing import Any, Optional, Tuple, Union

from .numfmt import (
    NumberFormat, INVARIANT, format_decimal, int_to_str, parse_decimal)
from .rounding import Rounding, get_dflt_rounding_mode, round_quotient


__all__ = [
    'BigRational',
    'ZERO',
    'ONE',
    'NEGATIVE_ONE',
    'ONE_HALF',
    'E',
    'PI',
    'TAU',
]


# Constants related to the hash implementation; hash(x) is based on the
# reduction of x modulo the prime _PyHASH_MODULUS.
_PyHASH_MODULUS = sys.hash_info.modulus
_PyHASH_INF = sys.hash_info.inf

_FLOAT_MAX = int(sys.float_info.max)

RationalOperand = Union['BigRational', numbers.Rational, int]


def _as_pair(value: Any) -> Optional[Tuple[int, int]]:
    """Return numerator / denominator of `value` (denominator > 0) or None
    if `value` is not a rational number."""
    if isinstance(value, BigRational):
        return value._numerator, value._denominator
    if isinstance(value, numbers.Integral):
        return int(value), 1
    if isinstance(value, numbers.Rational):
        num, den = int(value.numerator), int(value.denominator)
        if den < 0:
            return -num, -den
        return num, den
    return None


def _to_pair(value: Any) -> Tuple[int, int]:
    pair = _as_pair(value)
    if pair is None:
        raise TypeError(f"Expected a rational number, got {value!r}.")
    return pair


def _signed(magnitude: int, negative: bool) -> int:
    return -magnitude if negative else magnitude


def _operator_fallbacks(exact_op, fallback_op):
    """Return forward and reverse operators for the arithmetic function
    `exact_op`.

    Rational operands are handled exactly by `exact_op`, which gets two
    numerator / denominator pairs; float and complex operands are handed
    to `fallback_op` after converting the BigRational to the same type.
    """

    def forward(a, b):
        pair = _as_pair(b)
        if pair is not None:
            return exact_op((a._numerator, a._denominator), pair)
        if isinstance(b, float):
            return fallback_op(float(a), b)
        if isinstance(b, complex):
            return fallback_op(complex(a), b)
        return NotImplemented

    forward.__name__ = '__' + fallback_op.__name__ + '__'
    forward.__doc__ = exact_op.__doc__

    def reverse(b, a):
        pair = _as_pair(a)
        if pair is not None:
            return exact_op(pair, (b._numerator, b._denominator))
        if isinstance(a, numbers.Real):
            return fallback_op(float(a), float(b))
        if isinstance(a, numbers.Complex):
            return fallback_op(complex(a), complex(b))
        return NotImplemented

    reverse.__name__ = '__r' + fallback_op.__name__ + '__'
    reverse.__doc__ = exact_op.__doc__

    return forward, reverse


def _add(a, b):
    """a + b"""
    (na, da), (nb, db) = a, b
    return BigRational(na * db + nb * da, da * db)


def _sub(a, b):
    """a - b"""
    (na, da), (nb, db) = a, b
    return BigRational(na * db - nb * da, da * db)


def _mul(a, b):
    """a * b"""
    (na, da), (nb, db) = a, b
    return BigRational(na * nb, da * db)


def _div(a, b):
    """a / b"""
    (na, da), (nb, db) = a, b
    if nb == 0:
        raise ZeroDivisionError("Division by zero.")
    return BigRational(na * db, da * nb)


def _floordiv(a, b):
    """a // b"""
    (na, da), (nb, db) = a, b
    if nb == 0:
        raise ZeroDivisionError("Division by zero.")
    return (na * db) // (da * nb)


def _mod(a, b):
    """a % b"""
    (na, da), (nb, db) = a, b
    quot = _floordiv(a, b)
    return BigRational(na * db - quot * nb * da, da * db)


def _divmod(a, b):
    """(a // b, a % b)"""
    return _floordiv(a, b), _mod(a, b)


class BigRational(numbers.Rational):
    """Exact rational number.

    Args:
        numerator (numbers.Integral): numerator (default: 0)
        denominator (numbers.Integral): denominator (default: 1)

    The denominator is made positive; otherwise the pair is kept as
    given, i.e. `BigRational(2, 4)` is equal to, but not represented like
    `BigRational(1, 2)`.

    Use :meth:`parse`, :meth:`from_float` and :meth:`from_decimal` to
    create instances from decimal text, floats and decimals.

    Raises:
        TypeError: `numerator` or `denominator` is not an Integral
        ZeroDivisionError: `denominator` is 0

    Instances are immutable; all operations return new instances.
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator: numbers.Integral = 0,
                denominator: numbers.Integral = 1) -> BigRational:
        """Return new BigRational instance."""
        for arg in (numerator, denominator):
            if not isinstance(arg, numbers.Integral):
                raise TypeError(f"Can't create {cls.__name__} from "
                                f"{arg!r}; use parse, from_float or "
                                f"from_decimal.")
        num = operator.index(numerator)
        den = operator.index(denominator)
        if den == 0:
            raise ZeroDivisionError(
                f"{cls.__name__}({int_to_str(num)}, 0)")
        if den < 0:
            num, den = -num, -den
        self = object.__new__(cls)
        self._numerator = num
        self._denominator = den
        return self

    # alternative constructors

    @classmethod
    def from_integer(cls, value: numbers.Integral) -> BigRational:
        """Return BigRational equal to integer `value`."""
        return cls(value)

    @classmethod
    def from_float(cls, value: Union[float, numbers.Integral]
                   ) -> BigRational:
        """Return BigRational equal to the printed value of `value`.

        The float is converted through its shortest decimal text
        representation (the one given by `repr`), so that the result is
        the decimal number shown for `value`, not the exact binary
        fraction stored in it: `BigRational.from_float(0.1)` equals
        `BigRational(1, 10)`.

        Raises:
            TypeError: `value` is neither a float nor an Integral
            ValueError: `value` is infinite or NaN
        """
        if isinstance(value, numbers.Integral):
            return cls(value)
        if not isinstance(value, float):
            raise TypeError(f"{cls.__name__}.from_float() only accepts "
                            f"floats or Integrals, not {value!r}.")
        if not math.isfinite(value):
            raise ValueError(f"Can't convert {value!r} to "
                             f"{cls.__name__}.")
        return cls.parse(format(Decimal(repr(value)), 'f'), INVARIANT)

    @classmethod
    def from_decimal(cls, value: Union[Decimal, numbers.Integral]
                     ) -> BigRational:
        """Return BigRational equal to `value`.

        Raises:
            TypeError: `value` is neither a Decimal nor an Integral
            ValueError: `value` is infinite or NaN
        """
        if isinstance(value, numbers.Integral):
            return cls(value)
        if not isinstance(value, Decimal):
            raise TypeError(f"{cls.__name__}.from_decimal() only accepts "
                            f"Decimals or Integrals, not {value!r}.")
        if not value.is_finite():
            raise ValueError(f"Can't convert {value!r} to "
                             f"{cls.__name__}.")
        return cls.parse(format(value, 'f'), INVARIANT)

    @classmethod
    def parse(cls, text: str, number_format: Optional[NumberFormat] = None,
              reduce: bool = True) -> BigRational:
        """Return BigRational given by the decimal literal `text`.

        Args:
            text (str): optional sign, decimal digits and group separators
                with at most one decimal separator (no exponent)
            number_format (NumberFormat): separators to be recognized
                (default: context default number format)
            reduce (bool): reduce result to lowest terms (default: True)

        Raises:
            TypeError: `text` is not a string
            ValueError: `text` is not a valid decimal literal
        """
        num, den = parse_decimal(text, number_format)
        rn = cls(num, den)
        return rn.reduced() if reduce else rn

    @classmethod
    def try_parse(cls, text: str,
                  number_format: Optional[NumberFormat] = None
                  ) -> Optional[BigRational]:
        """Return BigRational given by `text` or None if `text` is not a
        valid decimal literal."""
        try:
            return cls.parse(text, number_format)
        except ValueError:
            return None

    # properties

    @property
    def numerator(self) -> int:
        """Numerator as stored (not necessarily in lowest terms)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator as stored (always positive)."""
        return self._denominator

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of `self`."""
        num = self._numerator
        return (num > 0) - (num < 0)

    def is_integer(self) -> bool:
        """Return True if `self` is integral."""
        return self._numerator % self._denominator == 0

    def is_even_integer(self) -> bool:
        """Return True if `self` is an even integer."""
        return self._numerator % (2 * self._denominator) == 0

    def is_odd_integer(self) -> bool:
        """Return True if `self` is an odd integer."""
        num, den = self._numerator, self._denominator
        return num % den == 0 and (num // den) % 2 == 1

    def is_canonical(self) -> bool:
        """Return True if `self` is in lowest terms."""
        return math.gcd(self._numerator, self._denominator) == 1

    # reduction

    def reduced(self) -> BigRational:
        """Return `self` reduced to lowest terms.

        Computing the greatest common divisor may be expensive for large
        operands, so this should be called sparingly.
        """
        num, den = self._numerator, self._denominator
        if den == 1:
            return self
        gcd = math.gcd(num, den)
        if gcd == 1:
            return self
        return BigRational(num // gcd, den // gcd)

    # conversions

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator in lowest terms."""
        rn = self.reduced()
        return rn._numerator, rn._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(self._numerator, self._denominator)

    def __float__(self) -> float:
        """float(self)

        Raises:
            OverflowError: `self` is outside the range of float
        """
        num, den = self._numerator, self._denominator
        if abs(num) > _FLOAT_MAX * den:
            raise OverflowError(f"{self!r} is outside the range of float.")
        return num / den

    def to_decimal(self, context: Optional[Context] = None) -> Decimal:
        """Return `self` as Decimal, rounded according to `context`
        (default: current decimal context).

        Raises:
            OverflowError: `self`, rounded according to `context`, is
                outside the range of finite Decimals in `context`
        """
        ctx = getcontext() if context is None else context
        num, den = self._numerator, self._denominator
        whole = abs(num) // den
        if whole.bit_length() > 3 * (ctx.Emax + 1) and \
                whole >= 10 ** (ctx.Emax + 1):
            raise OverflowError(f"{self!r} is outside the range of "
                                f"Decimal in the given context.")
        try:
            dec = ctx.divide(Decimal(num), Decimal(den))
        except Overflow as exc:
            raise OverflowError(f"{self!r} is outside the range of "
                                f"Decimal in the given context.") from exc
        # Overflow not trapped
        if dec.is_infinite():
            raise OverflowError(f"{self!r} is outside the range of "
                                f"Decimal in the given context.")
        return dec

    def __int__(self) -> int:
        """int(self)"""
        return self.whole_part()

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    # text representations

    def to_decimal_string(self, precision: Optional[int] = None,
                          number_format: Optional[NumberFormat] = None,
                          pad: bool = False) -> str:
        """Return decimal text for `self`, truncated after `precision`
        fractional digits (default: context default precision).

        Trailing zeros are kept. An integral value is rendered without
        fractional digits unless `pad` is true.
        """
        return format_decimal(self._numerator, self._denominator,
                              precision, number_format, pad)

    def to_rational_string(self) -> str:
        """Return 'numerator / denominator' of `self` in lowest terms."""
        rn = self.reduced()
        return f"{int_to_str(rn._numerator)} / {int_to_str(rn._denominator)}"

    def __str__(self) -> str:
        """str(self)"""
        return self.to_decimal_string()

    def __repr__(self) -> str:
        """repr(self)"""
        cls_name = self.__class__.__name__
        num = int_to_str(self._numerator)
        if self._denominator == 1:
            return f"{cls_name}({num})"
        return f"{cls_name}({num}, {int_to_str(self._denominator)})"

    # arithmetic

    def add(self, other: RationalOperand) -> BigRational:
        """Return `self` + `other`."""
        return _add((self._numerator, self._denominator), _to_pair(other))

    def subtract(self, other: RationalOperand) -> BigRational:
        """Return `self` - `other`."""
        return _sub((self._numerator, self._denominator), _to_pair(other))

    def multiply(self, other: RationalOperand) -> BigRational:
        """Return `self` * `other`."""
        return _mul((self._numerator, self._denominator), _to_pair(other))

    def divide(self, other: RationalOperand) -> BigRational:
        """Return `self` / `other`.

        Raises:
            ZeroDivisionError: `other` is zero
        """
        return _div((self._numerator, self._denominator), _to_pair(other))

    def remainder(self, other: RationalOperand) -> BigRational:
        """Return `self` - floor(`self` / `other`) * `other`.

        Raises:
            ZeroDivisionError: `other` is zero
        """
        return _mod((self._numerator, self._denominator), _to_pair(other))

    def divide_with_remainder(self, other: RationalOperand
                              ) -> Tuple[BigRational, BigRational]:
        """Return the exact quotient `self` / `other` together with
        `self.remainder(other)`.

        Raises:
            ZeroDivisionError: `other` is zero
        """
        return self.divide(other), self.remainder(other)

    def power(self, exponent: numbers.Integral) -> BigRational:
        """Return `self` raised to the integral power `exponent`.

        Zero raised to any power (including 0 and negative powers) gives
        zero.
        """
        exp = operator.index(exponent)
        num, den = self._numerator, self._denominator
        if num == 0:
            return self
        if exp < 0:
            return BigRational(den ** -exp, num ** -exp)
        return BigRational(num ** exp, den ** exp)

    def inverse(self) -> BigRational:
        """Return 1 / `self`.

        Raises:
            ZeroDivisionError: `self` is zero
        """
        return BigRational(self._denominator, self._numerator)

    def increment(self) -> BigRational:
        """Return `self` + 1."""
        return BigRational(self._numerator + self._denominator,
                           self._denominator)

    def decrement(self) -> BigRational:
        """Return `self` - 1."""
        return BigRational(self._numerator - self._denominator,
                           self._denominator)

    def shift_decimal(self, shift: int) -> BigRational:
        """Return `self` * 10 ** `shift`."""
        shift = operator.index(shift)
        if shift >= 0:
            return BigRational(self._numerator * 10 ** shift,
                               self._denominator)
        return BigRational(self._numerator, self._denominator * 10 ** -shift)

    __add__, __radd__ = _operator_fallbacks(_add, operator.add)
    __sub__, __rsub__ = _operator_fallbacks(_sub, operator.sub)
    __mul__, __rmul__ = _operator_fallbacks(_mul, operator.mul)
    __truediv__, __rtruediv__ = _operator_fallbacks(_div, operator.truediv)
    __floordiv__, __rfloordiv__ = \
        _operator_fallbacks(_floordiv, operator.floordiv)
    __mod__, __rmod__ = _operator_fallbacks(_mod, operator.mod)
    __divmod__, __rdivmod__ = _operator_fallbacks(_divmod, divmod)

    def __pow__(self, exponent: Any, modulo: Any = None) -> Any:
        """self ** exponent

        If `exponent` is not integral, the result is a float or complex,
        since roots are generally irrational.
        """
        if modulo is not None:
            return NotImplemented
        pair = _as_pair(exponent)
        if pair is not None:
            num, den = pair
            if num % den == 0:
                return self.power(num // den)
            return float(self) ** (num / den)
        if isinstance(exponent, (float, complex)):
            return float(self) ** exponent
        return NotImplemented

    def __rpow__(self, base: Any) -> Any:
        """base ** self"""
        if self.is_integer():
            pair = _as_pair(base)
            if pair is not None:
                return BigRational(*pair).power(
                    self._numerator // self._denominator)
        if isinstance(base, numbers.Real):
            return float(base) ** float(self)
        if isinstance(base, numbers.Complex):
            return complex(base) ** float(self)
        return NotImplemented

    def __lshift__(self, shift: int) -> BigRational:
        """self << shift, i.e. self * 10 ** shift"""
        if not isinstance(shift, numbers.Integral):
            return NotImplemented
        return self.shift_decimal(shift)

    def __rshift__(self, shift: int) -> BigRational:
        """self >> shift, i.e. self / 10 ** shift"""
        if not isinstance(shift, numbers.Integral):
            return NotImplemented
        return self.shift_decimal(-operator.index(shift))

    def __pos__(self) -> BigRational:
        """+self"""
        return self

    def __neg__(self) -> BigRational:
        """-self"""
        return BigRational(-self._numerator, self._denominator)

    def __abs__(self) -> BigRational:
        """abs(self)"""
        if self._numerator >= 0:
            return self
        return BigRational(-self._numerator, self._denominator)

    def __invert__(self) -> BigRational:
        """~self, i.e. 1 / self"""
        return self.inverse()

    # rounding and decomposition

    def whole_part(self) -> int:
        """Return the integral part of `self` (truncated towards zero)."""
        num = self._numerator
        return _signed(abs(num) // self._denominator, num < 0)

    def fractional_part(self) -> BigRational:
        """Return `self` - `self.whole_part()`.

        The result has the sign of `self` and the same denominator.
        """
        num, den = self._numerator, self._denominator
        return BigRational(_signed(abs(num) % den, num < 0), den)

    def floor(self) -> BigRational:
        """Return the greatest integral BigRational <= `self`."""
        return BigRational(self._numerator // self._denominator)

    def ceil(self) -> BigRational:
        """Return the least integral BigRational >= `self`."""
        return BigRational(-(-self._numerator // self._denominator))

    def truncate(self) -> BigRational:
        """Return the integral part of `self` as BigRational."""
        return BigRational(self.whole_part())

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        return self.whole_part()

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def adjusted(self, precision: int = 0,
                 rounding: Optional[Rounding] = None) -> BigRational:
        """Return `self` rounded to `precision` fractional decimal digits.

        Args:
            precision (int): number of fractional digits; a negative
                value rounds to a multiple of 10 ** -precision
            rounding (Rounding): rounding mode (default: context default
                rounding mode)

        The result is in lowest terms.

        Raises:
            TypeError: `precision` is not an int or `rounding` is not a
                Rounding
        """
        if not isinstance(precision, int):
            raise TypeError(f"Precision must be an int, not {precision!r}.")
        rounding = self._rounding_mode(rounding)
        num, den = self._numerator, self._denominator
        if precision >= 0:
            scale = 10 ** precision
            quot, rem = divmod(abs(num) * scale, den)
            quot = round_quotient(quot, rem, den, num < 0, rounding)
            return BigRational(_signed(quot, num < 0), scale).reduced()
        scale = 10 ** -precision
        divisor = den * scale
        quot, rem = divmod(abs(num), divisor)
        quot = round_quotient(quot, rem, divisor, num < 0, rounding)
        return BigRational(_signed(quot, num < 0) * scale)

    def quantize(self, quant: RationalOperand,
                 rounding: Optional[Rounding] = None) -> BigRational:
        """Return integral multiple of `quant` closest to `self`.

        Args:
            quant (BigRational, numbers.Rational or int): quantum to get
                a multiple from
            rounding (Rounding): rounding mode (default: context default
                rounding mode)

        The result is in lowest terms.

        Raises:
            TypeError: `quant` is not a rational number
            ValueError: `quant` is zero
        """
        q_num, q_den = _to_pair(quant)
        if q_num == 0:
            raise ValueError("Quantum must not be zero.")
        rounding = self._rounding_mode(rounding)
        num = self._numerator * q_den
        den = self._denominator * q_num
        if den < 0:
            num, den = -num, -den
        quot, rem = divmod(abs(num), den)
        quot = round_quotient(quot, rem, den, num < 0, rounding)
        return BigRational(_signed(quot, num < 0) * q_num, q_den).reduced()

    def __round__(self, ndigits: Optional[int] = None
                  ) -> Union[int, BigRational]:
        """round(self [, ndigits])

        Rounds according to the context default rounding mode. Returns an
        int if `ndigits` is None, otherwise a BigRational.
        """
        if ndigits is None:
            num, den = self._numerator, self._denominator
            quot, rem = divmod(abs(num), den)
            quot = round_quotient(quot, rem, den, num < 0,
                                  get_dflt_rounding_mode())
            return _signed(quot, num < 0)
        return self.adjusted(ndigits)

    @staticmethod
    def _rounding_mode(rounding: Optional[Rounding]) -> Rounding:
        if rounding is None:
            return get_dflt_rounding_mode()
        if not isinstance(rounding, Rounding):
            raise TypeError(f"Illegal rounding mode: {rounding!r}")
        return rounding

    # float approximations

    def sqrt(self) -> BigRational:
        """Return an approximation of the square root of `self`.

        The result is computed in float arithmetic.

        Raises:
            ValueError: `self` is negative
        """
        num, den = self._numerator, self._denominator
        if num < 0:
            raise ValueError("Square root of negative number.")
        if num == 0:
            return BigRational()
        try:
            flt = float(self)
        except OverflowError:
            flt = 0.0
        if flt >= sys.float_info.min:
            return BigRational.from_float(math.sqrt(flt))
        # outside the range of normal floats
        return BigRational.from_float(
            10 ** ((math.log10(num) - math.log10(den)) / 2))

    def log10(self) -> float:
        """Return an approximation of the base 10 logarithm of `self`.

        Raises:
            ValueError: `self` is not positive
        """
        return self.log(10)

    def log(self, base: float = math.e) -> float:
        """Return an approximation of the logarithm of `self` to `base`.

        Raises:
            ValueError: `self` is not positive
        """
        num, den = self._numerator, self._denominator
        if num <= 0:
            raise ValueError("Logarithm of non-positive number.")
        return math.log(num, base) - math.log(den, base)

    # comparison

    def compare(self, other: RationalOperand) -> int:
        """Return -1, 0 or 1 as `self` is less than, equal to or greater
        than `other`."""
        o_num, o_den = _to_pair(other)
        lhs = self._numerator * o_den
        rhs = o_num * self._denominator
        return (lhs > rhs) - (lhs < rhs)

    def __hash__(self) -> int:
        """hash(self)

        Computed from the reduced pair, following the rules for numeric
        hashes, so that equal numbers hash equal, regardless of their
        representation and type.
        """
        num, den = self.as_integer_ratio()
        try:
            dinv = pow(den, -1, _PyHASH_MODULUS)
        except ValueError:
            # no modular inverse
            hash_ = _PyHASH_INF
        else:
            hash_ = hash(hash(abs(num)) * dinv)
        result = hash_ if num >= 0 else -hash_
        return -2 if result == -1 else result

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        pair = _as_pair(other)
        if pair is not None:
            o_num, o_den = pair
            return self._numerator * o_den == o_num * self._denominator
        if isinstance(other, numbers.Complex) and other.imag == 0:
            other = other.real
        if isinstance(other, float):
            if math.isnan(other) or math.isinf(other):
                return False
            return self == BigRational(*other.as_integer_ratio())
        return NotImplemented

    def _richcmp(self, other: Any, op) -> bool:
        pair = _as_pair(other)
        if pair is not None:
            o_num, o_den = pair
            return op(self._numerator * o_den, o_num * self._denominator)
        if isinstance(other, float):
            if math.isnan(other) or math.isinf(other):
                return op(0.0, other)
            return op(self, BigRational(*other.as_integer_ratio()))
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._richcmp(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._richcmp(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._richcmp(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._richcmp(other, operator.ge)

    # support for pickling, copy, and deepcopy

    def __reduce__(self):
        return self.__class__, (self._numerator, self._denominator)

    def __copy__(self) -> BigRational:
        return self

    def __deepcopy__(self, memo: Any) -> BigRational:
        return self


ZERO = BigRational(0)
ONE = BigRational(1)
NEGATIVE_ONE = BigRational(-1)
ONE_HALF = BigRational(1, 2)
E = BigRational.parse(
    "2.7182818284590452353602874713526624977572", INVARIANT)
PI = BigRational.parse(
    "3.1415926535897932384626433832795028841971", INVARIANT)
TAU = BigRational.parse(
    "6.2831853071795864769252867665590057683943", INVARIANT)
