#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Decimal arithmetic for the matrix operations.

All arithmetic goes through explicit ``decimal.Context`` objects. A context of
``None`` selects exact arithmetic: results are computed without rounding, and a
result that cannot be represented exactly raises instead of being approximated.
The thread-local default context of the ``decimal`` module is never used.
"""

from decimal import (Context, Decimal, DivisionByZero, Inexact, InvalidOperation, MAX_EMAX, MAX_PREC, MIN_EMIN,
                     Overflow, ROUND_HALF_EVEN)
from fractions import Fraction
from typing import Optional, Union
import numpy as np

# Type alias for values that can be converted to Decimal
Numeric = Union[Decimal, int, float, str, Fraction, np.number]

EXACT = Context(prec=MAX_PREC,
                rounding=ROUND_HALF_EVEN,
                Emax=MAX_EMAX,
                Emin=MIN_EMIN,
                traps=[Inexact, InvalidOperation, DivisionByZero, Overflow])

ZERO = Decimal(0)
ONE = Decimal(1)


class DecimalMath:
    """Utility class for decimal operations with an optional precision context."""

    ZERO = ZERO
    ONE = ONE

    @staticmethod
    def to_decimal(value: Numeric) -> Decimal:
        """
        Convert a numeric value to a Decimal.

        Floats are converted through their shortest repr, so ``0.1`` becomes
        ``Decimal('0.1')`` and not the binary expansion. Fractions must have a
        terminating decimal expansion.

        Args:
            value: A Decimal, int, float, str, Fraction or numpy scalar

        Returns:
            Decimal representation of the value
        """
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"Cannot convert {type(value)} to Decimal")
        if isinstance(value, (int, np.integer)):
            return Decimal(int(value))
        if isinstance(value, (float, np.floating)):
            return Decimal(repr(float(value)))
        if isinstance(value, str):
            return Decimal(value.strip())
        if isinstance(value, Fraction):
            return DecimalMath._fraction_to_decimal(value)
        raise TypeError(f"Cannot convert {type(value)} to Decimal")

    @staticmethod
    def _fraction_to_decimal(value: Fraction) -> Decimal:
        # Terminating only if the reduced denominator is 2**a * 5**b
        denominator = value.denominator
        twos = fives = 0
        while denominator % 2 == 0:
            denominator //= 2
            twos += 1
        while denominator % 5 == 0:
            denominator //= 5
            fives += 1
        if denominator != 1:
            raise ArithmeticError(f"{value} has no terminating decimal expansion")
        scale = max(twos, fives)
        coefficient = value.numerator * (10**scale // value.denominator)
        return Decimal(coefficient).scaleb(-scale, EXACT)

    @staticmethod
    def add(left: Decimal, right: Decimal, context: Optional[Context] = None) -> Decimal:
        return (context or EXACT).add(left, right)

    @staticmethod
    def subtract(left: Decimal, right: Decimal, context: Optional[Context] = None) -> Decimal:
        return (context or EXACT).subtract(left, right)

    @staticmethod
    def multiply(left: Decimal, right: Decimal, context: Optional[Context] = None) -> Decimal:
        return (context or EXACT).multiply(left, right)

    @staticmethod
    def pow(value: Decimal, exponent: int, context: Optional[Context] = None) -> Decimal:
        """
        Raise a value to a non-negative integer power.

        Without a context the power is computed exactly by repeated squaring.
        Any value (zero included) raised to the power 0 is 1.

        Args:
            value: Base
            exponent: Non-negative integer exponent
            context: Precision context, or None for exact arithmetic

        Returns:
            value ** exponent
        """
        if exponent < 0:
            raise ValueError(f"negative exponent: {exponent}")
        if exponent == 0:
            return ONE
        if context is not None:
            return context.power(value, exponent)

        result = ONE
        base = value
        while exponent:
            if exponent & 1:
                result = EXACT.multiply(result, base)
            exponent >>= 1
            if exponent:
                base = EXACT.multiply(base, base)
        return result

    @staticmethod
    def strip_trailing_zeros(value: Decimal) -> Decimal:
        """Remove trailing fractional zeros, e.g. 1.500 -> 1.5 and 0.000 -> 0."""
        if not value.is_finite():
            return value
        return value.normalize(EXACT)

    @staticmethod
    def round(value: Decimal, context: Optional[Context] = None) -> Decimal:
        """
        Round a value to the precision of the context and strip trailing zeros.

        With no context the value is only canonicalized.
        """
        if context is not None:
            value = context.plus(value)
        return DecimalMath.strip_trailing_zeros(value)

    @staticmethod
    def is_zero(value: Decimal) -> bool:
        return value.is_zero()

    @staticmethod
    def signum(value: Decimal) -> int:
        """
        Get the sign of a decimal.

        Returns:
            -1 if negative, 0 if zero, 1 if positive
        """
        if value.is_zero():
            return 0
        return -1 if value.is_signed() else 1
