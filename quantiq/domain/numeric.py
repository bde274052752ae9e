"""Numeric representation rules.

Amounts are ``int``, ``float`` or ``Decimal``. Arithmetic runs exactly in
``Fraction`` and the result is realized once, at the end, in a concrete
representation:

- ``float``: correctly rounded ``float(Fraction)``
- ``Decimal``: 28 significant digits or the digits of the widest Decimal
  operand, whichever is more, round-half-to-even
- ``int``: kept when the exact result is integral, promoted to ``Decimal``
  otherwise so nothing is truncated
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from fractions import Fraction
from typing import Any, Optional, Union

from .errors import InvalidAmountError

Amount = Union[int, float, Decimal]

DECIMAL_PRECISION = 28
ROUNDING = ROUND_HALF_EVEN

# Tolerances used when a float takes part in a comparison.
FLOAT_REL_TOL = 1e-9
FLOAT_ABS_TOL = 1e-12
_REL_TOL = Fraction(FLOAT_REL_TOL)
_ABS_TOL = Fraction(FLOAT_ABS_TOL)


def is_number(value: Any) -> bool:
    """Check if value is a supported amount type (bools excluded)."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def validate_amount(value: Any) -> Amount:
    """Return value unchanged if it is a finite supported number.

    Raises:
        InvalidAmountError: If value is a bool, not a number, NaN or infinite.
    """
    if not is_number(value):
        raise InvalidAmountError(
            f"Amount must be int, float or Decimal, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidAmountError(f"Amount must be finite, got {value}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value}")
    return value


def to_exact(value: Union[Amount, Fraction]) -> Fraction:
    """Exact rational value of an amount."""
    return Fraction(value)


def decimal_precision(*amounts: Amount) -> int:
    """Digits covering every Decimal operand, never fewer than 28."""
    digits = [
        len(amount.as_tuple().digits) for amount in amounts if isinstance(amount, Decimal)
    ]
    return max([DECIMAL_PRECISION, *digits])


def realize(exact: Fraction, like: Amount, precision: Optional[int] = None) -> Amount:
    """Express an exact result in the representation of ``like``.

    Args:
        exact: Exact result
        like: Amount whose representation the result takes
        precision: Decimal digits kept (default: enough for ``like``)

    Returns:
        Amount: float, Decimal, or int (Decimal when not integral)

    Raises:
        InvalidAmountError: If a float result is beyond the float range

    Example:
        >>> realize(Fraction(93, 2), 23)
        Decimal('46.5')
        >>> realize(Fraction(46), 23)
        46
    """
    if isinstance(like, float):
        try:
            return float(exact)
        except OverflowError:
            raise InvalidAmountError("Result is beyond the float range") from None
    if isinstance(like, int) and exact.denominator == 1:
        return int(exact.numerator)
    if precision is None:
        precision = decimal_precision(like)
    return to_decimal(exact, precision)


def to_decimal(exact: Fraction, precision: int = DECIMAL_PRECISION) -> Decimal:
    """Round an exact value to a Decimal (half-to-even)."""
    with localcontext() as ctx:
        ctx.prec = precision
        ctx.rounding = ROUNDING
        return Decimal(exact.numerator) / Decimal(exact.denominator)


def result_template(left: Amount, right: Amount) -> Amount:
    """Pick the representation of a binary result.

    The left operand wins, except that an int left operand adopts the
    representation of the right one.
    """
    if isinstance(left, int) and not isinstance(right, int):
        return right
    return left


def scalar_to_exact(scalar: Amount, amount: Amount) -> Fraction:
    """Exact value of a scalar applied to ``amount``.

    A float scalar meeting a Decimal amount goes through its shortest repr,
    so ``Decimal("1.1") * 0.1`` behaves like ``Decimal("1.1") * Decimal("0.1")``.
    """
    if isinstance(scalar, float) and isinstance(amount, Decimal):
        return Fraction(Decimal(repr(scalar)))
    return Fraction(scalar)


def exact_equal(left: Fraction, right: Fraction, approximate: bool) -> bool:
    """Compare two exact magnitudes, with float tolerance when asked.

    The tolerant test is ``math.isclose`` evaluated on the exact values, so
    magnitudes beyond the float range still compare.
    """
    if approximate:
        tolerance = max(_REL_TOL * max(abs(left), abs(right)), _ABS_TOL)
        return abs(left - right) <= tolerance
    return left == right


def compare(left: Fraction, right: Fraction, approximate: bool) -> int:
    """Three-way compare: -1, 0 or 1."""
    if exact_equal(left, right, approximate):
        return 0
    return -1 if left < right else 1
