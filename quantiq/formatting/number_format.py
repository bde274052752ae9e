"""
Number format patterns.

Patterns are a letter plus an optional precision (0-20):

- ``N``: fixed point with group separators, default 2 decimals
- ``F``: fixed point without grouping, default 2 decimals
- ``G``: general, shortest form or ``p`` significant digits
- ``E``: scientific, default 6 decimals

Rounding is half-to-even on the decimal form of the amount. Floats use
their shortest repr, so 46.5 renders as "46.50" and never as
"46.499999...".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional

from ..domain.errors import InvalidFormatError
from ..domain.numeric import Amount
from .cultures import CultureInfo

_PATTERN = re.compile(r"^([NnFfGgEe])(\d{1,2})?$")
_DEFAULT_PRECISION = {"N": 2, "F": 2, "G": None, "E": 6}
MAX_PRECISION = 20


@dataclass(frozen=True)
class NumberFormat:
    """Parsed number pattern.

    Attributes:
        style: One of "N", "F", "G", "E"
        precision: Digits after the point ("N", "F", "E") or significant
            digits ("G"); None means shortest for "G"
    """

    style: str
    precision: Optional[int]

    @classmethod
    def parse(cls, pattern: str) -> "NumberFormat":
        """Parse a pattern such as "n2".

        Raises:
            InvalidFormatError: If the pattern is malformed or the
                precision exceeds 20
        """
        match = _PATTERN.match(pattern.strip()) if isinstance(pattern, str) else None
        if match is None:
            raise InvalidFormatError(f"Invalid number format: {pattern!r}")

        style = match.group(1).upper()
        digits = match.group(2)
        precision = _DEFAULT_PRECISION[style] if digits is None else int(digits)
        if precision is not None and precision > MAX_PRECISION:
            raise InvalidFormatError(
                f"Precision must be at most {MAX_PRECISION}, got {precision}"
            )
        if style == "G" and precision == 0:
            precision = None
        return cls(style=style, precision=precision)

    def render(self, amount: Amount, culture: CultureInfo) -> str:
        """Render ``amount`` with this pattern in ``culture``."""
        value = as_decimal(amount)
        if self.style == "E":
            return _scientific(value, self.precision or 0, culture)
        if self.style == "G":
            return _general(value, self.precision, culture)
        return _fixed(value, self.precision or 0, culture, grouped=self.style == "N")


def as_decimal(amount: Amount) -> Decimal:
    """Decimal form of an amount; floats through their shortest repr."""
    if isinstance(amount, float):
        return Decimal(repr(amount))
    return Decimal(amount)


def _round(value: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2, 1)
        ctx.rounding = ROUND_HALF_EVEN
        return value.quantize(Decimal(1).scaleb(-places))


def _group(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    parts = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(parts)


def _assemble(negative: bool, integer: str, fraction: str, culture: CultureInfo) -> str:
    text = integer if not fraction else f"{integer}{culture.decimal_separator}{fraction}"
    # No "-0.00": a value rounding to zero loses its sign.
    if negative and any(ch not in "0" for ch in integer + fraction):
        return culture.negative_sign + text
    return text


def _fixed(value: Decimal, places: int, culture: CultureInfo, grouped: bool) -> str:
    rounded = _round(abs(value), places)
    integer, _, fraction = f"{rounded:f}".partition(".")
    if grouped:
        integer = _group(integer, culture.group_separator)
    return _assemble(value.is_signed(), integer, fraction, culture)


def _general(value: Decimal, significant: Optional[int], culture: CultureInfo) -> str:
    magnitude = abs(value)
    if significant is not None and magnitude != 0:
        magnitude = _round(magnitude, significant - magnitude.adjusted() - 1)
    text = f"{magnitude:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    integer, _, fraction = text.partition(".")
    return _assemble(value.is_signed(), integer, fraction, culture)


def _scientific(value: Decimal, places: int, culture: CultureInfo) -> str:
    if value == 0:
        # Decimal formats zero with a shifted exponent ("0.00E+2").
        text = f"0.{'0' * places}E+0" if places else "0E+0"
    else:
        with localcontext() as ctx:
            ctx.rounding = ROUND_HALF_EVEN
            text = format(abs(value), f".{places}E")
    mantissa, _, exponent = text.partition("E")
    integer, _, fraction = mantissa.partition(".")
    body = _assemble(value.is_signed(), integer, fraction, culture)
    sign = "-" if exponent.startswith("-") else "+"
    return f"{body}E{sign}{exponent.lstrip('+-').zfill(3)}"
