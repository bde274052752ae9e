"""Parse rendered quantities back into values.

Inverse of the formatter for symbols, unit ids and English full names.
Group separators are optional; the amount comes back as an exact
Decimal.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..domain.errors import QuantityParseError
from ..domain.quantity import Quantity, quantity_class_for
from ..domain.units.kind import QuantityKind
from ..domain.units.registry import UnitRegistry, default_registry
from .cultures import CultureInfo, get_culture
from .settings import default_settings


def _amount_pattern(culture: CultureInfo) -> re.Pattern:
    group = re.escape(culture.group_separator)
    decimal = re.escape(culture.decimal_separator)
    sign = re.escape(culture.negative_sign)
    return re.compile(
        rf"^\s*(?P<sign>{sign}|\+)?"
        rf"(?P<integer>\d(?:\d|{group}(?=\d))*)"
        rf"(?:{decimal}(?P<fraction>\d+))?"
        r"(?:[eE](?P<exponent>[+-]?\d+))?"
        r"\s+(?P<unit>\S.*?)\s*$"
    )


def parse_quantity(
    text: str,
    kind: Optional[Union[QuantityKind, str]] = None,
    culture: Optional[str] = None,
    registry: Optional[UnitRegistry] = None,
) -> Quantity:
    """Parse ``"<amount> <unit>"`` text.

    Args:
        text: e.g. "46.50 g", "1.234,5 km" (de-DE)
        kind: Restrict unit lookup to one kind
        culture: Culture of the number (default: current settings)
        registry: Unit registry (default: shared registry)

    Returns:
        Quantity: Kind-tagged quantity with a Decimal amount

    Raises:
        QuantityParseError: If the text is not "<number> <unit>"
        UnknownUnitError: If the unit token is unknown or ambiguous

    Example:
        >>> parse_quantity("46.50 g")
        Mass(Decimal('46.50'), 'Grams')
    """
    info = get_culture(default_settings.culture if culture is None else culture)
    match = _amount_pattern(info).match(text) if isinstance(text, str) else None
    if match is None:
        raise QuantityParseError(f"Cannot parse quantity from {text!r}")

    digits = match.group("integer").replace(info.group_separator, "")
    number = digits
    if match.group("fraction"):
        number += "." + match.group("fraction")
    if match.group("exponent"):
        number += "E" + match.group("exponent")
    if match.group("sign") == info.negative_sign:
        number = "-" + number
    try:
        amount = Decimal(number)
    except InvalidOperation as exc:
        raise QuantityParseError(f"Invalid amount in {text!r}") from exc

    unit = (registry or default_registry()).find(match.group("unit"), kind=kind)
    return quantity_class_for(unit.kind)(amount, unit)
