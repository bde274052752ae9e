"""Conversion engine.

Pure functions moving an amount between two units of one kind through
the kind's canonical unit. Arithmetic is exact; rounding happens once
when the result is realized (see ``numeric``).
"""

from fractions import Fraction

from .errors import IncompatibleUnitsError
from .numeric import Amount, realize, to_exact, validate_amount
from .units.unit_definition import UnitDefinition


def ensure_compatible(from_unit: UnitDefinition, to_unit: UnitDefinition) -> None:
    """Raise IncompatibleUnitsError unless both units share a kind."""
    if from_unit.kind != to_unit.kind:
        raise IncompatibleUnitsError(
            f"Cannot convert {from_unit.kind.value} unit {from_unit.id} "
            f"to {to_unit.kind.value} unit {to_unit.id}"
        )


def to_base(amount: Amount, unit: UnitDefinition) -> Fraction:
    """Exact amount in the canonical unit of ``unit.kind``."""
    return to_exact(amount) * unit.to_base_factor + unit.base_offset


def from_base(base: Fraction, unit: UnitDefinition, like: Amount) -> Amount:
    """Express an exact base amount in ``unit``, shaped like ``like``."""
    return realize((base - unit.base_offset) / unit.to_base_factor, like)


def convert_exact(amount: Amount, from_unit: UnitDefinition, to_unit: UnitDefinition) -> Fraction:
    """Exact converted value, without realizing a representation."""
    ensure_compatible(from_unit, to_unit)
    if from_unit == to_unit:
        return to_exact(amount)
    return (to_base(amount, from_unit) - to_unit.base_offset) / to_unit.to_base_factor


def convert(amount: Amount, from_unit: UnitDefinition, to_unit: UnitDefinition) -> Amount:
    """Convert an amount between two units of the same kind.

    Args:
        amount: int, float or Decimal
        from_unit: Unit the amount is expressed in
        to_unit: Target unit

    Returns:
        Amount: Same representation as ``amount`` (an int result that is
        not integral becomes a Decimal). Converting to the same unit
        returns ``amount`` itself.

    Raises:
        IncompatibleUnitsError: If the units belong to different kinds
        InvalidAmountError: If amount is not a finite number

    Example:
        >>> convert(24, LengthUnits.INCHES, LengthUnits.FEET)
        2
        >>> convert(Decimal("4.7"), LengthUnits.CENTIMETERS, LengthUnits.METERS)
        Decimal('0.047')
    """
    validate_amount(amount)
    ensure_compatible(from_unit, to_unit)
    if from_unit == to_unit:
        return amount
    return realize(convert_exact(amount, from_unit, to_unit), amount)
