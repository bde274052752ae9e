"""
Persistence codec.

Maps a quantity to the ``(amount, unit_id, kind)`` triple a storage
layer keeps in columns, and back. The stored unit is the quantity's
current unit, so "4.7 cm" reloads as "4.7 cm" and not as "0.047 m".
Reloaded values start a new life: unit and origin unit are both the
stored unit.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.errors import UnknownKindError, UnknownUnitError
from ...domain.numeric import Amount, validate_amount
from ...domain.quantity import Quantity, quantity_class_for
from ...domain.units.registry import UnitRegistry, default_registry

logger = structlog.get_logger(__name__)


class StoredQuantity(BaseModel):
    """
    Storable form of a quantity.

    Example:
        >>> record = to_storage(centimeters(Decimal("4.7")))
        >>> record.as_tuple()
        (Decimal('4.7'), 'Centimeters', 'Length')
    """

    model_config = ConfigDict(frozen=True)

    amount: Any = Field(..., description="int, float or Decimal amount")
    unit_id: str = Field(..., min_length=1, description="Unit identifier")
    kind: str = Field(..., min_length=1, description="Quantity kind name")

    @field_validator("amount")
    @classmethod
    def finite_number(cls, v: Any) -> Amount:
        """Keep the amount exactly as given, if it is a finite number."""
        return validate_amount(v)

    def as_tuple(self) -> Tuple[Amount, str, str]:
        """The ``(amount, unit_id, kind)`` triple."""
        return (self.amount, self.unit_id, self.kind)


def to_storage(quantity: Quantity) -> StoredQuantity:
    """Storable triple of ``quantity`` in its current unit."""
    return StoredQuantity(
        amount=quantity.amount,
        unit_id=quantity.unit.id,
        kind=quantity.kind.value,
    )


def from_storage(
    amount: Amount,
    unit_id: str,
    kind: str,
    registry: Optional[UnitRegistry] = None,
) -> Quantity:
    """Rebuild a quantity from its stored triple.

    Args:
        amount: Stored amount, kept in its representation
        unit_id: Stored unit identifier
        kind: Stored kind name
        registry: Unit registry (default: shared registry)

    Returns:
        Quantity: Kind-tagged value with ``unit == origin_unit``

    Raises:
        UnknownKindError: If the kind is no longer registered
        UnknownUnitError: If the unit id is no longer registered
        InvalidAmountError: If amount is not a finite number
    """
    registry = registry or default_registry()
    try:
        unit = registry.lookup(kind, unit_id)
    except (UnknownKindError, UnknownUnitError) as exc:
        logger.warning(
            "Stored quantity references unknown unit",
            kind=kind,
            unit_id=unit_id,
            error=str(exc),
        )
        raise
    return quantity_class_for(unit.kind)(validate_amount(amount), unit)


def from_record(record: StoredQuantity, registry: Optional[UnitRegistry] = None) -> Quantity:
    """Rebuild a quantity from a StoredQuantity."""
    return from_storage(record.amount, record.unit_id, record.kind, registry)
