"""Document mapping for quantities.

Document stores rarely keep Decimal exactly, so the amount is written
as text next to a tag naming its representation.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional

import structlog

from ...domain.errors import StorageFormatError
from ...domain.quantity import Quantity
from ...domain.units.registry import UnitRegistry
from .codec import from_storage, to_storage

logger = structlog.get_logger(__name__)

_PARSERS: Dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "decimal": Decimal,
}


def _amount_type(amount: Any) -> str:
    if isinstance(amount, int):
        return "int"
    if isinstance(amount, float):
        return "float"
    return "decimal"


def to_document(quantity: Quantity) -> Dict[str, Any]:
    """Convert a quantity to a storage document.

    Args:
        quantity: Value to store

    Returns:
        dict: Document with amount text, amount type, unit id and kind

    Example:
        >>> to_document(grams(Decimal("46.5")))
        {'amount': '46.5', 'amount_type': 'decimal', 'unit': 'Grams', 'kind': 'Mass'}
    """
    record = to_storage(quantity)
    return {
        "amount": repr(record.amount) if isinstance(record.amount, float) else str(record.amount),
        "amount_type": _amount_type(record.amount),
        "unit": record.unit_id,
        "kind": record.kind,
    }


def from_document(
    doc: Dict[str, Any], registry: Optional[UnitRegistry] = None
) -> Quantity:
    """Convert a storage document back to a quantity.

    Raises:
        StorageFormatError: If fields are missing or the amount is malformed
        UnknownKindError: If the kind is no longer registered
        UnknownUnitError: If the unit id is no longer registered
    """
    try:
        text, amount_type = doc["amount"], doc.get("amount_type", "decimal")
        unit_id, kind = doc["unit"], doc["kind"]
    except (KeyError, TypeError) as exc:
        raise StorageFormatError(f"Quantity document is missing {exc}") from exc

    parser = _PARSERS.get(amount_type)
    if parser is None:
        raise StorageFormatError(f"Unknown amount type: {amount_type!r}")
    try:
        amount = parser(str(text))
    except (ValueError, InvalidOperation) as exc:
        logger.warning("Malformed stored amount", amount=text, amount_type=amount_type)
        raise StorageFormatError(f"Invalid {amount_type} amount: {text!r}") from exc

    return from_storage(amount, unit_id, kind, registry)
