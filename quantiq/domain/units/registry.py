"""
Unit registry.

Maps (kind, id) to unit definitions and knows the canonical unit of
each kind. The default registry is filled from the catalog at import
and is read-only afterwards in normal use. Later registrations must be
synchronized by the host.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple, Union

import structlog

from ..errors import (
    AmbiguousUnitError,
    DuplicateUnitError,
    UnknownKindError,
    UnknownUnitError,
)
from .catalog import CATALOG
from .kind import QuantityKind
from .unit_definition import UnitDefinition

logger = structlog.get_logger(__name__)

KindLike = Union[QuantityKind, str]


class UnitRegistry:
    """Registry of unit definitions per quantity kind.

    Example:
        >>> registry = UnitRegistry()
        >>> registry.register_kind(LengthUnits.METERS, LengthUnits.INCHES)
        >>> registry.lookup("Length", "Inches").symbol
        'in'
    """

    def __init__(self) -> None:
        self._units: Dict[QuantityKind, Dict[str, UnitDefinition]] = {}
        self._base: Dict[QuantityKind, UnitDefinition] = {}

    def register_kind(self, base: UnitDefinition, *units: UnitDefinition) -> None:
        """Register a kind with its canonical unit and optional extra units.

        Args:
            base: Canonical unit (factor 1, offset 0)
            *units: Other units of the same kind; ``base`` may repeat here

        Raises:
            ValueError: If ``base`` is not canonical
            DuplicateUnitError: If the kind is already registered
        """
        self._add_kind(base, units)
        logger.debug(
            "Kind registered",
            kind=base.kind.value,
            base_unit=base.id,
            units=len(self._units[base.kind]),
        )

    def register_unit(self, unit: UnitDefinition) -> None:
        """Add a unit to an already registered kind.

        Raises:
            UnknownKindError: If the unit's kind has no base unit yet
            DuplicateUnitError: If the id is taken within the kind
        """
        self._add_unit(unit)
        logger.debug("Unit registered", kind=unit.kind.value, unit=unit.id)

    def _add_kind(self, base: UnitDefinition, units: Tuple[UnitDefinition, ...]) -> None:
        if not base.is_canonical:
            raise ValueError(
                f"Base unit {base.id} must have factor 1 and offset 0"
            )
        if base.kind in self._base:
            raise DuplicateUnitError(f"Kind {base.kind.value} already registered")

        self._base[base.kind] = base
        self._units[base.kind] = {base.id: base}
        for unit in units:
            if unit != base:
                self._add_unit(unit)

    def _add_unit(self, unit: UnitDefinition) -> None:
        table = self._units.get(unit.kind)
        if table is None:
            raise UnknownKindError(
                f"Register kind {unit.kind.value} before adding {unit.id}"
            )
        if unit.id in table:
            raise DuplicateUnitError(
                f"{unit.kind.value} unit {unit.id!r} already registered"
            )
        table[unit.id] = unit

    def _table(self, kind: KindLike) -> Tuple[QuantityKind, Dict[str, UnitDefinition]]:
        resolved = QuantityKind.parse(kind)
        table = self._units.get(resolved)
        if table is None:
            raise UnknownKindError(f"No units registered for kind {resolved.value}")
        return resolved, table

    def lookup(self, kind: KindLike, unit_id: str) -> UnitDefinition:
        """Get the unit registered as ``unit_id`` for ``kind``.

        Raises:
            UnknownKindError: If the kind is unknown or empty
            UnknownUnitError: If the id is not registered for the kind
        """
        resolved, table = self._table(kind)
        try:
            return table[unit_id]
        except KeyError:
            raise UnknownUnitError(
                f"Unknown {resolved.value} unit: {unit_id!r}"
            ) from None

    def base_unit(self, kind: KindLike) -> UnitDefinition:
        """Get the canonical unit of ``kind``.

        Raises:
            UnknownKindError: If the kind is unknown or empty
        """
        resolved, _ = self._table(kind)
        return self._base[resolved]

    def units_of(self, kind: KindLike) -> List[UnitDefinition]:
        """All units of a kind, canonical first."""
        _, table = self._table(kind)
        return list(table.values())

    def kinds(self) -> List[QuantityKind]:
        """Registered kinds in registration order."""
        return list(self._units)

    def find(self, token: str, kind: Optional[KindLike] = None) -> UnitDefinition:
        """Resolve a display token to a unit.

        Symbols match case-sensitively ("mg" vs "Mg"); ids and full
        names match case-insensitively.

        Args:
            token: Symbol, id or full name
            kind: Restrict the search to one kind

        Raises:
            UnknownUnitError: If nothing matches
            AmbiguousUnitError: If units of several kinds match
        """
        wanted = token.strip()
        if kind is not None:
            candidates = [self._table(kind)[1]]
        else:
            candidates = list(self._units.values())

        by_symbol = [
            unit for table in candidates for unit in table.values() if unit.symbol == wanted
        ]
        matches = by_symbol or [
            unit
            for table in candidates
            for unit in table.values()
            if wanted.lower() in (unit.id.lower(), unit.full_name.lower())
        ]
        if not matches:
            raise UnknownUnitError(f"Unknown unit: {token!r}")
        if len({unit.kind for unit in matches}) > 1:
            kinds = ", ".join(sorted({unit.kind.value for unit in matches}))
            raise AmbiguousUnitError(f"{token!r} matches units of {kinds}")
        return matches[0]

    def __contains__(self, unit: object) -> bool:
        if not isinstance(unit, UnitDefinition):
            return False
        return self._units.get(unit.kind, {}).get(unit.id) == unit

    def __iter__(self) -> Iterator[UnitDefinition]:
        for table in self._units.values():
            yield from table.values()


def build_default_registry() -> UnitRegistry:
    """Create a registry holding every catalog unit."""
    registry = UnitRegistry()
    for base, units in CATALOG.values():
        registry._add_kind(base, units)
    return registry


_default_registry = build_default_registry()


def default_registry() -> UnitRegistry:
    """Shared registry used when no registry is passed explicitly."""
    return _default_registry
