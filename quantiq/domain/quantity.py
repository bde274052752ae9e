"""Quantity value object.

Immutable amount + unit pair that remembers the unit it was created in.
Kind-tagged subclasses (Length, Mass, ...) only restrict the legal units;
every operation is shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar, Dict, Optional, Type, Union

from .conversion import convert, ensure_compatible, to_base
from .errors import IncompatibleUnitsError
from .numeric import Amount, compare, exact_equal, validate_amount
from .units.kind import QuantityKind
from .units.registry import default_registry
from .units.unit_definition import UnitDefinition

UnitLike = Union[UnitDefinition, str]

_KIND_CLASSES: Dict[QuantityKind, Type["Quantity"]] = {}


@dataclass(frozen=True, eq=False)
class Quantity:
    """Value object for an amount in a unit.

    Attributes:
        amount: int, float or Decimal, kept in the representation given
        unit: Current unit
        origin_unit: Unit the value was first created in. Defaults to
            ``unit`` and is carried unchanged through conversions.

    Equality and ordering compare physical magnitudes in the canonical
    unit: ``Length(1, "Meters") == Length(100, "Centimeters")``. The
    origin unit plays no part in equality.

    Examples:
        >>> q = Length(4.7, "Centimeters")
        >>> q.with_unit("Meters").amount
        0.047
        >>> q.with_unit("Meters").origin_unit.id
        'Centimeters'

    Raises:
        InvalidAmountError: If amount is not a finite number.
        IncompatibleUnitsError: If the unit does not fit the class kind.
    """

    amount: Amount
    unit: UnitDefinition
    origin_unit: Optional[UnitDefinition] = None

    KIND: ClassVar[Optional[QuantityKind]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.KIND is not None and cls.KIND not in _KIND_CLASSES:
            _KIND_CLASSES[cls.KIND] = cls

    def __post_init__(self) -> None:
        """Validate invariants and resolve unit ids."""
        validate_amount(self.amount)
        unit = self._resolve(self.unit)
        origin = unit if self.origin_unit is None else self._resolve(self.origin_unit)

        if self.KIND is not None and unit.kind != self.KIND:
            raise IncompatibleUnitsError(
                f"{type(self).__name__} requires a {self.KIND.value} unit, "
                f"got {unit.kind.value} unit {unit.id}"
            )
        ensure_compatible(origin, unit)

        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "origin_unit", origin)

    def _resolve(self, unit: UnitLike) -> UnitDefinition:
        if isinstance(unit, UnitDefinition):
            return unit
        if isinstance(unit, str):
            return default_registry().find(unit, kind=self.KIND)
        raise TypeError(f"Unit must be a UnitDefinition or str, got {type(unit).__name__}")

    @property
    def kind(self) -> QuantityKind:
        """Quantity kind of the unit."""
        return self.unit.kind

    @property
    def base_magnitude(self) -> Fraction:
        """Exact amount expressed in the canonical unit."""
        return to_base(self.amount, self.unit)

    def _target(self, unit: UnitLike) -> UnitDefinition:
        if isinstance(unit, str):
            return default_registry().find(unit, kind=self.kind)
        return unit

    def with_unit(self, unit: UnitLike) -> "Quantity":
        """Convert to another unit of the same kind.

        Args:
            unit: Target unit or its id/symbol

        Returns:
            Quantity: New value in ``unit`` with the same origin unit

        Raises:
            IncompatibleUnitsError: If ``unit`` belongs to another kind
            InvalidAmountError: If a float result is beyond the float range
        """
        target = self._target(unit)
        return type(self)(convert(self.amount, self.unit, target), target, self.origin_unit)

    to = with_unit

    def amount_in(self, unit: UnitLike) -> Amount:
        """Amount converted to ``unit``, without building a new quantity."""
        return convert(self.amount, self.unit, self._target(unit))

    def to_base(self) -> "Quantity":
        """Convert to the canonical unit of the kind."""
        return self.with_unit(default_registry().base_unit(self.kind))

    def is_zero(self) -> bool:
        """Check if the amount is zero."""
        return self.amount == 0

    def _approximate(self, other: "Quantity") -> bool:
        return isinstance(self.amount, float) or isinstance(other.amount, float)

    def _compare(self, other: "Quantity") -> int:
        if self.kind != other.kind:
            raise IncompatibleUnitsError(
                f"Cannot compare {self.kind.value} with {other.kind.value}"
            )
        return compare(self.base_magnitude, other.base_magnitude, self._approximate(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.kind != other.kind:
            return False
        return exact_equal(
            self.base_magnitude, other.base_magnitude, self._approximate(other)
        )

    def __hash__(self) -> int:
        # Float tolerance makes equal values hash apart on any finer key.
        return hash(self.kind)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._compare(other) >= 0

    def __add__(self, other: Any) -> "Quantity":
        from . import arithmetic

        return arithmetic.add(self, other)

    def __radd__(self, other: Any) -> "Quantity":
        from . import arithmetic

        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return arithmetic.add(self, other)

    def __sub__(self, other: Any) -> "Quantity":
        from . import arithmetic

        return arithmetic.subtract(self, other)

    def __rsub__(self, other: Any) -> "Quantity":
        from .errors import UnsupportedOperationError

        raise UnsupportedOperationError(
            f"Cannot subtract a {self.kind.value} quantity from {type(other).__name__}"
        )

    def __mul__(self, other: Any) -> "Quantity":
        from . import arithmetic

        if isinstance(other, Quantity):
            return arithmetic.multiply_quantities(self, other)
        return arithmetic.scale(self, other)

    def __rmul__(self, other: Any) -> "Quantity":
        from . import arithmetic

        return arithmetic.scale(self, other)

    def __truediv__(self, other: Any) -> "Quantity":
        from . import arithmetic

        if isinstance(other, Quantity):
            return arithmetic.divide_quantities(self, other)
        return arithmetic.divide(self, other)

    def __rtruediv__(self, other: Any) -> "Quantity":
        from .errors import UnsupportedOperationError

        raise UnsupportedOperationError(
            f"Cannot divide {type(other).__name__} by a {self.kind.value} quantity"
        )

    def __neg__(self) -> "Quantity":
        return type(self)(-self.amount, self.unit, self.origin_unit)

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return type(self)(abs(self.amount), self.unit, self.origin_unit)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        """Render with the process-wide default settings."""
        from ..formatting.formatter import format_quantity

        return format_quantity(self)

    def __format__(self, format_spec: str) -> str:
        """Use the format spec as number pattern: ``f"{q:n1}"``."""
        from ..formatting.formatter import format_quantity

        if not format_spec:
            return format_quantity(self)
        return format_quantity(self, number_format=format_spec)

    def __repr__(self) -> str:
        """Developer representation."""
        text = f"{type(self).__name__}({self.amount!r}, {self.unit.id!r}"
        if self.origin_unit != self.unit:
            text += f", origin={self.origin_unit.id!r}"
        return text + ")"


class Length(Quantity):
    """Quantity restricted to length units."""

    KIND = QuantityKind.LENGTH


class Mass(Quantity):
    """Quantity restricted to mass units."""

    KIND = QuantityKind.MASS


class Area(Quantity):
    KIND = QuantityKind.AREA


class Volume(Quantity):
    KIND = QuantityKind.VOLUME


class Duration(Quantity):
    """Quantity restricted to time units."""

    KIND = QuantityKind.TIME


class Speed(Quantity):
    KIND = QuantityKind.SPEED


class Temperature(Quantity):
    """Quantity restricted to temperature units.

    Conversion is affine, addition is not: adding two temperatures adds
    the amounts after converting the right one into the left unit.
    """

    KIND = QuantityKind.TEMPERATURE


class Energy(Quantity):
    KIND = QuantityKind.ENERGY


def quantity_class_for(kind: QuantityKind) -> Type[Quantity]:
    """Kind-tagged class for ``kind``, or Quantity when none exists."""
    return _KIND_CLASSES.get(kind, Quantity)


def with_unit(quantity: Quantity, unit: UnitLike) -> Quantity:
    """Functional form of ``Quantity.with_unit``."""
    return quantity.with_unit(unit)
