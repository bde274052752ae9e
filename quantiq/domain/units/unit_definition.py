"""
UnitDefinition value object.

One row of the unit registry: how to display a unit and how to
bring one of it to the canonical unit of its kind.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .kind import QuantityKind

if TYPE_CHECKING:
    from ..numeric import Amount
    from ..quantity import Quantity


class UnitDefinition(BaseModel):
    """
    Unit of measurement within one quantity kind.

    Conversion to the canonical unit is affine:
    ``base = amount * to_base_factor + base_offset``.
    Factors are exact rationals so chained conversions never drift.

    Equality and hashing use ``(kind, id)`` only.

    Example:
        >>> inch = UnitDefinition(
        ...     kind=QuantityKind.LENGTH,
        ...     id="Inches",
        ...     symbol="in",
        ...     full_name="inches",
        ...     to_base_factor="0.0254",
        ... )
        >>> inch.to_base_factor
        Fraction(127, 5000)
        >>> inch(4)
        Length(4, 'Inches')
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: QuantityKind = Field(..., description="Quantity kind")
    id: str = Field(..., min_length=1, description="Stable identifier")
    symbol: str = Field(..., min_length=1, description="Display abbreviation")
    full_name: str = Field(..., min_length=1, description="Plural English name")
    to_base_factor: Fraction = Field(..., description="Base units per unit")
    base_offset: Fraction = Field(
        default=Fraction(0), description="Additive offset to the base unit"
    )

    @field_validator("to_base_factor", "base_offset", mode="before")
    @classmethod
    def exact_rational(cls, v: Any) -> Fraction:
        """Accept int, str ("1/12", "0.0254"), Decimal, float or Fraction."""
        if isinstance(v, bool):
            raise ValueError("Conversion factor cannot be a bool")
        if isinstance(v, Fraction):
            return v
        if isinstance(v, (int, Decimal)):
            return Fraction(v)
        if isinstance(v, float):
            return Fraction(repr(v))
        if isinstance(v, str):
            try:
                return Fraction(v.strip())
            except (ValueError, ZeroDivisionError) as exc:
                raise ValueError(f"Invalid rational: {v!r}") from exc
        raise ValueError(f"Invalid rational: {v!r}")

    @field_validator("to_base_factor")
    @classmethod
    def positive_factor(cls, v: Fraction) -> Fraction:
        """Factor must be strictly positive."""
        if v <= 0:
            raise ValueError(f"Conversion factor must be positive, got {v}")
        return v

    @property
    def is_canonical(self) -> bool:
        """True if this unit could be the base unit of its kind."""
        return self.to_base_factor == 1 and self.base_offset == 0

    def __call__(self, amount: Amount) -> Quantity:
        """Build a quantity of ``amount`` in this unit."""
        # Import here to avoid circular dependency
        from ..quantity import quantity_class_for

        return quantity_class_for(self.kind)(amount, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitDefinition):
            return NotImplemented
        return self.kind == other.kind and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"UnitDefinition({self.kind.value}.{self.id})"
