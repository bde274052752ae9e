"""Arithmetic and comparison rules for quantities.

- add/subtract: right operand converted to the left unit; the result
  keeps the left unit and the left origin unit
- scale/divide by a scalar: amount only
- quantity x quantity: only through an explicitly registered
  derivation rule, result in the canonical unit of the derived kind
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Any, Dict, Iterable, Optional, Tuple

import structlog

from .conversion import convert_exact, to_base
from .errors import (
    DivisionByZeroError,
    IncompatibleUnitsError,
    UnsupportedOperationError,
)
from .numeric import (
    decimal_precision,
    is_number,
    realize,
    result_template,
    scalar_to_exact,
    to_exact,
    validate_amount,
)
from .quantity import Quantity, quantity_class_for
from .units.kind import QuantityKind
from .units.registry import UnitRegistry, default_registry

logger = structlog.get_logger(__name__)


class Operator(str, Enum):
    """Binary operator of a derivation rule."""

    MULTIPLY = "*"
    DIVIDE = "/"


class DerivationRules:
    """Table of kind-derivation rules for quantity x quantity operations.

    Example:
        >>> rules = DerivationRules()
        >>> rules.register(QuantityKind.LENGTH, "*", QuantityKind.LENGTH, QuantityKind.AREA)
        >>> rules.result_kind(QuantityKind.LENGTH, Operator.MULTIPLY, QuantityKind.LENGTH)
        <QuantityKind.AREA: 'Area'>
    """

    def __init__(self) -> None:
        self._rules: Dict[Tuple[QuantityKind, Operator, QuantityKind], QuantityKind] = {}

    def register(
        self,
        left: QuantityKind,
        operator: Any,
        right: QuantityKind,
        result: QuantityKind,
    ) -> None:
        """Allow ``left <operator> right`` and give it kind ``result``.

        Multiplication rules are registered in both operand orders.
        Canonical units must be coherent (SI bases make m * m = m²).
        """
        op = Operator(operator)
        left, right, result = (QuantityKind.parse(k) for k in (left, right, result))
        self._rules[(left, op, right)] = result
        if op is Operator.MULTIPLY:
            self._rules[(right, op, left)] = result
        logger.debug(
            "Derivation registered",
            left=left.value,
            operator=op.value,
            right=right.value,
            result=result.value,
        )

    def result_kind(
        self, left: QuantityKind, operator: Operator, right: QuantityKind
    ) -> Optional[QuantityKind]:
        """Derived kind, or None when no rule exists."""
        return self._rules.get((left, operator, right))

    def clear(self) -> None:
        """Remove every rule."""
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)


def standard_derivations() -> DerivationRules:
    """Rules for the SI-coherent built-in kinds (not active by default)."""
    rules = DerivationRules()
    rules.register(QuantityKind.LENGTH, Operator.MULTIPLY, QuantityKind.LENGTH, QuantityKind.AREA)
    rules.register(QuantityKind.AREA, Operator.MULTIPLY, QuantityKind.LENGTH, QuantityKind.VOLUME)
    rules.register(QuantityKind.SPEED, Operator.MULTIPLY, QuantityKind.TIME, QuantityKind.LENGTH)
    rules.register(QuantityKind.LENGTH, Operator.DIVIDE, QuantityKind.TIME, QuantityKind.SPEED)
    rules.register(QuantityKind.AREA, Operator.DIVIDE, QuantityKind.LENGTH, QuantityKind.LENGTH)
    rules.register(QuantityKind.VOLUME, Operator.DIVIDE, QuantityKind.LENGTH, QuantityKind.AREA)
    return rules


# Process-wide rules consulted by the * and / operators. Empty by default.
derivations = DerivationRules()


def _require_quantity(value: Any, action: str) -> Quantity:
    if not isinstance(value, Quantity):
        raise UnsupportedOperationError(
            f"Cannot {action} {type(value).__name__} and a quantity; "
            "wrap the number in a unit first"
        )
    return value


def _require_same_kind(left: Quantity, right: Quantity, action: str) -> None:
    if left.kind != right.kind:
        raise IncompatibleUnitsError(
            f"Cannot {action} {right.kind.value} and {left.kind.value}"
        )


def _require_scalar(value: Any) -> None:
    if not is_number(value):
        raise UnsupportedOperationError(
            f"Scalar must be int, float or Decimal, got {type(value).__name__}"
        )
    validate_amount(value)


def _operand_exact(amount: Any, template: Any) -> Fraction:
    # A float meeting a Decimal result enters through its shortest repr.
    return scalar_to_exact(amount, template)


def add(left: Quantity, right: Quantity) -> Quantity:
    """Sum of two quantities of one kind, in the left operand's unit.

    Raises:
        IncompatibleUnitsError: If kinds differ
        UnsupportedOperationError: If ``right`` is not a quantity

    Example:
        >>> add(inches(4), inches(20)).with_unit(LengthUnits.FEET).amount
        2
    """
    right = _require_quantity(right, "add")
    _require_same_kind(left, right, "add")
    template = result_template(left.amount, right.amount)
    exact = _operand_exact(left.amount, template) + convert_exact(
        _operand_exact(right.amount, template), right.unit, left.unit
    )
    amount = realize(exact, template, decimal_precision(left.amount, right.amount))
    return type(left)(amount, left.unit, left.origin_unit)


def subtract(left: Quantity, right: Quantity) -> Quantity:
    """Difference of two quantities of one kind, in the left operand's unit."""
    right = _require_quantity(right, "subtract")
    _require_same_kind(left, right, "subtract")
    template = result_template(left.amount, right.amount)
    exact = _operand_exact(left.amount, template) - convert_exact(
        _operand_exact(right.amount, template), right.unit, left.unit
    )
    amount = realize(exact, template, decimal_precision(left.amount, right.amount))
    return type(left)(amount, left.unit, left.origin_unit)


def scale(quantity: Quantity, factor: Any) -> Quantity:
    """Multiply the amount by a scalar; unit and origin unchanged.

    Raises:
        UnsupportedOperationError: If ``factor`` is not a number
        InvalidAmountError: If ``factor`` is NaN or infinite
    """
    _require_scalar(factor)
    exact = to_exact(quantity.amount) * scalar_to_exact(factor, quantity.amount)
    template = result_template(quantity.amount, factor)
    amount = realize(exact, template, decimal_precision(quantity.amount, factor))
    return type(quantity)(amount, quantity.unit, quantity.origin_unit)


def divide(quantity: Quantity, divisor: Any) -> Quantity:
    """Divide the amount by a scalar; unit and origin unchanged.

    Raises:
        DivisionByZeroError: If ``divisor`` is zero
        InvalidAmountError: If ``divisor`` is NaN or infinite
    """
    _require_scalar(divisor)
    if divisor == 0:
        raise DivisionByZeroError(f"Cannot divide {quantity!r} by zero")
    exact = to_exact(quantity.amount) / scalar_to_exact(divisor, quantity.amount)
    template = result_template(quantity.amount, divisor)
    amount = realize(exact, template, decimal_precision(quantity.amount, divisor))
    return type(quantity)(amount, quantity.unit, quantity.origin_unit)


def _derive(
    left: Quantity,
    operator: Operator,
    right: Quantity,
    rules: Optional[DerivationRules],
    registry: Optional[UnitRegistry],
) -> Quantity:
    rules = derivations if rules is None else rules
    result_kind = rules.result_kind(left.kind, operator, right.kind)
    if result_kind is None:
        raise UnsupportedOperationError(
            f"{left.kind.value} {operator.value} {right.kind.value} is not defined; "
            "register a derivation rule to allow it"
        )
    template = result_template(left.amount, right.amount)
    left_base = to_base(_operand_exact(left.amount, template), left.unit)
    right_base = to_base(_operand_exact(right.amount, template), right.unit)
    if operator is Operator.MULTIPLY:
        exact = left_base * right_base
    else:
        if right_base == 0:
            raise DivisionByZeroError(f"Cannot divide {left!r} by {right!r}")
        exact = left_base / right_base

    base = (registry or default_registry()).base_unit(result_kind)
    amount = realize(exact, template, decimal_precision(left.amount, right.amount))
    return quantity_class_for(result_kind)(amount, base)


def multiply_quantities(
    left: Quantity,
    right: Quantity,
    rules: Optional[DerivationRules] = None,
    registry: Optional[UnitRegistry] = None,
) -> Quantity:
    """Product of two quantities through a derivation rule.

    Raises:
        UnsupportedOperationError: If no rule covers the kinds
    """
    return _derive(left, Operator.MULTIPLY, right, rules, registry)


def divide_quantities(
    left: Quantity,
    right: Quantity,
    rules: Optional[DerivationRules] = None,
    registry: Optional[UnitRegistry] = None,
) -> Quantity:
    """Quotient of two quantities through a derivation rule.

    Raises:
        UnsupportedOperationError: If no rule covers the kinds
        DivisionByZeroError: If ``right`` is zero
    """
    return _derive(left, Operator.DIVIDE, right, rules, registry)


def sum_quantities(
    quantities: Iterable[Quantity], start: Optional[Quantity] = None
) -> Quantity:
    """Sum quantities in the unit of ``start`` (or of the first element).

    Raises:
        ValueError: If there is nothing to sum and no start value
    """
    total = start
    for quantity in quantities:
        total = quantity if total is None else add(total, quantity)
    if total is None:
        raise ValueError("sum_quantities() of an empty iterable needs a start value")
    return total
