"""Quantity domain: units, conversion, values and arithmetic rules.

Everything here is immutable and free of I/O.
"""

from .arithmetic import (
    DerivationRules,
    Operator,
    add,
    derivations,
    divide,
    divide_quantities,
    multiply_quantities,
    scale,
    standard_derivations,
    subtract,
    sum_quantities,
)
from .conversion import convert, from_base, to_base
from .quantity import (
    Area,
    Duration,
    Energy,
    Length,
    Mass,
    Quantity,
    Speed,
    Temperature,
    Volume,
    quantity_class_for,
    with_unit,
)

__all__ = [
    "Area",
    "DerivationRules",
    "Duration",
    "Energy",
    "Length",
    "Mass",
    "Operator",
    "Quantity",
    "Speed",
    "Temperature",
    "Volume",
    "add",
    "convert",
    "derivations",
    "divide",
    "divide_quantities",
    "from_base",
    "multiply_quantities",
    "quantity_class_for",
    "scale",
    "standard_derivations",
    "subtract",
    "sum_quantities",
    "to_base",
    "with_unit",
]
