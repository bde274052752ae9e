"""quantiq - unit-aware quantity values.

Example:
    >>> from quantiq import grams, milligrams
    >>> total = grams(23) * 2 + milligrams(500)
    >>> str(total)
    '46.50 g'
"""

from .domain import (
    Area,
    DerivationRules,
    Duration,
    Energy,
    Length,
    Mass,
    Operator,
    Quantity,
    Speed,
    Temperature,
    Volume,
    add,
    convert,
    derivations,
    divide,
    divide_quantities,
    multiply_quantities,
    quantity_class_for,
    scale,
    standard_derivations,
    subtract,
    sum_quantities,
    with_unit,
)
from .domain.errors import (
    AmbiguousUnitError,
    DivisionByZeroError,
    DuplicateUnitError,
    IncompatibleUnitsError,
    InvalidAmountError,
    InvalidFormatError,
    QuantityError,
    QuantityParseError,
    StorageFormatError,
    UnknownCultureError,
    UnknownKindError,
    UnknownUnitError,
    UnsupportedOperationError,
)
from .domain.factories import (
    celsius,
    centimeters,
    fahrenheit,
    feet,
    grams,
    hours,
    inches,
    kelvin,
    kilocalories,
    kilograms,
    kilojoules,
    kilometers,
    kilometers_per_hour,
    liters,
    meters,
    miles,
    miles_per_hour,
    milligrams,
    milliliters,
    millimeters,
    minutes,
    ounces,
    pounds,
    seconds,
)
from .domain.units import (
    AreaUnits,
    EnergyUnits,
    LengthUnits,
    MassUnits,
    QuantityKind,
    SpeedUnits,
    TemperatureUnits,
    TimeUnits,
    UnitDefinition,
    UnitRegistry,
    VolumeUnits,
    default_registry,
)
from .formatting import (
    FormatOptions,
    QuantityFormatter,
    QuantitySettings,
    default_settings,
    format_quantity,
    parse_quantity,
    set_default_translator,
)
from .infrastructure.persistence import (
    StoredQuantity,
    from_document,
    from_record,
    from_storage,
    to_document,
    to_storage,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousUnitError",
    "Area",
    "AreaUnits",
    "DerivationRules",
    "DivisionByZeroError",
    "DuplicateUnitError",
    "Duration",
    "Energy",
    "EnergyUnits",
    "FormatOptions",
    "IncompatibleUnitsError",
    "InvalidAmountError",
    "InvalidFormatError",
    "Length",
    "LengthUnits",
    "Mass",
    "MassUnits",
    "Operator",
    "Quantity",
    "QuantityError",
    "QuantityFormatter",
    "QuantityKind",
    "QuantityParseError",
    "QuantitySettings",
    "Speed",
    "SpeedUnits",
    "StorageFormatError",
    "StoredQuantity",
    "Temperature",
    "TemperatureUnits",
    "TimeUnits",
    "UnitDefinition",
    "UnitRegistry",
    "UnknownCultureError",
    "UnknownKindError",
    "UnknownUnitError",
    "UnsupportedOperationError",
    "Volume",
    "VolumeUnits",
    "add",
    "celsius",
    "centimeters",
    "convert",
    "default_registry",
    "default_settings",
    "derivations",
    "divide",
    "divide_quantities",
    "fahrenheit",
    "feet",
    "format_quantity",
    "from_document",
    "from_record",
    "from_storage",
    "grams",
    "hours",
    "inches",
    "kelvin",
    "kilocalories",
    "kilograms",
    "kilojoules",
    "kilometers",
    "kilometers_per_hour",
    "liters",
    "meters",
    "miles",
    "miles_per_hour",
    "milligrams",
    "milliliters",
    "millimeters",
    "minutes",
    "multiply_quantities",
    "ounces",
    "parse_quantity",
    "pounds",
    "quantity_class_for",
    "scale",
    "seconds",
    "set_default_translator",
    "standard_derivations",
    "subtract",
    "sum_quantities",
    "to_document",
    "to_storage",
    "with_unit",
]
