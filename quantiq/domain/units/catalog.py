"""Built-in unit tables.

Factors are exact: international yard and pound (1959), US customary
volumes, thermochemical calorie. The first unit listed per kind in
``CATALOG`` is the canonical one.
"""

from typing import Dict, Tuple

from .kind import QuantityKind
from .unit_definition import UnitDefinition


def _unit(
    kind: QuantityKind,
    id: str,
    symbol: str,
    full_name: str,
    factor: str = "1",
    offset: str = "0",
) -> UnitDefinition:
    return UnitDefinition(
        kind=kind,
        id=id,
        symbol=symbol,
        full_name=full_name,
        to_base_factor=factor,
        base_offset=offset,
    )


class LengthUnits:
    """Length units, base: meters."""

    METERS = _unit(QuantityKind.LENGTH, "Meters", "m", "meters")
    CENTIMETERS = _unit(QuantityKind.LENGTH, "Centimeters", "cm", "centimeters", "0.01")
    MILLIMETERS = _unit(QuantityKind.LENGTH, "Millimeters", "mm", "millimeters", "0.001")
    KILOMETERS = _unit(QuantityKind.LENGTH, "Kilometers", "km", "kilometers", "1000")
    INCHES = _unit(QuantityKind.LENGTH, "Inches", "in", "inches", "0.0254")
    FEET = _unit(QuantityKind.LENGTH, "Feet", "ft", "feet", "0.3048")
    YARDS = _unit(QuantityKind.LENGTH, "Yards", "yd", "yards", "0.9144")
    MILES = _unit(QuantityKind.LENGTH, "Miles", "mi", "miles", "1609.344")


class MassUnits:
    """Mass units, base: kilograms."""

    KILOGRAMS = _unit(QuantityKind.MASS, "Kilograms", "kg", "kilograms")
    GRAMS = _unit(QuantityKind.MASS, "Grams", "g", "grams", "0.001")
    MILLIGRAMS = _unit(QuantityKind.MASS, "Milligrams", "mg", "milligrams", "0.000001")
    TONNES = _unit(QuantityKind.MASS, "Tonnes", "t", "tonnes", "1000")
    POUNDS = _unit(QuantityKind.MASS, "Pounds", "lb", "pounds", "0.45359237")
    OUNCES = _unit(QuantityKind.MASS, "Ounces", "oz", "ounces", "0.028349523125")


class AreaUnits:
    """Area units, base: square meters."""

    SQUARE_METERS = _unit(QuantityKind.AREA, "SquareMeters", "m²", "square meters")
    SQUARE_CENTIMETERS = _unit(
        QuantityKind.AREA, "SquareCentimeters", "cm²", "square centimeters", "0.0001"
    )
    SQUARE_KILOMETERS = _unit(
        QuantityKind.AREA, "SquareKilometers", "km²", "square kilometers", "1000000"
    )
    HECTARES = _unit(QuantityKind.AREA, "Hectares", "ha", "hectares", "10000")
    SQUARE_FEET = _unit(QuantityKind.AREA, "SquareFeet", "ft²", "square feet", "0.09290304")
    ACRES = _unit(QuantityKind.AREA, "Acres", "ac", "acres", "4046.8564224")


class VolumeUnits:
    """Volume units, base: cubic meters. Gallons and cups are US customary."""

    CUBIC_METERS = _unit(QuantityKind.VOLUME, "CubicMeters", "m³", "cubic meters")
    LITERS = _unit(QuantityKind.VOLUME, "Liters", "L", "liters", "0.001")
    MILLILITERS = _unit(QuantityKind.VOLUME, "Milliliters", "mL", "milliliters", "0.000001")
    GALLONS = _unit(QuantityKind.VOLUME, "Gallons", "gal", "gallons", "0.003785411784")
    QUARTS = _unit(QuantityKind.VOLUME, "Quarts", "qt", "quarts", "0.000946352946")
    CUPS = _unit(QuantityKind.VOLUME, "Cups", "cup", "cups", "0.0002365882365")
    TABLESPOONS = _unit(
        QuantityKind.VOLUME, "Tablespoons", "tbsp", "tablespoons", "0.00001478676478125"
    )
    TEASPOONS = _unit(
        QuantityKind.VOLUME, "Teaspoons", "tsp", "teaspoons", "0.00000492892159375"
    )


class TimeUnits:
    """Time units, base: seconds."""

    SECONDS = _unit(QuantityKind.TIME, "Seconds", "s", "seconds")
    MILLISECONDS = _unit(QuantityKind.TIME, "Milliseconds", "ms", "milliseconds", "0.001")
    MINUTES = _unit(QuantityKind.TIME, "Minutes", "min", "minutes", "60")
    HOURS = _unit(QuantityKind.TIME, "Hours", "h", "hours", "3600")
    DAYS = _unit(QuantityKind.TIME, "Days", "d", "days", "86400")


class SpeedUnits:
    """Speed units, base: meters per second."""

    METERS_PER_SECOND = _unit(
        QuantityKind.SPEED, "MetersPerSecond", "m/s", "meters per second"
    )
    KILOMETERS_PER_HOUR = _unit(
        QuantityKind.SPEED, "KilometersPerHour", "km/h", "kilometers per hour", "5/18"
    )
    MILES_PER_HOUR = _unit(
        QuantityKind.SPEED, "MilesPerHour", "mph", "miles per hour", "0.44704"
    )
    KNOTS = _unit(QuantityKind.SPEED, "Knots", "kn", "knots", "463/900")


class TemperatureUnits:
    """Temperature units, base: kelvin. Offsets make these affine."""

    KELVIN = _unit(QuantityKind.TEMPERATURE, "Kelvin", "K", "kelvin")
    CELSIUS = _unit(
        QuantityKind.TEMPERATURE, "DegreesCelsius", "°C", "degrees Celsius", "1", "273.15"
    )
    FAHRENHEIT = _unit(
        QuantityKind.TEMPERATURE,
        "DegreesFahrenheit",
        "°F",
        "degrees Fahrenheit",
        "5/9",
        "45967/180",
    )


class EnergyUnits:
    """Energy units, base: joules."""

    JOULES = _unit(QuantityKind.ENERGY, "Joules", "J", "joules")
    KILOJOULES = _unit(QuantityKind.ENERGY, "Kilojoules", "kJ", "kilojoules", "1000")
    CALORIES = _unit(QuantityKind.ENERGY, "Calories", "cal", "calories", "4.184")
    KILOCALORIES = _unit(QuantityKind.ENERGY, "Kilocalories", "kcal", "kilocalories", "4184")
    WATT_HOURS = _unit(QuantityKind.ENERGY, "WattHours", "Wh", "watt-hours", "3600")
    KILOWATT_HOURS = _unit(
        QuantityKind.ENERGY, "KilowattHours", "kWh", "kilowatt-hours", "3600000"
    )


def _members(namespace: type) -> Tuple[UnitDefinition, ...]:
    return tuple(
        value for value in vars(namespace).values() if isinstance(value, UnitDefinition)
    )


# kind -> (canonical unit, every unit of the kind)
CATALOG: Dict[QuantityKind, Tuple[UnitDefinition, Tuple[UnitDefinition, ...]]] = {
    QuantityKind.LENGTH: (LengthUnits.METERS, _members(LengthUnits)),
    QuantityKind.MASS: (MassUnits.KILOGRAMS, _members(MassUnits)),
    QuantityKind.AREA: (AreaUnits.SQUARE_METERS, _members(AreaUnits)),
    QuantityKind.VOLUME: (VolumeUnits.CUBIC_METERS, _members(VolumeUnits)),
    QuantityKind.TIME: (TimeUnits.SECONDS, _members(TimeUnits)),
    QuantityKind.SPEED: (SpeedUnits.METERS_PER_SECOND, _members(SpeedUnits)),
    QuantityKind.TEMPERATURE: (TemperatureUnits.KELVIN, _members(TemperatureUnits)),
    QuantityKind.ENERGY: (EnergyUnits.JOULES, _members(EnergyUnits)),
}
