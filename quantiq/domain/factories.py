"""Convenience constructors: "N in unit U".

Example:
    >>> inches(4) + inches(20)
    Length(24, 'Inches')
"""

from .numeric import Amount
from .quantity import Duration, Energy, Length, Mass, Speed, Temperature, Volume
from .units.catalog import (
    EnergyUnits,
    LengthUnits,
    MassUnits,
    SpeedUnits,
    TemperatureUnits,
    TimeUnits,
    VolumeUnits,
)


def meters(amount: Amount) -> Length:
    return Length(amount, LengthUnits.METERS)


def centimeters(amount: Amount) -> Length:
    return Length(amount, LengthUnits.CENTIMETERS)


def millimeters(amount: Amount) -> Length:
    return Length(amount, LengthUnits.MILLIMETERS)


def kilometers(amount: Amount) -> Length:
    return Length(amount, LengthUnits.KILOMETERS)


def inches(amount: Amount) -> Length:
    return Length(amount, LengthUnits.INCHES)


def feet(amount: Amount) -> Length:
    return Length(amount, LengthUnits.FEET)


def miles(amount: Amount) -> Length:
    return Length(amount, LengthUnits.MILES)


def kilograms(amount: Amount) -> Mass:
    return Mass(amount, MassUnits.KILOGRAMS)


def grams(amount: Amount) -> Mass:
    return Mass(amount, MassUnits.GRAMS)


def milligrams(amount: Amount) -> Mass:
    return Mass(amount, MassUnits.MILLIGRAMS)


def pounds(amount: Amount) -> Mass:
    return Mass(amount, MassUnits.POUNDS)


def ounces(amount: Amount) -> Mass:
    return Mass(amount, MassUnits.OUNCES)


def liters(amount: Amount) -> Volume:
    return Volume(amount, VolumeUnits.LITERS)


def milliliters(amount: Amount) -> Volume:
    return Volume(amount, VolumeUnits.MILLILITERS)


def seconds(amount: Amount) -> Duration:
    return Duration(amount, TimeUnits.SECONDS)


def minutes(amount: Amount) -> Duration:
    return Duration(amount, TimeUnits.MINUTES)


def hours(amount: Amount) -> Duration:
    return Duration(amount, TimeUnits.HOURS)


def kilometers_per_hour(amount: Amount) -> Speed:
    return Speed(amount, SpeedUnits.KILOMETERS_PER_HOUR)


def miles_per_hour(amount: Amount) -> Speed:
    return Speed(amount, SpeedUnits.MILES_PER_HOUR)


def celsius(amount: Amount) -> Temperature:
    return Temperature(amount, TemperatureUnits.CELSIUS)


def fahrenheit(amount: Amount) -> Temperature:
    return Temperature(amount, TemperatureUnits.FAHRENHEIT)


def kelvin(amount: Amount) -> Temperature:
    return Temperature(amount, TemperatureUnits.KELVIN)


def kilocalories(amount: Amount) -> Energy:
    return Energy(amount, EnergyUnits.KILOCALORIES)


def kilojoules(amount: Amount) -> Energy:
    return Energy(amount, EnergyUnits.KILOJOULES)
