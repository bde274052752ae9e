"""Formatting and localization of quantities."""

from .cultures import CultureInfo, available_cultures, get_culture
from .formatter import (
    FormatOptions,
    QuantityFormatter,
    default_formatter,
    format_quantity,
    set_default_translator,
)
from .number_format import NumberFormat
from .parser import parse_quantity
from .ports import IUnitNameTranslator
from .settings import GlobalSettings, QuantitySettings, default_settings

__all__ = [
    "CultureInfo",
    "FormatOptions",
    "GlobalSettings",
    "IUnitNameTranslator",
    "NumberFormat",
    "QuantityFormatter",
    "QuantitySettings",
    "available_cultures",
    "default_formatter",
    "default_settings",
    "format_quantity",
    "get_culture",
    "parse_quantity",
    "set_default_translator",
]
