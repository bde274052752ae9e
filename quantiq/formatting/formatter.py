"""
Quantity formatter.

Renders ``"<amount> <unit>"`` for the quantity's current unit. Options
missing from a call fall back, field by field, to a settings snapshot
taken once per call.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..domain.quantity import Quantity
from ..domain.units.unit_definition import UnitDefinition
from .cultures import get_culture
from .number_format import NumberFormat
from .ports import IUnitNameTranslator
from .settings import GlobalSettings, QuantitySettings, default_settings


class FormatOptions(BaseModel):
    """
    Per-call formatting overrides. Unset fields use the settings.

    Example:
        >>> FormatOptions(use_abbreviation=False).culture is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    culture: Optional[str] = Field(default=None, description="Culture identifier")
    number_format: Optional[str] = Field(default=None, description="Number pattern")
    use_abbreviation: Optional[bool] = Field(
        default=None, description="Symbol instead of full name"
    )

    def resolve(self, settings: QuantitySettings) -> QuantitySettings:
        """Merge with ``settings``, options winning where set.

        The merged snapshot is not re-validated; the formatter reports a
        bad culture or pattern with its own errors.
        """
        overrides = self.model_dump(exclude_none=True)
        if not overrides:
            return settings
        return settings.model_copy(update=overrides)


SettingsSource = Union[GlobalSettings, QuantitySettings]


class QuantityFormatter:
    """Render quantities as localized text.

    Example:
        >>> formatter = QuantityFormatter(QuantitySettings(number_format="n2"))
        >>> formatter.format(grams(46.5))
        '46.50 g'
        >>> formatter.format(grams(46.5), FormatOptions(use_abbreviation=False))
        '46.50 grams'
    """

    def __init__(
        self,
        settings: Optional[SettingsSource] = None,
        translator: Optional[IUnitNameTranslator] = None,
    ) -> None:
        """Initialize formatter.

        Args:
            settings: Fixed snapshot, or a GlobalSettings read on each call
                (default: the process-wide settings)
            translator: Source of translated unit names; English full
                names when absent
        """
        self._settings = default_settings if settings is None else settings
        self._translator = translator

    def current_settings(self) -> QuantitySettings:
        """Settings snapshot used for the next call."""
        if isinstance(self._settings, GlobalSettings):
            return self._settings.snapshot()
        return self._settings

    def format(
        self,
        quantity: Quantity,
        options: Optional[FormatOptions] = None,
        **overrides: Any,
    ) -> str:
        """Render ``quantity``.

        Args:
            quantity: Value to render (its current unit, not its origin)
            options: Per-call overrides
            **overrides: Same fields as FormatOptions, applied last

        Returns:
            str: e.g. "46.50 g"

        Raises:
            InvalidFormatError: If the number pattern is malformed
            UnknownCultureError: If the culture is unknown
            pydantic.ValidationError: If an override names no known option
        """
        merged = options or FormatOptions()
        if overrides:
            merged = FormatOptions(**{**merged.model_dump(exclude_none=True), **overrides})
        settings = merged.resolve(self.current_settings())

        culture = get_culture(settings.culture)
        number = NumberFormat.parse(settings.number_format).render(quantity.amount, culture)
        unit = self.unit_display(quantity.unit, settings.culture, settings.use_abbreviation)
        return f"{number} {unit}"

    def unit_display(
        self, unit: UnitDefinition, culture: str, use_abbreviation: bool
    ) -> str:
        """Symbol, or translated full name with English fallback."""
        if use_abbreviation:
            return unit.symbol
        if self._translator is not None:
            translated = self._translator.translate(unit, culture)
            if translated:
                return translated
        return unit.full_name


_default_formatter = QuantityFormatter()


def set_default_translator(translator: Optional[IUnitNameTranslator]) -> None:
    """Install the translator used by ``format_quantity`` and ``str()``."""
    global _default_formatter
    _default_formatter = QuantityFormatter(default_settings, translator)


def default_formatter() -> QuantityFormatter:
    """Formatter behind ``format_quantity`` and ``str(quantity)``."""
    return _default_formatter


def format_quantity(
    quantity: Quantity, options: Optional[FormatOptions] = None, **overrides: Any
) -> str:
    """Render with the process-wide settings and translator."""
    return _default_formatter.format(quantity, options, **overrides)
