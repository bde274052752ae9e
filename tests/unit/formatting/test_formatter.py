"""Unit tests for QuantityFormatter and format_quantity."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from quantiq.domain.errors import InvalidFormatError, UnknownCultureError
from quantiq.domain.factories import celsius, grams, kilometers, milligrams
from quantiq.domain.quantity import Mass
from quantiq.domain.units import MassUnits
from quantiq.formatting.formatter import (
    FormatOptions,
    QuantityFormatter,
    default_formatter,
    format_quantity,
    set_default_translator,
)
from quantiq.formatting.settings import GlobalSettings, QuantitySettings, default_settings
from quantiq.infrastructure.localization import InMemoryUnitNameTranslator


class TestFormatOptions:
    """Test suite for per-call overrides."""

    def test_unset_fields_fall_back(self) -> None:
        """Test field-by-field merge."""
        settings = QuantitySettings(culture="de-DE", number_format="n1")
        merged = FormatOptions(number_format="f3").resolve(settings)
        assert merged.culture == "de-DE"
        assert merged.number_format == "f3"
        assert merged.use_abbreviation is True

    def test_empty_options_return_settings(self) -> None:
        """Test that no overrides keep the snapshot."""
        settings = QuantitySettings()
        assert FormatOptions().resolve(settings) is settings

    def test_unknown_option_rejected(self) -> None:
        """Test that misspelled options raise instead of being ignored."""
        with pytest.raises(ValidationError):
            FormatOptions(colour="red")


class TestQuantityFormatter:
    """Test suite for QuantityFormatter."""

    def test_default_rendering(self) -> None:
        """Test "46.50 g" with library defaults."""
        total = Mass(23, MassUnits.GRAMS) * 2 + milligrams(500)
        assert QuantityFormatter().format(total) == "46.50 g"

    def test_full_name(self) -> None:
        """Test full unit names."""
        formatter = QuantityFormatter()
        assert formatter.format(grams(46.5), FormatOptions(use_abbreviation=False)) == "46.50 grams"
        assert formatter.format(grams(46.5), use_abbreviation=False) == "46.50 grams"

    def test_culture_override(self) -> None:
        """Test de-DE separators."""
        assert QuantityFormatter().format(grams(1234.5), culture="de-DE") == "1.234,50 g"

    def test_keyword_overrides_win_over_options(self) -> None:
        """Test that keyword overrides are applied last."""
        options = FormatOptions(number_format="n0", culture="de-DE")
        text = QuantityFormatter().format(grams(2.25), options, number_format="n1")
        assert text == "2,2 g"

    def test_fixed_snapshot(self) -> None:
        """Test a formatter bound to a snapshot ignores global changes."""
        formatter = QuantityFormatter(QuantitySettings(number_format="n1"))
        default_settings.number_format = "n3"
        assert formatter.format(grams(1)) == "1.0 g"

    def test_live_settings(self) -> None:
        """Test a formatter bound to GlobalSettings sees changes."""
        settings = GlobalSettings()
        formatter = QuantityFormatter(settings)
        assert formatter.format(grams(1)) == "1.00 g"
        settings.number_format = "n0"
        assert formatter.format(grams(1)) == "1 g"

    def test_current_unit_not_origin(self) -> None:
        """Test that rendering uses the current unit."""
        q = grams(1500).with_unit(MassUnits.KILOGRAMS)
        assert QuantityFormatter().format(q) == "1.50 kg"

    def test_translated_name(self) -> None:
        """Test translated full names."""
        formatter = QuantityFormatter(translator=InMemoryUnitNameTranslator())
        text = formatter.format(grams(2), culture="it-IT", use_abbreviation=False)
        assert text == "2,00 grammi"

    def test_translation_falls_back_to_english(self) -> None:
        """Test English fallback for untranslated units."""
        formatter = QuantityFormatter(translator=InMemoryUnitNameTranslator())
        text = formatter.format(kilometers(3), culture="ja-JP", use_abbreviation=False)
        assert text == "3.00 kilometers"

    def test_symbols_ignore_translator(self) -> None:
        """Test that symbols are culture independent."""
        formatter = QuantityFormatter(translator=InMemoryUnitNameTranslator())
        assert formatter.format(celsius(20), culture="fr-FR") == "20,00 °C"

    def test_invalid_pattern_raises(self) -> None:
        """Test InvalidFormatError for a bad per-call pattern."""
        with pytest.raises(InvalidFormatError):
            QuantityFormatter().format(grams(1), number_format="zz")

    def test_unknown_culture_raises(self) -> None:
        """Test UnknownCultureError for a bad per-call culture."""
        with pytest.raises(UnknownCultureError):
            QuantityFormatter().format(grams(1), culture="xx-YY")

    def test_unknown_override_raises(self) -> None:
        """Test that a misspelled keyword override raises ValidationError."""
        with pytest.raises(ValidationError):
            QuantityFormatter().format(grams(1), cultur="de-DE")


class TestDefaultFormatting:
    """Test suite for str(), format() and format_quantity()."""

    def test_str_uses_global_settings(self) -> None:
        """Test that str() follows the global settings."""
        q = grams(Decimal("1234.5"))
        assert str(q) == "1,234.50 g"
        default_settings.culture = "de-DE"
        assert str(q) == "1.234,50 g"
        default_settings.use_abbreviation = False
        assert str(q) == "1.234,50 grams"

    def test_format_spec(self) -> None:
        """Test f-string pattern."""
        assert f"{grams(46.5):n1}" == "46.5 g"
        assert f"{grams(46.5)}" == "46.50 g"

    def test_invalid_format_spec_raises(self) -> None:
        """Test that bad f-string patterns raise."""
        with pytest.raises(InvalidFormatError):
            f"{grams(1):>10}"

    def test_format_quantity(self) -> None:
        """Test the module-level helper."""
        assert format_quantity(grams(3), number_format="g") == "3 g"

    def test_set_default_translator(self) -> None:
        """Test installing a translator for str()."""
        set_default_translator(InMemoryUnitNameTranslator())
        default_settings.update(culture="de-DE", use_abbreviation=False)
        assert str(grams(2)) == "2,00 Gramm"
        assert default_formatter().format(grams(2), culture="fr-FR") == "2,00 grammes"
