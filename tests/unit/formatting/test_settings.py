"""Unit tests for global formatting settings."""

import pytest
from pydantic import ValidationError

from quantiq.formatting.settings import (
    DEFAULT_CULTURE,
    DEFAULT_NUMBER_FORMAT,
    GlobalSettings,
    QuantitySettings,
    default_settings,
)


class TestQuantitySettings:
    """Test suite for the immutable snapshot."""

    def test_defaults(self) -> None:
        """Test library defaults."""
        settings = QuantitySettings()
        assert settings.culture == DEFAULT_CULTURE == "en-US"
        assert settings.number_format == DEFAULT_NUMBER_FORMAT == "n2"
        assert settings.use_abbreviation is True

    def test_unknown_culture_rejected(self) -> None:
        """Test that cultures are validated."""
        with pytest.raises(ValidationError):
            QuantitySettings(culture="xx-YY")

    def test_invalid_pattern_rejected(self) -> None:
        """Test that number patterns are validated."""
        with pytest.raises(ValidationError):
            QuantitySettings(number_format="q9")

    def test_neutral_culture_accepted(self) -> None:
        """Test that neutral language names pass validation."""
        assert QuantitySettings(culture="it").culture == "it"

    def test_unknown_field_rejected(self) -> None:
        """Test that misspelled fields are not silently dropped."""
        with pytest.raises(ValidationError):
            QuantitySettings(cultur="de-DE")

    def test_frozen(self) -> None:
        """Test that snapshots are immutable."""
        settings = QuantitySettings()
        with pytest.raises(ValidationError):
            settings.culture = "de-DE"  # type: ignore


class TestGlobalSettings:
    """Test suite for the process-wide holder."""

    def test_setters_swap_snapshot(self) -> None:
        """Test that a write replaces the snapshot, leaving old ones intact."""
        settings = GlobalSettings()
        before = settings.snapshot()
        settings.culture = "de-DE"
        assert settings.culture == "de-DE"
        assert settings.snapshot() is not before
        assert before.culture == "en-US"

    def test_update_several_fields(self) -> None:
        """Test multi-field update."""
        settings = GlobalSettings()
        updated = settings.update(number_format="f1", use_abbreviation=False)
        assert updated.number_format == "f1"
        assert settings.use_abbreviation is False
        assert settings.culture == "en-US"

    def test_invalid_write_keeps_current(self) -> None:
        """Test that a rejected write leaves settings unchanged."""
        settings = GlobalSettings()
        settings.number_format = "n1"
        with pytest.raises(ValidationError):
            settings.number_format = "bogus"
        assert settings.number_format == "n1"

    def test_update_unknown_field_keeps_current(self) -> None:
        """Test that update() rejects unknown fields and changes nothing."""
        settings = GlobalSettings()
        before = settings.snapshot()
        with pytest.raises(ValidationError):
            settings.update(cultur="de-DE", number_format="f1")
        assert settings.snapshot() is before
        assert settings.number_format == "n2"

    def test_replace_and_reset(self) -> None:
        """Test whole-snapshot replacement and reset."""
        settings = GlobalSettings()
        settings.replace(QuantitySettings(culture="fr-FR", use_abbreviation=False))
        assert settings.culture == "fr-FR"
        assert settings.use_abbreviation is False
        settings.reset()
        assert settings.snapshot() == QuantitySettings()

    def test_initial_snapshot(self) -> None:
        """Test constructing with a snapshot."""
        settings = GlobalSettings(QuantitySettings(number_format="g"))
        assert settings.number_format == "g"

    def test_default_settings_start_at_defaults(self) -> None:
        """Test the shared instance (reset by the test fixture)."""
        assert default_settings.snapshot() == QuantitySettings()
