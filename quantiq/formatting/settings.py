"""
Global formatting settings.

``QuantitySettings`` is an immutable snapshot. ``GlobalSettings`` holds
the current snapshot and replaces it on every write, so a reader that
takes one snapshot per call always sees a consistent set of fields.
Writes are expected at configuration time; hosts changing settings
concurrently must serialize their own writes.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cultures import get_culture
from .number_format import NumberFormat

logger = structlog.get_logger(__name__)

DEFAULT_CULTURE = "en-US"
DEFAULT_NUMBER_FORMAT = "n2"
DEFAULT_USE_ABBREVIATION = True


class QuantitySettings(BaseModel):
    """
    Formatting defaults snapshot.

    Example:
        >>> settings = QuantitySettings(culture="de-DE", number_format="n1")
        >>> settings.use_abbreviation
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    culture: str = Field(default=DEFAULT_CULTURE, description="Culture identifier")
    number_format: str = Field(
        default=DEFAULT_NUMBER_FORMAT, description="Number pattern, e.g. 'n2'"
    )
    use_abbreviation: bool = Field(
        default=DEFAULT_USE_ABBREVIATION, description="Symbol instead of full name"
    )

    @field_validator("culture")
    @classmethod
    def known_culture(cls, v: str) -> str:
        """Culture must resolve to formatting data."""
        get_culture(v)
        return v

    @field_validator("number_format")
    @classmethod
    def valid_pattern(cls, v: str) -> str:
        """Pattern must parse."""
        NumberFormat.parse(v)
        return v


class GlobalSettings:
    """Process-wide mutable holder of a QuantitySettings snapshot.

    Example:
        >>> settings = GlobalSettings()
        >>> settings.use_abbreviation = False
        >>> settings.snapshot().use_abbreviation
        False
    """

    def __init__(self, initial: QuantitySettings | None = None) -> None:
        self._current = initial or QuantitySettings()

    def snapshot(self) -> QuantitySettings:
        """Current immutable settings."""
        return self._current

    def update(self, **changes: Any) -> QuantitySettings:
        """Validate and swap in a snapshot with ``changes`` applied.

        Raises:
            pydantic.ValidationError: If a value is invalid or a field is
                unknown; the current snapshot stays in place
        """
        updated = QuantitySettings(**{**self._current.model_dump(), **changes})
        self._current = updated
        logger.info("Quantity settings updated", **changes)
        return updated

    def replace(self, settings: QuantitySettings) -> None:
        """Swap in a whole snapshot."""
        self._current = settings
        logger.info("Quantity settings replaced", **settings.model_dump())

    def reset(self) -> None:
        """Restore library defaults."""
        self._current = QuantitySettings()

    @property
    def culture(self) -> str:
        return self._current.culture

    @culture.setter
    def culture(self, value: str) -> None:
        self.update(culture=value)

    @property
    def number_format(self) -> str:
        return self._current.number_format

    @number_format.setter
    def number_format(self, value: str) -> None:
        self.update(number_format=value)

    @property
    def use_abbreviation(self) -> bool:
        return self._current.use_abbreviation

    @use_abbreviation.setter
    def use_abbreviation(self, value: bool) -> None:
        self.update(use_abbreviation=value)

    def __repr__(self) -> str:
        return f"GlobalSettings({self._current!r})"


default_settings = GlobalSettings()
