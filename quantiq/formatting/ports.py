"""Localization port - interface for translated unit names."""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.units.unit_definition import UnitDefinition


class IUnitNameTranslator(ABC):
    """Port for unit display names in a culture.

    The formatter asks for a full unit name in the requested culture
    and falls back to the English ``full_name`` when the translator
    has none.
    """

    @abstractmethod
    def translate(self, unit: UnitDefinition, culture: str) -> Optional[str]:
        """Translated full name of ``unit``.

        Args:
            unit: Unit to name
            culture: Culture identifier ("it-IT")

        Returns:
            Optional[str]: Translated name, or None if unknown
        """
        pass
