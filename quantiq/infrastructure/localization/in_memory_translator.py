"""In-memory implementation of IUnitNameTranslator."""

from typing import Dict, Mapping, Optional

from ...domain.units.unit_definition import UnitDefinition
from ...formatting.ports import IUnitNameTranslator

# language -> unit id -> plural name
_BUILTIN_NAMES: Dict[str, Dict[str, str]] = {
    "de": {
        "Meters": "Meter",
        "Centimeters": "Zentimeter",
        "Millimeters": "Millimeter",
        "Kilometers": "Kilometer",
        "Inches": "Zoll",
        "Feet": "Fuß",
        "Miles": "Meilen",
        "Kilograms": "Kilogramm",
        "Grams": "Gramm",
        "Milligrams": "Milligramm",
        "Tonnes": "Tonnen",
        "Pounds": "Pfund",
        "Liters": "Liter",
        "Milliliters": "Milliliter",
        "Seconds": "Sekunden",
        "Minutes": "Minuten",
        "Hours": "Stunden",
        "Days": "Tage",
        "DegreesCelsius": "Grad Celsius",
        "Kilocalories": "Kilokalorien",
    },
    "fr": {
        "Meters": "mètres",
        "Centimeters": "centimètres",
        "Millimeters": "millimètres",
        "Kilometers": "kilomètres",
        "Inches": "pouces",
        "Feet": "pieds",
        "Kilograms": "kilogrammes",
        "Grams": "grammes",
        "Milligrams": "milligrammes",
        "Liters": "litres",
        "Milliliters": "millilitres",
        "Seconds": "secondes",
        "Minutes": "minutes",
        "Hours": "heures",
        "Days": "jours",
        "DegreesCelsius": "degrés Celsius",
    },
    "it": {
        "Meters": "metri",
        "Centimeters": "centimetri",
        "Millimeters": "millimetri",
        "Kilometers": "chilometri",
        "Inches": "pollici",
        "Feet": "piedi",
        "Kilograms": "chilogrammi",
        "Grams": "grammi",
        "Milligrams": "milligrammi",
        "Liters": "litri",
        "Milliliters": "millilitri",
        "Cups": "tazze",
        "Tablespoons": "cucchiai",
        "Teaspoons": "cucchiaini",
        "Seconds": "secondi",
        "Minutes": "minuti",
        "Hours": "ore",
        "Days": "giorni",
        "DegreesCelsius": "gradi Celsius",
        "Kilocalories": "chilocalorie",
    },
    "es": {
        "Meters": "metros",
        "Centimeters": "centímetros",
        "Kilometers": "kilómetros",
        "Kilograms": "kilogramos",
        "Grams": "gramos",
        "Liters": "litros",
        "Hours": "horas",
    },
}


class InMemoryUnitNameTranslator(IUnitNameTranslator):
    """Dictionary-backed unit name translations.

    Lookup tries the full culture ("it-IT") first, then its language
    ("it").

    Example:
        >>> translator = InMemoryUnitNameTranslator()
        >>> translator.translate(MassUnits.GRAMS, "it-IT")
        'grammi'
    """

    def __init__(
        self,
        names: Optional[Mapping[str, Mapping[str, str]]] = None,
        include_builtin: bool = True,
    ) -> None:
        """Initialize translator.

        Args:
            names: Extra translations, culture or language -> unit id -> name
            include_builtin: Start from the bundled de/fr/it/es names
        """
        self._names: Dict[str, Dict[str, str]] = {}
        if include_builtin:
            for culture, table in _BUILTIN_NAMES.items():
                self.add(culture, table)
        for culture, table in (names or {}).items():
            self.add(culture, table)

    def add(self, culture: str, names: Mapping[str, str]) -> None:
        """Add or override translations for a culture or language."""
        key = culture.replace("_", "-").lower()
        self._names.setdefault(key, {}).update(names)

    def translate(self, unit: UnitDefinition, culture: str) -> Optional[str]:
        key = culture.replace("_", "-").lower()
        for candidate in (key, key.split("-")[0]):
            name = self._names.get(candidate, {}).get(unit.id)
            if name is not None:
                return name
        return None
