"""Culture data for number rendering."""

from dataclasses import dataclass
from typing import Dict

from ..domain.errors import UnknownCultureError

INVARIANT = ""


@dataclass(frozen=True)
class CultureInfo:
    """Number conventions of one culture.

    Attributes:
        name: Culture identifier ("de-DE"), "" for invariant
        decimal_separator: Separator between integer and fraction digits
        group_separator: Thousands separator
        negative_sign: Sign prefixed to negative numbers
    """

    name: str
    decimal_separator: str
    group_separator: str
    negative_sign: str = "-"

    @property
    def language(self) -> str:
        """Neutral language part ("de" for "de-DE")."""
        return self.name.split("-")[0].lower()


_CULTURES: Dict[str, CultureInfo] = {
    culture.name.lower(): culture
    for culture in (
        CultureInfo(INVARIANT, ".", ","),
        CultureInfo("en-US", ".", ","),
        CultureInfo("en-GB", ".", ","),
        CultureInfo("de-DE", ",", "."),
        CultureInfo("de-CH", ".", "’"),
        CultureInfo("fr-FR", ",", "\u202f"),
        CultureInfo("it-IT", ",", "."),
        CultureInfo("es-ES", ",", "."),
        CultureInfo("pt-BR", ",", "."),
        CultureInfo("nl-NL", ",", "."),
        CultureInfo("ja-JP", ".", ","),
    )
}

# First culture listed for a language answers for the neutral name.
_NEUTRAL: Dict[str, CultureInfo] = {}
for _culture in _CULTURES.values():
    if _culture.name:
        _NEUTRAL.setdefault(_culture.language, _culture)


def get_culture(name: str) -> CultureInfo:
    """Resolve a culture by name, falling back to its neutral language.

    Args:
        name: "de-DE", "de_AT", "de" or "" (invariant)

    Returns:
        CultureInfo: Exact match, else first culture of the language

    Raises:
        UnknownCultureError: If neither the culture nor its language is known

    Example:
        >>> get_culture("de-AT").decimal_separator
        ','
    """
    key = name.strip().replace("_", "-").lower()
    culture = _CULTURES.get(key)
    if culture is not None:
        return culture
    culture = _NEUTRAL.get(key.split("-")[0])
    if culture is None:
        raise UnknownCultureError(f"Unknown culture: {name!r}")
    return culture


def available_cultures() -> list:
    """Names of cultures with their own data."""
    return [culture.name for culture in _CULTURES.values()]
