"""QuantityKind value object - family of mutually convertible units."""

from enum import Enum
from typing import Union

from ..errors import UnknownKindError


class QuantityKind(str, Enum):
    """Closed set of quantity kinds.

    Units convert only within one kind. The value is the stable name
    written to storage.
    """

    LENGTH = "Length"
    MASS = "Mass"
    AREA = "Area"
    VOLUME = "Volume"
    TIME = "Time"
    SPEED = "Speed"
    TEMPERATURE = "Temperature"
    ENERGY = "Energy"

    @classmethod
    def parse(cls, name: Union[str, "QuantityKind"]) -> "QuantityKind":
        """Resolve a kind from its value or member name.

        Args:
            name: Kind, value ("Length") or member name ("LENGTH"),
                case-insensitive

        Returns:
            QuantityKind: Matching kind

        Raises:
            UnknownKindError: If nothing matches

        Example:
            >>> QuantityKind.parse("length")
            <QuantityKind.LENGTH: 'Length'>
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            wanted = name.strip().lower()
            for kind in cls:
                if wanted in (kind.value.lower(), kind.name.lower()):
                    return kind
        raise UnknownKindError(f"Unknown quantity kind: {name!r}")

    def __str__(self) -> str:
        return self.value
