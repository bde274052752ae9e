"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every error here signals a programming or data-integrity problem,
so callers should never retry on them.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class QuantityError(Exception):
    """
    Base exception for all quantity errors.

    Allows catching every library error with a single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# REGISTRY EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UnknownKindError(QuantityError):
    """
    Quantity kind is not registered.

    Raised when:
    - Kind name is not a known QuantityKind
    - Kind exists but the registry holds no units for it

    Example:
        >>> raise UnknownKindError("Unknown quantity kind: 'Luminosity'")
    """

    pass


class UnknownUnitError(QuantityError):
    """
    Unit id is not registered for the given kind.

    Raised when:
    - Looking up an id that was never registered
    - A stored unit id no longer exists (schema drift)

    Example:
        >>> raise UnknownUnitError("Unknown Length unit: 'Furlongs'")
    """

    pass


class AmbiguousUnitError(UnknownUnitError):
    """
    Display token matches units of several kinds.

    Example:
        >>> raise AmbiguousUnitError("'m' matches Length, Time")
    """

    pass


class DuplicateUnitError(QuantityError):
    """Unit id already registered for this kind."""

    pass


# ═══════════════════════════════════════════════════════════
# ARITHMETIC EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class IncompatibleUnitsError(QuantityError):
    """
    Operation between units of different kinds.

    Raised when:
    - Converting a Length unit into a Mass unit
    - Adding, subtracting or ordering quantities of different kinds
    - Building a kind-tagged quantity with a foreign unit

    Example:
        >>> raise IncompatibleUnitsError("Cannot add Mass to Length")
    """

    pass


class UnsupportedOperationError(QuantityError, TypeError):
    """
    Operation is not defined for quantities.

    Raised when:
    - Multiplying two quantities without a derivation rule
    - Adding a bare number to a quantity

    Example:
        >>> raise UnsupportedOperationError("Length * Mass is not defined")
    """

    pass


class DivisionByZeroError(QuantityError, ZeroDivisionError):
    """Quantity divided by a zero scalar or a zero quantity."""

    pass


class InvalidAmountError(QuantityError, ValueError):
    """
    Amount is not a supported number.

    Raised when:
    - Amount is a bool, a string or any non-numeric object
    - Amount is NaN or infinite
    """

    pass


# ═══════════════════════════════════════════════════════════
# FORMATTING EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class InvalidFormatError(QuantityError, ValueError):
    """
    Number format pattern cannot be interpreted.

    Example:
        >>> raise InvalidFormatError("Invalid number format: 'x2'")
    """

    pass


class UnknownCultureError(QuantityError, ValueError):
    """Culture identifier has no formatting data."""

    pass


class QuantityParseError(QuantityError, ValueError):
    """Text is not a rendered quantity."""

    pass


# ═══════════════════════════════════════════════════════════
# PERSISTENCE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class StorageFormatError(QuantityError):
    """
    Stored representation is malformed.

    Raised when:
    - Document misses amount, unit or kind
    - Amount type tag is unknown
    - Amount text does not parse as its tagged type
    """

    pass
