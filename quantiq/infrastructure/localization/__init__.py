"""Localization adapters."""

from .in_memory_translator import InMemoryUnitNameTranslator

__all__ = ["InMemoryUnitNameTranslator"]
