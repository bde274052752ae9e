"""Persistence codec and document mapping."""

from .codec import StoredQuantity, from_record, from_storage, to_storage
from .document import from_document, to_document

__all__ = [
    "StoredQuantity",
    "from_document",
    "from_record",
    "from_storage",
    "to_document",
    "to_storage",
]
