"""
Product record protocol.
Implemented by the host catalog; the customizer only writes option values.
"""
from __future__ import annotations

from typing import Protocol


class ProductRecord(Protocol):
    """
    Protocol for the product being saved.

    Native properties have a dedicated setter on the record, everything
    else is stored as free-form metadata.
    """

    def has_native_setter(self, key: str) -> bool:
        """Check if the record exposes a setter for the property."""
        ...

    def set_property(self, key: str, value: str) -> None:
        """Write a native property through its setter."""
        ...

    def update_meta(self, key: str, value: str) -> None:
        """Write a metadata entry."""
        ...
