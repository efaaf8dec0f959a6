"""Lookup of values keyed by type."""

from __future__ import annotations

from typing import Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


class TypeSwitch(Generic[T]):
    """Maps type identifiers to values."""

    def __init__(self) -> None:
        self._cases: dict[Hashable, T] = {}

    def case(self, type_id: Hashable, value: T) -> None:
        """Add or replace the value for ``type_id``."""
        self._cases[type_id] = value

    def switch(self, type_id: Hashable) -> Optional[T]:
        """Return the value for ``type_id``, or None if there is no case."""
        return self._cases.get(type_id)