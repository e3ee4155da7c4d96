"""Thread-safe in-memory store for one generation of mappings."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from mapcache.exceptions import MappingNotFoundError, StoreAlreadyPopulatedError

if TYPE_CHECKING:
    from mapcache.model.value import Value


class CacheStore:
    """Mapping of string keys to :data:`Value` entries.

    Readers never take the lock: the backing dict is only ever replaced
    wholesale, so a reader sees either the previous generation or the next
    one, never a half-built dict.
    """

    def __init__(self, entries: Mapping[str, Value] | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: Mapping[str, Value] = MappingProxyType(dict(entries or {}))

    def put(self, key: str, value: Value) -> None:
        """Insert one entry; a repeated key keeps the last value."""
        with self._lock:
            updated = dict(self._entries)
            updated[key] = value
            self._entries = MappingProxyType(updated)

    def populate(self, entries: Mapping[str, Value]) -> None:
        """Publish a complete generation of entries in one step."""
        staged = MappingProxyType(dict(entries))
        with self._lock:
            if self._entries:
                raise StoreAlreadyPopulatedError(f"Cache store already holds {len(self._entries)} mappings")
            self._entries = staged

    def get(self, key: str) -> Value:
        value = self._entries.get(key)
        if value is None:
            raise MappingNotFoundError(key)
        return value

    def get_optional(self, key: str) -> Value | None:
        return self._entries.get(key)

    def is_populated(self) -> bool:
        return bool(self._entries)

    def keys(self) -> list[str]:
        return list(self._entries)

    def snapshot(self) -> dict[str, Value]:
        """Return a shallow copy of the current entries."""
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CacheStore):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CacheStore({len(self._entries)} mappings)"
