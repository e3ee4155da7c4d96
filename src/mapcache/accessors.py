"""Typed, fail-fast reads over a populated cache store."""

from __future__ import annotations

from typing import Any

from mapcache.constants.cache import KIND_LIST, KIND_MAP, KIND_SCALAR
from mapcache.exceptions import MappingNotFoundError, MappingTypeError, SymbolResolutionError
from mapcache.model import ListValue, MapValue, Scalar, Value
from mapcache.protocols import SymbolResolver
from mapcache.store import CacheStore


class MappingAccessor:
    """Read-only accessor API over a :class:`CacheStore`.

    Every failure raises synchronously and carries the key path that caused
    it. Nothing is retried.
    """

    def __init__(self, store: CacheStore, resolver: SymbolResolver | None = None) -> None:
        self._store = store
        self._resolver = resolver

    @property
    def store(self) -> CacheStore:
        return self._store

    def get_value(self, key: str) -> Value:
        return self._store.get(key)

    def get_optional_value(self, key: str) -> Value | None:
        return self._store.get_optional(key)

    def get_string(self, key: str, sub_key: str | None = None) -> str:
        """Return the scalar at ``key``, or at ``sub_key`` inside the map at ``key``."""
        if sub_key is None:
            value = self._store.get(key)
            if not isinstance(value, Scalar):
                raise MappingTypeError(key, expected=KIND_SCALAR, actual=value.kind)
            return value.text

        nested = self.get_map(key).get(sub_key)
        if nested is None:
            raise MappingNotFoundError(key, sub_key)
        if not isinstance(nested, Scalar):
            raise MappingTypeError(key, sub_key, expected=KIND_SCALAR, actual=nested.kind)
        return nested.text

    def get_list(self, key: str) -> list[Value]:
        """Return list elements as stored; element kinds are not checked."""
        value = self._store.get(key)
        if not isinstance(value, ListValue):
            raise MappingTypeError(key, expected=KIND_LIST, actual=value.kind)
        return list(value.items)

    def get_map(self, key: str) -> dict[str, Value]:
        value = self._store.get(key)
        if not isinstance(value, MapValue):
            raise MappingTypeError(key, expected=KIND_MAP, actual=value.kind)
        return dict(value.entries)

    def resolve_symbol(self, key: str, sub_key: str | None = None) -> Any:
        """Resolve the name mapped at ``key`` (and ``sub_key``) to a host symbol."""
        name = self.get_string(key, sub_key)
        keys = (key,) if sub_key is None else (key, sub_key)
        if self._resolver is None:
            raise SymbolResolutionError(name, keys=keys, reason="no symbol resolver configured")
        try:
            return self._resolver.resolve(name)
        except SymbolResolutionError as exc:
            if exc.keys:
                raise
            raise SymbolResolutionError(name, keys=keys) from exc
