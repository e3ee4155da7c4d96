"""Accessor-level lookup errors.

These signal contract violations by the caller (a missing key or a value of
the wrong shape) and are never retried.
"""

from __future__ import annotations

from mapcache.exceptions.base import MapCacheError


def _render_path(keys: tuple[str, ...]) -> str:
    return ".".join(keys)


class MappingLookupError(MapCacheError, LookupError):
    """Base class for failed mapping lookups."""

    def __init__(self, message: str, *, keys: tuple[str, ...]) -> None:
        super().__init__(message)
        self.keys = keys


class MappingNotFoundError(MappingLookupError):
    """Raised when no mapping exists for a key."""

    def __init__(self, *keys: str) -> None:
        super().__init__(f"No mapping found for {_render_path(keys)}", keys=keys)


class MappingTypeError(MappingLookupError, TypeError):
    """Raised when a mapping holds a different value kind than requested."""

    def __init__(self, *keys: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Mapping {_render_path(keys)} is a {actual}, expected a {expected}",
            keys=keys,
        )
        self.expected = expected
        self.actual = actual


class SymbolResolutionError(MapCacheError, LookupError):
    """Raised when a mapped name does not resolve to a host symbol."""

    def __init__(self, name: str, *, keys: tuple[str, ...] = (), reason: str = "") -> None:
        message = f"Cannot resolve symbol {name!r}"
        if keys:
            message = f"{message} for mapping {_render_path(keys)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.name = name
        self.keys = keys
