"""Tagged value union stored in the mapping cache.

Every cache entry is one of three shapes fixed at decode time: a scalar
string, an ordered list of values, or a string-keyed map of values. All
casting from raw JSON nodes happens once in :func:`value_from_node`, so
accessors only ever switch on the variant.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from mapcache.constants.cache import KIND_LIST, KIND_MAP, KIND_SCALAR
from mapcache.types.common import JsonValue


@dataclass(frozen=True)
class Scalar:
    """A scalar mapping rendered to its string form."""

    text: str

    @property
    def kind(self) -> str:
        return KIND_SCALAR

    def to_plain(self) -> str:
        """Return the plain string."""
        return self.text


@dataclass(frozen=True)
class ListValue:
    """An ordered sequence of values."""

    items: tuple[Value, ...] = ()

    @property
    def kind(self) -> str:
        return KIND_LIST

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_plain(self) -> list[JsonValue]:
        """Return a plain list with nested values converted recursively."""
        return [item.to_plain() for item in self.items]


@dataclass(frozen=True, eq=False)
class MapValue:
    """A string-keyed map of values; key order is not significant."""

    entries: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @property
    def kind(self) -> str:
        return KIND_MAP

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapValue):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)

    def to_plain(self) -> dict[str, JsonValue]:
        """Return a plain dict with nested values converted recursively."""
        return {key: value.to_plain() for key, value in self.entries.items()}


Value: TypeAlias = Scalar | ListValue | MapValue


def scalar_text(node: object) -> str:
    """Render a JSON scalar node to its string form.

    Strings are returned unchanged; numbers, booleans and ``null`` use their
    JSON text, so ``1`` becomes ``"1"`` and ``true`` becomes ``"true"``.
    """
    if isinstance(node, str):
        return node
    return json.dumps(node)


def value_from_node(node: object) -> Value:
    """Build a :data:`Value` from a decoded JSON node based on its shape."""
    if isinstance(node, list):
        return ListValue(tuple(value_from_node(item) for item in node))
    if isinstance(node, dict):
        return MapValue({str(key): value_from_node(item) for key, item in node.items()})
    return Scalar(scalar_text(node))


def value_to_node(value: Value) -> JsonValue:
    """Encode a :data:`Value` back to a JSON-compatible node."""
    return value.to_plain()


def list_of(items: Iterable[Value | str]) -> ListValue:
    """Build a list value, wrapping bare strings as scalars."""
    return ListValue(tuple(Scalar(item) if isinstance(item, str) else item for item in items))


def map_of(entries: Mapping[str, Value | str]) -> MapValue:
    """Build a map value, wrapping bare strings as scalars."""
    return MapValue({key: Scalar(item) if isinstance(item, str) else item for key, item in entries.items()})
