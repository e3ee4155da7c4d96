"""Tests for typed mapping accessors."""

from __future__ import annotations

from typing import Any

import pytest

from mapcache.accessors import MappingAccessor
from mapcache.exceptions import MappingNotFoundError, MappingTypeError, SymbolResolutionError
from mapcache.model import MapValue, Scalar, list_of, map_of
from mapcache.store import CacheStore


@pytest.fixture
def accessor(make_resolver: Any) -> MappingAccessor:
    store = CacheStore()
    store.populate(
        {
            "a": Scalar("X"),
            "b": list_of(["1", "2", "3"]),
            "c": map_of({"k": "v", "nested": map_of({"x": "y"})}),
        }
    )
    resolver = make_resolver({"X": int, "v": str})
    return MappingAccessor(store, resolver)


def test_get_string_returns_scalar(accessor: MappingAccessor) -> None:
    assert accessor.get_string("a") == "X"


def test_get_string_with_sub_key(accessor: MappingAccessor) -> None:
    assert accessor.get_string("c", "k") == "v"


def test_get_list_returns_elements_as_stored(accessor: MappingAccessor) -> None:
    assert accessor.get_list("b") == [Scalar("1"), Scalar("2"), Scalar("3")]


def test_get_map_returns_entries(accessor: MappingAccessor) -> None:
    entries = accessor.get_map("c")

    assert entries["k"] == Scalar("v")
    assert isinstance(entries["nested"], MapValue)


def test_missing_key_raises_not_found(accessor: MappingAccessor) -> None:
    with pytest.raises(MappingNotFoundError) as excinfo:
        accessor.get_string("nonexistent")

    assert excinfo.value.keys == ("nonexistent",)
    assert "nonexistent" in str(excinfo.value)


def test_optional_value_returns_none_for_missing_key(accessor: MappingAccessor) -> None:
    assert accessor.get_optional_value("nonexistent") is None
    assert accessor.get_optional_value("a") == Scalar("X")


def test_missing_sub_key_raises_not_found_with_path(accessor: MappingAccessor) -> None:
    with pytest.raises(MappingNotFoundError) as excinfo:
        accessor.get_string("c", "absent")

    assert excinfo.value.keys == ("c", "absent")


@pytest.mark.parametrize(
    ("call", "expected", "actual"),
    [
        pytest.param(lambda acc: acc.get_string("b"), "scalar", "list", id="string-from-list"),
        pytest.param(lambda acc: acc.get_string("c"), "scalar", "map", id="string-from-map"),
        pytest.param(lambda acc: acc.get_list("a"), "list", "scalar", id="list-from-scalar"),
        pytest.param(lambda acc: acc.get_map("b"), "map", "list", id="map-from-list"),
        pytest.param(lambda acc: acc.get_string("a", "k"), "map", "scalar", id="sub-key-on-scalar"),
        pytest.param(lambda acc: acc.get_string("c", "nested"), "scalar", "map", id="sub-key-is-map"),
    ],
)
def test_wrong_shape_raises_type_mismatch(accessor: MappingAccessor, call, expected: str, actual: str) -> None:
    with pytest.raises(MappingTypeError) as excinfo:
        call(accessor)

    assert excinfo.value.expected == expected
    assert excinfo.value.actual == actual


def test_type_mismatch_is_also_a_type_error(accessor: MappingAccessor) -> None:
    with pytest.raises(TypeError):
        accessor.get_string("b")


def test_resolve_symbol(accessor: MappingAccessor) -> None:
    assert accessor.resolve_symbol("a") is int
    assert accessor.resolve_symbol("c", "k") is str


def test_resolve_symbol_unknown_name_carries_keys(make_resolver: Any) -> None:
    store = CacheStore({"a": Scalar("Missing")})
    accessor = MappingAccessor(store, make_resolver({}))

    with pytest.raises(SymbolResolutionError) as excinfo:
        accessor.resolve_symbol("a")

    assert excinfo.value.name == "Missing"
    assert excinfo.value.keys == ("a",)


def test_resolve_symbol_without_resolver() -> None:
    accessor = MappingAccessor(CacheStore({"a": Scalar("X")}))

    with pytest.raises(SymbolResolutionError, match="no symbol resolver"):
        accessor.resolve_symbol("a")
