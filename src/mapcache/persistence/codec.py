"""Encode and decode version-bound mapping sets.

The persisted form is a single UTF-8 JSON object: one reserved integer field
carries the binary version, every other field is a mapping entry. Arrays
decode to list values, objects to map values and any other node to a scalar
holding the node's string form.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import jsonschema

from mapcache.constants.cache import MAPPINGS_ENCODING, VERSION_FIELD
from mapcache.exceptions import CorruptDataError
from mapcache.model import BoundMappingSet, value_from_node, value_to_node
from mapcache.store import CacheStore
from mapcache.types import JsonValue


@lru_cache(maxsize=8)
def mappings_schema(version_field: str) -> dict[str, Any]:
    """Return the JSON Schema for a persisted mappings object."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": [version_field],
        "properties": {version_field: {"type": "integer"}},
    }


def encode(bound: BoundMappingSet, *, version_field: str = VERSION_FIELD) -> bytes:
    """Serialize a bound mapping set to UTF-8 JSON bytes."""
    entries = bound.store.snapshot()
    if version_field in entries:
        raise CorruptDataError(f"Mapping key {version_field!r} collides with the reserved version field")

    payload: dict[str, JsonValue] = {version_field: bound.version}
    for key, value in entries.items():
        payload[key] = value_to_node(value)
    return _dump(payload)


def encode_result(result: object, *, version: int, version_field: str = VERSION_FIELD) -> bytes:
    """Attach ``version`` to a raw analysis result and serialize it."""
    if not isinstance(result, Mapping):
        raise CorruptDataError(f"Analysis result must be a JSON object, got {type(result).__name__}")
    if version_field in result:
        raise CorruptDataError(f"Analysis result already defines the reserved field {version_field!r}")

    payload = dict(result)
    payload[version_field] = version
    try:
        return _dump(payload)
    except (TypeError, ValueError) as exc:
        raise CorruptDataError(f"Analysis result is not JSON-encodable: {exc}") from exc


def decode(data: bytes, *, version_field: str = VERSION_FIELD) -> BoundMappingSet:
    """Parse persisted bytes into a bound mapping set."""
    try:
        text = data.decode(MAPPINGS_ENCODING)
        payload = json.loads(text, parse_float=str)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptDataError(f"Mappings are not well-formed JSON: {exc}") from exc

    try:
        jsonschema.validate(payload, mappings_schema(version_field))
    except jsonschema.ValidationError as exc:
        raise CorruptDataError(f"Mappings have an invalid shape: {exc.message}") from exc

    store = CacheStore()
    store.populate(
        {key: value_from_node(node) for key, node in payload.items() if key != version_field},
    )
    return BoundMappingSet(version=payload[version_field], store=store)


def _dump(payload: Mapping[str, object]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":")).encode(
        MAPPINGS_ENCODING
    )
