"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

FileKind: TypeAlias = Literal["mappings", "config"]
Decision: TypeAlias = Literal["valid", "stale"]
InitOutcome: TypeAlias = Literal["loaded", "stale", "regenerating"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
