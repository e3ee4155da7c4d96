"""Constants for the persisted mapping cache."""

from __future__ import annotations

from typing import Final

VERSION_FIELD: str = "build_number"
MAPPINGS_ENCODING: str = "utf-8"

DECISION_VALID: Final = "valid"
DECISION_STALE: Final = "stale"

INIT_LOADED: Final = "loaded"
INIT_STALE: Final = "stale"
INIT_REGENERATING: Final = "regenerating"

KIND_SCALAR: str = "scalar"
KIND_LIST: str = "list"
KIND_MAP: str = "map"
