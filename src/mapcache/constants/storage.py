"""File names managed by the storage bridge."""

from __future__ import annotations

from typing import Final

from mapcache.types.common import FileKind

KIND_MAPPINGS: Final = "mappings"

FILE_NAMES: dict[FileKind, str] = {
    "mappings": "mappings.json",
    "config": "config.json",
}

STORAGE_TEMP_PREFIX: str = ".bridge-"
STORAGE_TEMP_SUFFIX: str = ".tmp"
