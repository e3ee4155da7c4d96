"""Config data model for mapcache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mapcache.constants.config import DEFAULT_RESERVED_FIELD, DEFAULT_STORAGE_DIR


@dataclass(frozen=True)
class MapCacheConfig:
    """Resolved mapping cache config; relative paths are anchored at ``root``."""

    root: Path = Path(".")
    storage_dir: str = DEFAULT_STORAGE_DIR
    binary_path: str | None = None
    version_file: str | None = None
    version_field: str | None = None
    reserved_field: str = DEFAULT_RESERVED_FIELD
    engine: str | None = None
    symbols_prefix: str = ""

    @property
    def storage_path(self) -> Path:
        return self._resolve(self.storage_dir)

    @property
    def binary_file(self) -> Path | None:
        return self._resolve(self.binary_path) if self.binary_path else None

    @property
    def version_path(self) -> Path | None:
        return self._resolve(self.version_file) if self.version_file else None

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.root / path
