"""Directory-backed storage bridge."""

from __future__ import annotations

import logging
from pathlib import Path

from mapcache.constants.storage import FILE_NAMES, STORAGE_TEMP_PREFIX, STORAGE_TEMP_SUFFIX
from mapcache.exceptions import StorageIOError
from mapcache.io import write_bytes_atomic
from mapcache.types import FileKind

logger = logging.getLogger(__name__)


class FileStorageBridge:
    """Stores each managed file kind as one file under ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, kind: FileKind) -> Path:
        try:
            return self.root / FILE_NAMES[kind]
        except KeyError as exc:
            raise StorageIOError(f"Unknown file kind: {kind!r}") from exc

    def exists(self, kind: FileKind) -> bool:
        return self.path_for(kind).is_file()

    def read(self, kind: FileKind) -> bytes:
        path = self.path_for(kind)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageIOError(f"Failed to read {path}: {exc}") from exc

    def write(self, kind: FileKind, data: bytes) -> None:
        path = self.path_for(kind)
        try:
            write_bytes_atomic(
                path=path,
                data=data,
                temp_prefix=STORAGE_TEMP_PREFIX,
                temp_suffix=STORAGE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise StorageIOError(f"Failed to write {path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def delete(self, kind: FileKind) -> None:
        path = self.path_for(kind)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageIOError(f"Failed to delete {path}: {exc}") from exc
        logger.debug("Deleted %s", path)
