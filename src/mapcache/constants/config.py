"""Configuration defaults and filenames."""

from __future__ import annotations

from mapcache.constants.cache import VERSION_FIELD

CONFIG_FILENAME: str = "mapcache.yaml"
DEFAULT_STORAGE_DIR: str = ".mapcache"
DEFAULT_RESERVED_FIELD: str = VERSION_FIELD

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "storage_dir",
        "binary_path",
        "version_file",
        "version_field",
        "reserved_field",
        "engine",
        "symbols_prefix",
    }
)
