"""Config loading and validation for mapcache."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from mapcache.config.model import MapCacheConfig
from mapcache.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_RESERVED_FIELD,
    DEFAULT_STORAGE_DIR,
)
from mapcache.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> MapCacheConfig:
    """Load config from ``mapcache.yaml`` under ``root`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MapCacheConfig(root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(_unknown_key_message(unknown[0]))

    reserved_field = _optional_string(raw, "reserved_field") or DEFAULT_RESERVED_FIELD
    engine = _optional_string(raw, "engine")
    if engine is not None and ":" not in engine:
        raise ConfigError("engine must look like 'module:attr'")

    return MapCacheConfig(
        root=root,
        storage_dir=_optional_string(raw, "storage_dir") or DEFAULT_STORAGE_DIR,
        binary_path=_optional_string(raw, "binary_path"),
        version_file=_optional_string(raw, "version_file"),
        version_field=_optional_string(raw, "version_field"),
        reserved_field=reserved_field,
        engine=engine,
        symbols_prefix=_optional_string(raw, "symbols_prefix") or "",
    )


def _optional_string(raw: dict[str, Any], key_name: str) -> str | None:
    """Return a stripped string value, ``None`` when unset, or raise ConfigError."""
    value = raw.get(key_name)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _unknown_key_message(key: str) -> str:
    suggestions = difflib.get_close_matches(key, sorted(CONFIG_ALLOWED_KEYS), n=1)
    if suggestions:
        return f"Unknown config key {key!r} (did you mean {suggestions[0]!r}?)"
    return f"Unknown config key {key!r}"
