"""Configuration-related exceptions."""

from __future__ import annotations

from mapcache.exceptions.base import MapCacheError


class ConfigError(MapCacheError, ValueError):
    """Raised when mapcache configuration is invalid."""
