"""Configuration loading for mapcache."""

from __future__ import annotations

from mapcache.config.loader import load_config
from mapcache.config.model import MapCacheConfig

__all__ = ["MapCacheConfig", "load_config"]
