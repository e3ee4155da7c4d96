"""Shared exception hierarchy for mapcache."""

from __future__ import annotations

from .base import MapCacheError
from .config import ConfigError
from .lookup import MappingLookupError, MappingNotFoundError, MappingTypeError, SymbolResolutionError
from .storage import (
    AnalysisError,
    AnalysisLoadError,
    CorruptDataError,
    StorageIOError,
    StoreAlreadyPopulatedError,
    VersionUnavailableError,
)

__all__ = [
    "AnalysisError",
    "AnalysisLoadError",
    "ConfigError",
    "CorruptDataError",
    "MapCacheError",
    "MappingLookupError",
    "MappingNotFoundError",
    "MappingTypeError",
    "StorageIOError",
    "StoreAlreadyPopulatedError",
    "SymbolResolutionError",
    "VersionUnavailableError",
]
