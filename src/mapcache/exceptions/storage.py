"""Persistence and host-collaborator exceptions."""

from __future__ import annotations

from mapcache.exceptions.base import MapCacheError


class StorageIOError(MapCacheError, OSError):
    """Raised when persisted bytes cannot be read, written, or deleted."""


class CorruptDataError(MapCacheError, ValueError):
    """Raised when persisted bytes are malformed or lack the expected shape."""


class VersionUnavailableError(MapCacheError):
    """Raised when the current binary version cannot be determined."""


class AnalysisLoadError(MapCacheError):
    """Raised when the analysis engine cannot open the binary artifact."""


class AnalysisError(MapCacheError, RuntimeError):
    """Raised when analyzing a loaded artifact fails."""


class StoreAlreadyPopulatedError(MapCacheError, RuntimeError):
    """Raised when a populated cache store is populated a second time."""
