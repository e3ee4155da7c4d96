"""Root of the mapcache exception hierarchy."""

from __future__ import annotations


class MapCacheError(Exception):
    """Base class for all mapcache errors."""
