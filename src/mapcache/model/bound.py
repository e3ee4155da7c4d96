"""Cache store bound to the binary version that produced it."""

from __future__ import annotations

from dataclasses import dataclass, field

from mapcache.store import CacheStore


@dataclass(frozen=True)
class BoundMappingSet:
    """A populated cache store paired with its binary version."""

    version: int
    store: CacheStore = field(default_factory=CacheStore)
