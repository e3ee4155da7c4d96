"""Staleness check for loaded mapping sets."""

from __future__ import annotations

import logging

from mapcache.constants.cache import DECISION_STALE, DECISION_VALID
from mapcache.model import BoundMappingSet
from mapcache.types import Decision

logger = logging.getLogger(__name__)


def check_version(loaded: BoundMappingSet, current: int) -> Decision:
    """Return ``"valid"`` when the loaded set was built for ``current``.

    A ``"stale"`` result does not touch the loaded store: the caller deletes
    the persisted copy and requests a restart, while this run keeps reading
    the data it already loaded.
    """
    if loaded.version == current:
        return DECISION_VALID
    logger.warning("Cached mappings target build %d but current build is %d", loaded.version, current)
    return DECISION_STALE
