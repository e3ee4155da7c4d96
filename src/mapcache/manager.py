"""Startup control flow for the mapping cache.

On ``init`` the manager either loads the persisted mappings and checks them
against the installed build, or, when nothing is persisted, regenerates them
in the background and asks the host to restart once they are written.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Any

from mapcache.accessors import MappingAccessor
from mapcache.constants.cache import DECISION_STALE, INIT_LOADED, INIT_REGENERATING, INIT_STALE, VERSION_FIELD
from mapcache.constants.messages import (
    GENERATED_MESSAGE,
    GENERATING_MESSAGE,
    GENERATION_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    STALE_MESSAGE,
)
from mapcache.constants.storage import KIND_MAPPINGS
from mapcache.exceptions import CorruptDataError, StorageIOError
from mapcache.model import BoundMappingSet, Value
from mapcache.persistence import check_version, decode
from mapcache.protocols import (
    AnalysisEngine,
    BinaryVersionProvider,
    RestartTrigger,
    StorageBridge,
    SymbolResolver,
    UserNotifier,
)
from mapcache.regeneration import RegenerationOrchestrator
from mapcache.store import CacheStore
from mapcache.types import InitOutcome

logger = logging.getLogger(__name__)


class MappingManager:
    """Owns the live mapping store for one process run."""

    def __init__(
        self,
        *,
        version_provider: BinaryVersionProvider,
        storage: StorageBridge,
        engine: AnalysisEngine,
        restart: RestartTrigger,
        notifier: UserNotifier,
        binary_path: str,
        resolver: SymbolResolver | None = None,
        version_field: str = VERSION_FIELD,
        orchestrator: RegenerationOrchestrator | None = None,
    ) -> None:
        self._version_provider = version_provider
        self._storage = storage
        self._restart = restart
        self._notifier = notifier
        self._binary_path = binary_path
        self._version_field = version_field
        self._orchestrator = orchestrator or RegenerationOrchestrator(engine, storage, version_field=version_field)

        self._store = CacheStore()
        self._accessor = MappingAccessor(self._store, resolver)
        self._bound: BoundMappingSet | None = None
        self._future: Future[BoundMappingSet] | None = None
        self._settled = threading.Event()

    @property
    def accessor(self) -> MappingAccessor:
        return self._accessor

    @property
    def bound(self) -> BoundMappingSet | None:
        """The mapping set loaded for this run, if any."""
        return self._bound

    @property
    def are_mappings_loaded(self) -> bool:
        return self._store.is_populated()

    def init(self) -> InitOutcome:
        """Load or regenerate mappings for the current build."""
        current = self._version_provider.current_version()

        if self._storage.exists(KIND_MAPPINGS):
            loaded = self._load_cached()
            if check_version(loaded, current) == DECISION_STALE:
                # The stale store stays readable until the restart happens.
                self._storage.delete(KIND_MAPPINGS)
                self._notifier.progress(STALE_MESSAGE.format(cached=loaded.version, current=current))
                self._request_restart()
                return INIT_STALE
            return INIT_LOADED

        self._notifier.progress(GENERATING_MESSAGE)
        future = self._orchestrator.submit(self._binary_path, current)
        self._future = future
        future.add_done_callback(self._on_regenerated)
        return INIT_REGENERATING

    def wait_for_regeneration(self, timeout: float | None = None) -> BoundMappingSet | None:
        """Block until background regeneration has settled and return its result.

        Returns ``None`` when no regeneration was started. A failed
        regeneration re-raises its error here.
        """
        if self._future is None:
            return None
        if not self._settled.wait(timeout):
            raise TimeoutError("Mapping regeneration did not finish in time")
        return self._future.result()

    def close(self) -> None:
        self._orchestrator.shutdown(wait=True)

    def _load_cached(self) -> BoundMappingSet:
        try:
            loaded = decode(self._storage.read(KIND_MAPPINGS), version_field=self._version_field)
        except (StorageIOError, CorruptDataError) as exc:
            logger.error("Failed to load cached mappings", exc_info=exc)
            self._notifier.error(LOAD_FAILED_MESSAGE.format(error=exc))
            raise

        self._store.populate(loaded.store.snapshot())
        self._bound = BoundMappingSet(version=loaded.version, store=self._store)
        logger.debug("Loaded %d cached mappings for build %d", len(self._store), loaded.version)
        return self._bound

    def _on_regenerated(self, future: Future[BoundMappingSet]) -> None:
        try:
            error = future.exception()
            if error is not None:
                logger.error("Failed to generate mappings", exc_info=error)
                self._notifier.fatal(GENERATION_FAILED_MESSAGE.format(error=error))
                return
            generated = future.result()
            self._notifier.success(GENERATED_MESSAGE.format(version=generated.version))
            self._request_restart()
        finally:
            self._settled.set()

    def _request_restart(self) -> None:
        logger.info("Requesting soft restart")
        self._restart.request_soft_restart()

    # Accessor passthroughs.

    def get_value(self, key: str) -> Value:
        return self._accessor.get_value(key)

    def get_optional_value(self, key: str) -> Value | None:
        return self._accessor.get_optional_value(key)

    def get_string(self, key: str, sub_key: str | None = None) -> str:
        return self._accessor.get_string(key, sub_key)

    def get_list(self, key: str) -> list[Value]:
        return self._accessor.get_list(key)

    def get_map(self, key: str) -> dict[str, Value]:
        return self._accessor.get_map(key)

    def resolve_symbol(self, key: str, sub_key: str | None = None) -> Any:
        return self._accessor.resolve_symbol(key, sub_key)
