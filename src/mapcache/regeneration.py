"""Regenerate mappings from the binary artifact and persist them."""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor

from mapcache.constants.cache import VERSION_FIELD
from mapcache.constants.storage import KIND_MAPPINGS
from mapcache.exceptions import AnalysisError, AnalysisLoadError, MapCacheError
from mapcache.model import BoundMappingSet
from mapcache.persistence import decode, encode_result
from mapcache.protocols import AnalysisEngine, StorageBridge

logger = logging.getLogger(__name__)


def regenerate(
    *,
    engine: AnalysisEngine,
    storage: StorageBridge,
    binary_path: str,
    current_version: int,
    version_field: str = VERSION_FIELD,
) -> BoundMappingSet:
    """Analyze ``binary_path``, persist the version-bound result and return it.

    Blocking. Nothing is written to storage unless analysis and encoding both
    succeed.
    """
    try:
        handle = engine.load_artifact(binary_path)
    except AnalysisLoadError:
        raise
    except Exception as exc:
        raise AnalysisLoadError(f"Failed to load artifact {binary_path}: {exc}") from exc

    started_at = time.perf_counter()
    try:
        result = engine.analyze(handle)
    except MapCacheError:
        raise
    except Exception as exc:
        raise AnalysisError(f"Analysis of {binary_path} failed: {exc!r}") from exc
    data = encode_result(result, version=current_version, version_field=version_field)
    storage.write(KIND_MAPPINGS, data)
    elapsed_ms = (time.perf_counter() - started_at) * 1000
    logger.info("Generated mappings in %d ms", elapsed_ms)

    return decode(data, version_field=version_field)


class RegenerationOrchestrator:
    """Runs :func:`regenerate` on a background worker thread."""

    def __init__(
        self,
        engine: AnalysisEngine,
        storage: StorageBridge,
        *,
        version_field: str = VERSION_FIELD,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._engine = engine
        self._storage = storage
        self._version_field = version_field
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="mapcache-regen")

    def submit(self, binary_path: str, current_version: int) -> Future[BoundMappingSet]:
        """Schedule regeneration and return a future for its outcome."""
        logger.debug("Scheduling mapping regeneration for %s (build %d)", binary_path, current_version)
        return self._executor.submit(
            regenerate,
            engine=self._engine,
            storage=self._storage,
            binary_path=binary_path,
            current_version=current_version,
            version_field=self._version_field,
        )

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
