"""Composite analysis engine built from mapper callables.

A mapper receives the loaded artifact and the shared result object and adds
its own keys to it. The engine runs every registered mapper in order and
returns the merged result.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, MutableMapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from mapcache.exceptions import AnalysisLoadError, ConfigError
from mapcache.protocols import AnalysisEngine
from mapcache.types import JsonObject, JsonValue

logger = logging.getLogger(__name__)

Mapper: TypeAlias = Callable[["LoadedArtifact", MutableMapping[str, JsonValue]], None]


@dataclass(frozen=True)
class LoadedArtifact:
    """Raw bytes of a binary artifact and where they came from."""

    path: Path
    data: bytes


class MapperEngine:
    """Analysis engine running named mappers over one artifact."""

    def __init__(self, mappers: Sequence[tuple[str, Mapper]]) -> None:
        self.mappers = tuple(mappers)

    def load_artifact(self, path: str) -> LoadedArtifact:
        artifact_path = Path(path)
        try:
            data = artifact_path.read_bytes()
        except OSError as exc:
            raise AnalysisLoadError(f"Failed to load artifact {artifact_path}: {exc}") from exc
        logger.debug("Loaded artifact %s (%d bytes)", artifact_path, len(data))
        return LoadedArtifact(path=artifact_path, data=data)

    def analyze(self, handle: LoadedArtifact) -> JsonObject:
        result: JsonObject = {}
        for name, mapper in self.mappers:
            before = len(result)
            mapper(handle, result)
            logger.debug("Mapper %s produced %d mappings", name, len(result) - before)
        return result


def load_engine(target_path: str) -> AnalysisEngine:
    """Import an engine from ``module:attr``; a callable attribute is called with no arguments."""
    module_name, sep, attr = target_path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"engine must look like 'module:attr', got {target_path!r}")
    try:
        target = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise ConfigError(f"Cannot import analysis engine {target_path!r}: {exc}") from exc

    is_factory = isinstance(target, type) or (callable(target) and not _is_engine(target))
    engine = target() if is_factory else target
    if not _is_engine(engine):
        raise ConfigError(f"{target_path!r} does not provide load_artifact() and analyze()")
    return engine


def _is_engine(candidate: object) -> bool:
    return callable(getattr(candidate, "load_artifact", None)) and callable(getattr(candidate, "analyze", None))
