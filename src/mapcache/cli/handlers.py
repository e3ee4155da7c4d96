"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys

from mapcache.accessors import MappingAccessor
from mapcache.analysis import MapperEngine, load_engine
from mapcache.bridge import (
    FileStorageBridge,
    FileVersionProvider,
    ImportSymbolResolver,
    LoggingNotifier,
    RecordingRestartTrigger,
    StaticVersionProvider,
)
from mapcache.config import MapCacheConfig, load_config
from mapcache.constants.messages import EXIT_ERROR, EXIT_OK, EXIT_RESTART_REQUESTED
from mapcache.constants.storage import KIND_MAPPINGS
from mapcache.exceptions import ConfigError, VersionUnavailableError
from mapcache.manager import MappingManager
from mapcache.model import BoundMappingSet
from mapcache.persistence import decode
from mapcache.protocols import AnalysisEngine, BinaryVersionProvider


def handle_init(args: argparse.Namespace) -> int:
    """Run the startup flow: load and check, or regenerate."""
    config = load_config(args.root, args.config)
    storage = FileStorageBridge(config.storage_path)
    restart = RecordingRestartTrigger()

    binary = args.binary or config.binary_file
    engine_path = args.engine or config.engine
    # Regeneration inputs are only required when nothing is persisted yet.
    engine: AnalysisEngine = MapperEngine(())
    if not storage.exists(KIND_MAPPINGS):
        if binary is None:
            raise ConfigError("binary_path is required to generate mappings")
        if engine_path is None:
            raise ConfigError("engine is required to generate mappings")
        engine = load_engine(engine_path)

    manager = MappingManager(
        version_provider=_version_provider(config, args.version_number),
        storage=storage,
        engine=engine,
        restart=restart,
        notifier=LoggingNotifier(),
        binary_path=str(binary or ""),
        resolver=ImportSymbolResolver(config.symbols_prefix),
        version_field=config.reserved_field,
    )
    try:
        outcome = manager.init()
        manager.wait_for_regeneration()
    finally:
        manager.close()

    if restart.requested:
        print(f"Restart required (mappings {outcome}).")
        return EXIT_RESTART_REQUESTED

    bound = manager.bound
    assert bound is not None
    print(f"Loaded {len(bound.store)} mappings for build {bound.version}.")
    return EXIT_OK


def handle_get(args: argparse.Namespace) -> int:
    """Print a single mapping as JSON."""
    config = load_config(args.root, args.config)
    bound = _load_persisted(config)
    if bound is None:
        print("No mappings have been generated.", file=sys.stderr)
        return EXIT_ERROR

    accessor = MappingAccessor(bound.store)
    if args.sub_key is None:
        value = accessor.get_value(args.key).to_plain()
    else:
        value = accessor.get_string(args.key, args.sub_key)
    print(json.dumps(value, indent=2, ensure_ascii=False))
    return EXIT_OK


def handle_status(args: argparse.Namespace) -> int:
    """Report whether mappings exist and which build they target."""
    config = load_config(args.root, args.config)
    bound = _load_persisted(config)

    try:
        current: int | str = _version_provider(config, args.version_number).current_version()
    except (ConfigError, VersionUnavailableError) as exc:
        current = f"unavailable ({exc})"

    print(f"Storage: {config.storage_path}")
    if bound is None:
        print("Mappings: missing")
    else:
        print(f"Mappings: {len(bound.store)} keys for build {bound.version}")
    print(f"Current build: {current}")
    return EXIT_OK


def handle_invalidate(args: argparse.Namespace) -> int:
    """Delete persisted mappings so the next init regenerates them."""
    config = load_config(args.root, args.config)
    storage = FileStorageBridge(config.storage_path)
    storage.delete(KIND_MAPPINGS)
    print(f"Deleted mappings in {config.storage_path}.")
    return EXIT_OK


def _load_persisted(config: MapCacheConfig) -> BoundMappingSet | None:
    storage = FileStorageBridge(config.storage_path)
    if not storage.exists(KIND_MAPPINGS):
        return None
    return decode(storage.read(KIND_MAPPINGS), version_field=config.reserved_field)


def _version_provider(config: MapCacheConfig, version_number: int | None) -> BinaryVersionProvider:
    if version_number is not None:
        return StaticVersionProvider(version_number)
    if config.version_path is None:
        raise ConfigError("version_file is required when --version-number is not given")
    return FileVersionProvider(config.version_path, config.version_field)
