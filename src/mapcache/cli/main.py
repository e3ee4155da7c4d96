"""CLI entrypoint for mapcache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mapcache import __version__
from mapcache.cli.handlers import handle_get, handle_init, handle_invalidate, handle_status
from mapcache.constants.messages import CLI_DESCRIPTION, EXIT_CONFIG_ERROR, EXIT_ERROR
from mapcache.exceptions import ConfigError, MapCacheError


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="mapcache",
        description=CLI_DESCRIPTION,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Load cached mappings or regenerate them")
    _add_common_arguments(init)
    init.add_argument("-b", "--binary", type=Path, default=None, help="Binary artifact to analyze")
    init.add_argument("-e", "--engine", default=None, help="Analysis engine as module:attr")
    init.add_argument(
        "-n",
        "--version-number",
        type=int,
        default=None,
        help="Current binary version (overrides version_file from config)",
    )

    get = subparsers.add_parser("get", help="Print one cached mapping as JSON")
    _add_common_arguments(get)
    get.add_argument("key", help="Mapping key")
    get.add_argument("sub_key", nargs="?", default=None, help="Key inside a map mapping")

    status = subparsers.add_parser("status", help="Show the persisted mapping cache state")
    _add_common_arguments(status)
    status.add_argument("-n", "--version-number", type=int, default=None, help="Current binary version")

    invalidate = subparsers.add_parser("invalidate", help="Delete the persisted mappings")
    _add_common_arguments(invalidate)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "init": handle_init,
        "get": handle_get,
        "status": handle_status,
        "invalidate": handle_invalidate,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except MapCacheError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
