"""User-facing messages and CLI exit codes."""

from __future__ import annotations

CLI_DESCRIPTION: str = "mapcache: version-bound mapping cache manager"

GENERATING_MESSAGE: str = "Generating mappings, please wait..."
GENERATED_MESSAGE: str = "Generated mappings for build {version}"
GENERATION_FAILED_MESSAGE: str = "Failed to generate mappings: {error}"
LOAD_FAILED_MESSAGE: str = "Failed to load cached mappings: {error}"
STALE_MESSAGE: str = "Mappings were generated for build {cached}, current build is {current}; restarting"

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2
# EX_TEMPFAIL: the host is expected to relaunch the process.
EXIT_RESTART_REQUESTED: int = 75
