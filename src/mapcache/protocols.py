"""Capability protocols for the collaborators mapcache depends on.

Each host concern (version lookup, file storage, analysis, restart, user
messages, symbol lookup) is passed in explicitly so tests can substitute
simple doubles.
"""

from __future__ import annotations

from typing import Any, Protocol

from mapcache.types import FileKind, JsonObject


class BinaryVersionProvider(Protocol):
    """Reports the version of the installed host binary."""

    def current_version(self) -> int:
        """Return the current version, raising ``VersionUnavailableError`` on failure."""
        ...


class StorageBridge(Protocol):
    """Byte storage for the files mapcache manages, addressed by kind."""

    def exists(self, kind: FileKind) -> bool: ...

    def read(self, kind: FileKind) -> bytes: ...

    def write(self, kind: FileKind, data: bytes) -> None: ...

    def delete(self, kind: FileKind) -> None: ...


class AnalysisEngine(Protocol):
    """Opaque engine deriving mappings from a binary artifact."""

    def load_artifact(self, path: str) -> Any:
        """Open the artifact, raising ``AnalysisLoadError`` if it cannot be loaded."""
        ...

    def analyze(self, handle: Any) -> JsonObject:
        """Run the analysis pass and return a JSON-compatible object."""
        ...


class RestartTrigger(Protocol):
    """Host-specific soft restart."""

    def request_soft_restart(self) -> None: ...


class UserNotifier(Protocol):
    """Best-effort presentation of progress and outcome messages."""

    def progress(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def fatal(self, message: str) -> None:
        """Show a message whose only available action is to close the host."""
        ...


class SymbolResolver(Protocol):
    """Resolves a mapped name to a live host symbol."""

    def resolve(self, name: str) -> Any:
        """Return the symbol, raising ``SymbolResolutionError`` if it is unknown."""
        ...
