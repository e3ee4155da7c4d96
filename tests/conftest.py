"""Shared pytest fixtures and test doubles for mapcache collaborators."""

from __future__ import annotations

from typing import Any

import pytest

from mapcache.bridge import RecordingRestartTrigger
from mapcache.exceptions import AnalysisLoadError, StorageIOError, SymbolResolutionError
from mapcache.types import FileKind, JsonObject


class MemoryStorage:
    """Storage bridge keeping files in a dict."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})
        self.writes: list[tuple[str, bytes]] = []
        self.deletes: list[str] = []
        self.fail_reads = False

    def exists(self, kind: FileKind) -> bool:
        return kind in self.files

    def read(self, kind: FileKind) -> bytes:
        if self.fail_reads or kind not in self.files:
            raise StorageIOError(f"cannot read {kind}")
        return self.files[kind]

    def write(self, kind: FileKind, data: bytes) -> None:
        self.writes.append((kind, data))
        self.files[kind] = data

    def delete(self, kind: FileKind) -> None:
        self.deletes.append(kind)
        self.files.pop(kind, None)


class FakeEngine:
    """Analysis engine returning a canned result."""

    def __init__(self, result: JsonObject | None = None, *, load_error: Exception | None = None) -> None:
        self.result = result if result is not None else {}
        self.load_error = load_error
        self.loaded: list[str] = []

    def load_artifact(self, path: str) -> str:
        if self.load_error is not None:
            raise self.load_error
        self.loaded.append(path)
        return path

    def analyze(self, handle: Any) -> JsonObject:
        return dict(self.result)


class RecordingNotifier:
    """Notifier capturing every message by level."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def progress(self, message: str) -> None:
        self.messages.append(("progress", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def fatal(self, message: str) -> None:
        self.messages.append(("fatal", message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.messages]


class DictResolver:
    """Symbol resolver backed by a dict."""

    def __init__(self, symbols: dict[str, object]) -> None:
        self.symbols = symbols

    def resolve(self, name: str) -> object:
        try:
            return self.symbols[name]
        except KeyError as exc:
            raise SymbolResolutionError(name) from exc


@pytest.fixture
def make_storage() -> type[MemoryStorage]:
    """Factory for storage doubles preloaded with files."""
    return MemoryStorage


@pytest.fixture
def make_engine() -> type[FakeEngine]:
    """Factory for engines returning a given result."""
    return FakeEngine


@pytest.fixture
def make_resolver() -> type[DictResolver]:
    return DictResolver


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_notifier() -> type[RecordingNotifier]:
    return RecordingNotifier


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def restart() -> RecordingRestartTrigger:
    return RecordingRestartTrigger()


@pytest.fixture
def sample_result() -> JsonObject:
    """Analysis output with one entry of each value shape."""
    return {
        "a": "X",
        "b": [1, 2, 3],
        "c": {"k": "v"},
    }


@pytest.fixture
def failing_engine() -> FakeEngine:
    return FakeEngine(load_error=AnalysisLoadError("artifact missing"))
