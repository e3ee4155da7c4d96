"""Binary version providers."""

from __future__ import annotations

import json
from pathlib import Path

from mapcache.exceptions import VersionUnavailableError


class StaticVersionProvider:
    """Reports a fixed version, e.g. one passed on the command line."""

    def __init__(self, version: int) -> None:
        self.version = version

    def current_version(self) -> int:
        return self.version


class FileVersionProvider:
    """Reads the host version from a metadata file.

    With ``field`` unset the file must contain a bare integer; otherwise it
    is parsed as a JSON object and ``field`` is read from it.
    """

    def __init__(self, path: Path, field: str | None = None) -> None:
        self.path = path
        self.field = field

    def current_version(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise VersionUnavailableError(f"Cannot read version metadata {self.path}: {exc}") from exc

        raw: object = text.strip()
        if self.field is not None:
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as exc:
                raise VersionUnavailableError(f"Version metadata {self.path} is not valid JSON: {exc}") from exc
            if not isinstance(payload, dict) or self.field not in payload:
                raise VersionUnavailableError(f"Version metadata {self.path} has no field {self.field!r}")
            raw = payload[self.field]

        return _coerce_version(raw, self.path)


def _coerce_version(raw: object, path: Path) -> int:
    if isinstance(raw, bool):
        raise VersionUnavailableError(f"Version in {path} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            pass
    raise VersionUnavailableError(f"Version in {path} must be an integer, got {raw!r}")
