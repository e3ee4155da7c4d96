"""Shared type aliases for mapcache."""

from .common import Decision, FileKind, InitOutcome, JsonObject, JsonScalar, JsonValue

__all__ = [
    "Decision",
    "FileKind",
    "InitOutcome",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
