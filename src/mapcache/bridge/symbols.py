"""Symbol resolution through the import system."""

from __future__ import annotations

import importlib
from typing import Any

from mapcache.exceptions import SymbolResolutionError


class ImportSymbolResolver:
    """Resolves ``pkg.module:attr`` or dotted ``pkg.module.attr`` names.

    A dotted name without ``:`` is split at the longest importable module
    prefix. ``prefix`` is prepended to every name before resolution.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def resolve(self, name: str) -> Any:
        target = f"{self.prefix}{name}"
        if not target or target.startswith((".", ":")):
            raise SymbolResolutionError(target, reason="expected an absolute module path")

        module_name, sep, attr_path = target.partition(":")
        if sep:
            return _walk(_import(module_name, target), attr_path, target)

        parts = target.split(".")
        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            except (ValueError, TypeError) as exc:
                raise SymbolResolutionError(target, reason=str(exc)) from exc
            return _walk(module, ".".join(parts[split:]), target)
        raise SymbolResolutionError(target, reason="no importable module")


def _import(module_name: str, target: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError) as exc:
        raise SymbolResolutionError(target, reason=str(exc)) from exc


def _walk(obj: Any, attr_path: str, target: str) -> Any:
    for attr in filter(None, attr_path.split(".")):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise SymbolResolutionError(target, reason=str(exc)) from exc
    return obj
