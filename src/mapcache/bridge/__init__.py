"""Concrete collaborators for running mapcache outside a host UI."""

from .host import LoggingNotifier, RecordingRestartTrigger
from .storage import FileStorageBridge
from .symbols import ImportSymbolResolver
from .version import FileVersionProvider, StaticVersionProvider

__all__ = [
    "FileStorageBridge",
    "FileVersionProvider",
    "ImportSymbolResolver",
    "LoggingNotifier",
    "RecordingRestartTrigger",
    "StaticVersionProvider",
]
