"""Host-side notifier and restart trigger for non-UI processes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Presents user messages through the logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def progress(self, message: str) -> None:
        self._log.info(message)

    def success(self, message: str) -> None:
        self._log.info(message)

    def error(self, message: str) -> None:
        self._log.error(message)

    def fatal(self, message: str) -> None:
        self._log.critical(message)


class RecordingRestartTrigger:
    """Records soft restart requests and optionally forwards them."""

    def __init__(self, on_restart: Callable[[], None] | None = None) -> None:
        self._on_restart = on_restart
        self._requested = threading.Event()

    @property
    def requested(self) -> bool:
        return self._requested.is_set()

    def request_soft_restart(self) -> None:
        self._requested.set()
        if self._on_restart is not None:
            self._on_restart()
