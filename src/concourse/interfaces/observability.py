"""Observability sink used by providers.

Providers report each operation as a log record. The sink is a collaborator
the operation must never depend on: a handler that raises from ``emit`` would
otherwise propagate into the provider call, so `EventLog` contains such
failures and counts them instead.
"""

from __future__ import annotations

import logging
import threading


class EventLog:
    """A logger wrapper whose emit failures never reach the caller.

    Args:
        logger: The logger records are sent to.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._dropped = 0
        self._lock = threading.Lock()

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def dropped(self) -> int:
        """Number of records lost because a handler failed."""
        return self._dropped

    def debug(self, msg: str, *args: object) -> None:
        self._emit(logging.DEBUG, msg, args)

    def info(self, msg: str, *args: object) -> None:
        self._emit(logging.INFO, msg, args)

    def warning(self, msg: str, *args: object) -> None:
        self._emit(logging.WARNING, msg, args)

    def _emit(self, level: int, msg: str, args: tuple[object, ...]) -> None:
        try:
            # stacklevel 3 attributes the record to the provider, not this wrapper
            self._logger.log(level, msg, *args, stacklevel=3)
        except Exception:  # pylint: disable=broad-except
            with self._lock:
                self._dropped += 1
