"""Process logging for the CONCOURSE command line.

Providers and consumers only call ``logging.getLogger(__name__)``; this module
decides where their records go when the CLI hosts them:

- the console (Rich, on stderr), where each record is tagged with the module
  that emitted it, e.g. ``[seat]``, ``[baggage]`` or ``[click_extra]``;
- the flight recorder, which keeps recent records at DEBUG granularity and
  writes them to a file once a WARNING arrives.

It also logs what the process was started with and, once a command has
composed the application, which implementation backs every capability.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

PACKAGE = "concourse"
ENV_PREFIX = "CONCOURSE_"

CONSOLE_FORMAT = "%(module_tag)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def module_of(logger_name: str) -> str:
    """Return the module a logger belongs to.

    ``concourse.seat.manager`` belongs to ``seat``; loggers outside the package
    belong to their top-level name (``click_extra.colorize`` -> ``click_extra``).
    """
    head, _, rest = logger_name.partition(".")
    if head == PACKAGE and rest:
        return rest.split(".", 1)[0]
    return head


class ModuleTagFilter(logging.Filter):
    """Set ``record.module_tag`` to the bracketed module name. Drops nothing."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.module_tag = f"[{module_of(record.name)}]"
        return True


def console_handler(
    level: int = logging.WARNING, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler.

    Args:
        level: Minimum level shown; debug mode always shows DEBUG.
        debug: Show times, full logger names and source paths instead of the
            module tag.
        color: Same meaning as click-extra's ``--color/--no-color``.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT)
    )
    handler.addFilter(ModuleTagFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = 2000,
    *,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a handler buffering `capacity` records for `path`.

    The buffer is written when a record at `flush_level` or above arrives, or
    on close when `flush_on_close` is set. The file (and its directory) only
    appear on the first write.
    """
    target = _RecorderFile(path)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


class _RecorderFile(logging.FileHandler):
    def __init__(self, path: Path) -> None:
        super().__init__(path, mode="w", encoding="utf-8", delay=True)

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def log_startup(
    logger: Logger,
    *,
    version: str,
    console_level: int,
    handlers: Iterable[logging.Handler],
    recorder_path: Path | None,
    logger_levels: Mapping[str, int],
    environ: Mapping[str, str] | None = None,
) -> None:
    """Log what the process was started with.

    One INFO line, then DEBUG details: the handlers, the per-logger overrides
    and every ``CONCOURSE_*`` variable the settings may read.

    Args:
        recorder_path: Flight recorder file, or None when it is disabled.
        environ: Mapping to read instead of `os.environ` (used by tests).
    """
    logger.info(
        "CONCOURSE %s: console=%s, flight-recorder=%s",
        version,
        logging.getLevelName(console_level),
        "ON" if recorder_path else "OFF",
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if recorder_path:
        logger.debug("Flight recorder file: %s", recorder_path)
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
    env = os.environ if environ is None else environ
    overrides = {k: v for k, v in sorted(env.items()) if k.startswith(ENV_PREFIX)}
    logger.debug("Environment: %s", overrides or "<no CONCOURSE_* variables>")


def log_composition(
    logger: Logger, settings: Mapping[str, object], wiring: Iterable[object]
) -> None:
    """Log the settings a command composed the application with, and its wiring.

    Args:
        settings: Setting name -> effective value.
        wiring: One entry per consumer requirement; each is logged with `str`.
    """
    logger.debug(
        "Settings: %s", ", ".join(f"{name}={value!r}" for name, value in settings.items())
    )
    for entry in wiring:
        logger.debug("Wired %s", entry)
