"""CONCOURSE CLI entry point.

Defines the top-level ``concourse`` command (via Click-Extra), configures
logging for the process, and registers the subcommands:

- ``concourse demo``: compose the application and run the booking scenario.
- ``concourse fee WEIGHT``: price a piece of baggage.
- ``concourse wiring``: show which implementation backs each capability.
- ``concourse check-boundaries``: verify no module imports another module's code.

Examples
    $ concourse --version
    $ concourse -v demo
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from concourse import __version__
from concourse.logging import console_handler, flight_recorder, log_startup

from .commands import check_boundaries_cmd, demo, fee, wiring
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """CONCOURSE command-line interface.

    CONCOURSE composes independently developed airline booking modules (seat
    selection, baggage, login, flight list, passengers) through capability
    interfaces, so that no module depends on another module's implementation.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with logger names and paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("concourse", appauthor=False)) / "latest.log",
    envvar="CONCOURSE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="CONCOURSE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "use_flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "with --force-flush."
    ),
    default=True,
    envvar="CONCOURSE_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="CONCOURSE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL of specific loggers (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable, or via CONCOURSE_LOGGER_LEVELS."
    ),
    default=("click_extra=WARNING",),
    envvar="CONCOURSE_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def concourse(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    use_flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CONCOURSE command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(console_handler(level, debug=debug, color=use_color))

    # 2) flight recorder
    if use_flight_recorder:
        handlers.append(
            flight_recorder(
                log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        version=__version__,
        console_level=level,
        handlers=handlers,
        recorder_path=log_path if use_flight_recorder else None,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


concourse.add_command(demo)
concourse.add_command(fee)
concourse.add_command(wiring)
concourse.add_command(check_boundaries_cmd)
