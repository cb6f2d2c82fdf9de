"""CONCOURSE application commands.

Every command composes a fresh application through `concourse.bootstrap`
with settings read from ``CONCOURSE_*`` environment variables; nothing is
persisted between invocations. Results go to stdout; status lines go to
stderr through the message helpers.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

import click

from concourse.bootstrap import AppContainer, bootstrap
from concourse.boundaries import check_boundaries, default_package_root
from concourse.config import InvalidSettingError, Settings
from concourse.interfaces.errors import PreconditionViolation
from concourse.logging import log_composition

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

DEMO_SELECTIONS = (("1A", "passenger123"), ("2B", "passenger456"))
DEMO_FEE_WEIGHT_KG = 25.0


def _bootstrap_from_env() -> AppContainer:
    try:
        settings = Settings.from_env()
    except InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    app = bootstrap(settings)
    log_composition(logger, asdict(app.settings), app.wiring())
    return app


@click.command()
def demo() -> None:
    """Select seats, list baggage and price a bag on a freshly composed app."""
    app = _bootstrap_from_env()

    for seat_id, passenger_id in DEMO_SELECTIONS:
        outcome = app.seats.select_seat(seat_id, passenger_id)
        if outcome.ok:
            click.echo(f"Seat {seat_id} selected for {passenger_id}")
        else:
            warn(f"Seat {seat_id} not selected for {passenger_id}: {outcome.cause}")

    baggage = app.providers.baggage
    first_passenger = DEMO_SELECTIONS[0][1]
    click.echo(f"Seat map: {', '.join(app.seats.seat_map())}")
    click.echo(f"Selected seats: {', '.join(app.seats.selected_seats())}")
    click.echo(f"Seat 1B available: {'yes' if app.seats.is_seat_available('1B') else 'no'}")
    click.echo(
        f"Baggage for {first_passenger}: "
        f"{', '.join(baggage.list_baggage(first_passenger)) or '<none>'}"
    )
    click.echo(
        f"Baggage fee for {DEMO_FEE_WEIGHT_KG:.1f} kg: "
        f"{baggage.calculate_fee(DEMO_FEE_WEIGHT_KG):.2f}"
    )
    success("Seat -> baggage delegation went through the composition root.")


@click.command()
@click.argument("weight", type=float)
def fee(weight: float) -> None:
    """Print the baggage fee for WEIGHT kilograms."""
    app = _bootstrap_from_env()
    try:
        amount = app.providers.baggage.calculate_fee(weight)
    except PreconditionViolation as e:
        raise click.BadParameter(str(e), param_hint="WEIGHT") from e
    click.echo(f"{amount:.2f}")


@click.command()
def wiring() -> None:
    """Show the capability each consumer needs and what implements it."""
    app = _bootstrap_from_env()
    for entry in app.wiring():
        click.echo(str(entry))


@click.command("check-boundaries")
def check_boundaries_cmd() -> None:
    """Fail if any module imports code it must only reach through a capability."""
    root = default_package_root()
    if violations := check_boundaries(root):
        for violation in violations:
            error(str(violation))
        raise click.ClickException(f"{len(violations)} boundary violation(s) found.")
    success(f"No boundary violations in {root}.")
