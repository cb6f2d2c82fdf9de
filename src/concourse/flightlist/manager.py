"""Flight list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from concourse.interfaces.errors import CapabilityError
from concourse.interfaces.outcome import Outcome

from .errors import UnknownFlightError
from .ports import PassengerNavigator

logger = logging.getLogger(__name__)

DEFAULT_FLIGHTS: tuple[str, ...] = ("Flight1", "Flight2", "Flight3")


class FlightListManager:
    """Lists flights and hands the chosen one over to the passenger flow.

    Args:
        navigation: Capability that opens the passenger-flow screens.
        flights: Flight ids on offer, in display order.
    """

    def __init__(
        self, navigation: PassengerNavigator, flights: Iterable[str] = DEFAULT_FLIGHTS
    ) -> None:
        self._navigation = navigation
        self._flights = tuple(flights)
        self._selected: str | None = None

    @property
    def selected_flight(self) -> str | None:
        """The most recently selected flight."""
        return self._selected

    def list_flights(self) -> list[str]:
        return list(self._flights)

    def select_flight(self, flight_id: str) -> Outcome[str]:
        """Select a flight and open the passenger details screen."""
        outcome = self._open(flight_id, self._navigation.open_passenger_details)
        if outcome.ok:
            self._selected = flight_id
            logger.info("Flight %s selected", flight_id)
        return outcome

    def show_flight_details(self, flight_id: str) -> Outcome[str]:
        """Show a flight's details, continuing to seat selection."""
        return self._open(flight_id, self._navigation.open_seat_selection)

    def _open(self, flight_id: str, navigate: Callable[[], None]) -> Outcome[str]:
        if flight_id not in self._flights:
            cause = UnknownFlightError(flight_id)
            logger.warning("%s", cause)
            return Outcome.failed(cause)
        try:
            navigate()
        except CapabilityError as exc:
            logger.warning("Navigation for flight %s failed: %s", flight_id, exc)
            return Outcome.failed(exc)
        return Outcome.completed(flight_id)
