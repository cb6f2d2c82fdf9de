"""Adapter giving the flight list its passenger navigation capability."""

from concourse.flightlist.ports import PassengerNavigator
from concourse.passenger.navigation import PassengerNavigationService

from .delegation import delegating


class PassengerNavigatorAdapter(PassengerNavigator):
    """Implements `PassengerNavigator` by forwarding to a `PassengerNavigationService`."""

    def __init__(self, service: PassengerNavigationService) -> None:
        self._service = service

    def open_passenger_details(self) -> None:
        with delegating(PassengerNavigator, "open_passenger_details"):
            self._service.navigate_to_passenger_details()

    def open_seat_selection(self) -> None:
        with delegating(PassengerNavigator, "open_seat_selection"):
            self._service.navigate_to_seat_selection()
