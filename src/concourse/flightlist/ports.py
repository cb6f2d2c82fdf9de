"""Capabilities the flight list needs from elsewhere."""

import abc


class PassengerNavigator(abc.ABC):
    """Opens the passenger-flow screens for a chosen flight."""

    @abc.abstractmethod
    def open_passenger_details(self) -> None:
        """Show the passenger details screen."""

    @abc.abstractmethod
    def open_seat_selection(self) -> None:
        """Show the seat selection screen."""
