"""Errors raised by the flight list."""


class UnknownFlightError(LookupError):
    """Raised when a flight id is not in the flight list.

    Attributes:
        flight_id (str): The requested flight.
    """

    def __init__(self, flight_id: str) -> None:
        super().__init__(f"Flight '{flight_id}' is not in the flight list.")
        self.flight_id = flight_id
