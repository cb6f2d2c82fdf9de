"""Errors raised while validating a seat selection."""


class SeatSelectionError(Exception):
    """Base class for seat selection errors.

    Attributes:
        seat_id (str): The seat that could not be selected.
    """

    def __init__(self, message: str, seat_id: str) -> None:
        super().__init__(message)
        self.seat_id = seat_id


class UnknownSeatError(SeatSelectionError):
    """Raised when the requested seat is not on the seat map."""

    def __init__(self, seat_id: str) -> None:
        super().__init__(f"Seat '{seat_id}' is not on the seat map.", seat_id)


class SeatUnavailableError(SeatSelectionError):
    """Raised when the requested seat is already held by a passenger.

    Attributes:
        seat_id (str): The requested seat.
        holder (str): The passenger currently holding it.
    """

    def __init__(self, seat_id: str, holder: str) -> None:
        super().__init__(
            f"Seat '{seat_id}' is already held by passenger '{holder}'.", seat_id
        )
        self.holder = holder
