"""Seat module: seat map and seat selection.

Consumer module. Selecting a seat records the passenger's default baggage
allowance through the `BaggageRecorder` capability declared in `ports`; the
module never refers to whichever module actually records baggage.
"""

from .errors import SeatSelectionError, SeatUnavailableError, UnknownSeatError
from .manager import DEFAULT_BAGGAGE_KG, DEFAULT_SEAT_MAP, SeatManager
from .ports import BaggageRecorder

__all__ = [
    "DEFAULT_BAGGAGE_KG",
    "DEFAULT_SEAT_MAP",
    "BaggageRecorder",
    "SeatManager",
    "SeatSelectionError",
    "SeatUnavailableError",
    "UnknownSeatError",
]
