"""Flight list module: browsing and choosing flights.

Consumer module. Choosing a flight moves the user into the passenger flow
through the `PassengerNavigator` capability declared in `ports`.
"""

from .errors import UnknownFlightError
from .manager import DEFAULT_FLIGHTS, FlightListManager
from .ports import PassengerNavigator

__all__ = ["DEFAULT_FLIGHTS", "FlightListManager", "PassengerNavigator", "UnknownFlightError"]
