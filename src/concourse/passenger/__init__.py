"""Passenger module: passenger records and passenger-flow navigation.

Provider module. The flight list reaches its navigation only through a
capability adapter.
"""

from .manager import Passenger, PassengerManager
from .navigation import PassengerNavigationService, PassengerScreen

__all__ = [
    "Passenger",
    "PassengerManager",
    "PassengerNavigationService",
    "PassengerScreen",
]
