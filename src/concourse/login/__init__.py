"""Login module: in-memory implementations of the login API.

Provider module. Implements `concourse.login_api` and knows nothing about
the modules that consume it.
"""

from .navigation import LoginNavigator
from .service import InMemoryAuthService

__all__ = ["InMemoryAuthService", "LoginNavigator"]
