"""Home module: the landing screen's authentication flow.

Consumer module. Depends on `concourse.login_api` only; the concrete login
implementation is injected by the composition root.
"""

from .manager import HomeManager

__all__ = ["HomeManager"]
