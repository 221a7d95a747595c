import logging
from dataclasses import dataclass
from typing import Callable, Optional

from models.views import GateStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthCapability:
    """What the auth subsystem tells us about the current session."""
    token: Optional[str] = None
    is_authenticated: bool = False
    is_loading: bool = True


class AuthGate:
    """
    Keeps protected content hidden until the session is known.

    - while auth is loading -> LOADING, nothing may be fetched
    - resolved, not authenticated -> REDIRECT (the redirect callback runs once)
    - resolved, authenticated -> OPEN

    Once resolved the gate never reports LOADING again, even if the
    capability does.
    """

    def __init__(self, capability: Callable[[], AuthCapability],
                 redirect: Callable[[str], None], login_path: str = "/login"):
        self._capability = capability
        self._redirect = redirect
        self.login_path = login_path
        self._resolved = False
        self._redirected = False

    def check(self) -> GateStatus:
        auth = self._capability()

        if auth.is_loading and not self._resolved:
            return GateStatus.LOADING
        self._resolved = True

        if not auth.is_authenticated:
            if not self._redirected:
                self._redirected = True
                logger.info(f"Session is not authenticated, redirecting to {self.login_path}")
                self._redirect(self.login_path)
            return GateStatus.REDIRECT

        return GateStatus.OPEN

    @property
    def token(self) -> Optional[str]:
        return self._capability().token
