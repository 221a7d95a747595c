import logging
from collections import OrderedDict
from typing import Callable, Optional

import httpx

from services.auth_gate import AuthCapability, AuthGate
from services.controller import RecommendationsController

logger = logging.getLogger(__name__)


def _ignore_redirect(path: str) -> None:
    # The HTTP layer turns a REDIRECT view into a 307 itself
    return None


class SessionStore:
    """
    One recommendations controller per bearer token, kept in memory only.

    At most `max_sessions` controllers are kept; the least recently used one
    is dropped first. Anonymous callers get a throwaway controller whose gate
    redirects.
    """

    def __init__(self, api_base_url: str, login_path: str, contribution_url: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 on_redirect: Callable[[str], None] = _ignore_redirect,
                 max_sessions: int = 1000):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.api_base_url = api_base_url
        self.login_path = login_path
        self.contribution_url = contribution_url
        self.transport = transport
        self.on_redirect = on_redirect
        self.max_sessions = max_sessions
        self._controllers: "OrderedDict[str, RecommendationsController]" = OrderedDict()

    def _build(self, auth: AuthCapability) -> RecommendationsController:
        gate = AuthGate(lambda: auth, self.on_redirect, login_path=self.login_path)
        return RecommendationsController(
            gate,
            api_base_url=self.api_base_url,
            contribution_url=self.contribution_url,
            transport=self.transport,
        )

    def controller_for(self, token: Optional[str]) -> RecommendationsController:
        if not token:
            return self._build(AuthCapability(token=None, is_authenticated=False, is_loading=False))

        if token in self._controllers:
            self._controllers.move_to_end(token)
            return self._controllers[token]

        controller = self._build(AuthCapability(token=token, is_authenticated=True, is_loading=False))
        self._controllers[token] = controller
        while len(self._controllers) > self.max_sessions:
            self._controllers.popitem(last=False)
            logger.debug("Session store full, dropped the least recently used session")
        return controller

    def __contains__(self, token: str) -> bool:
        return token in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)
