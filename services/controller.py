import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from models.recommendation import RecommendationResponse
from models.views import GateStatus, PageView, RenderBranch, TriggerView
from services import messages, presenter
from services.auth_gate import AuthGate
from services.classifier import classify
from services.recommendation_client import RecommendationClient, RecommendationRequestError

logger = logging.getLogger(__name__)

LOADING_SKELETONS = 3


@dataclass
class ControllerState:
    recommendations: Optional[RecommendationResponse] = None
    is_loading: bool = False
    error: Optional[str] = None
    career_preference: str = ""
    expanded_code: Optional[str] = None


class RecommendationsController:
    """
    State owner of the recommendations page.

    All mutation goes through the handlers below and happens on one event
    loop; the only await is the backend call inside fetch_recommendations.
    """

    def __init__(self, gate: AuthGate, api_base_url: str, contribution_url: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.gate = gate
        self.contribution_url = contribution_url
        self.client = RecommendationClient(api_base_url, transport=transport)
        self.state = ControllerState()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def set_career_preference(self, text: str) -> None:
        self.state.career_preference = text or ""

    async def fetch_recommendations(self, preference: Optional[str] = None) -> bool:
        """
        Runs one suggest round trip. Returns False when the call was ignored:
        a request is already in flight, the gate is not open, or there is no token.
        """
        if self.state.is_loading:
            logger.debug("Fetch ignored, a request is already in flight")
            return False

        if self.gate.check() is not GateStatus.OPEN:
            logger.debug("Fetch ignored, session is not open")
            return False

        token = self.gate.token
        if not token:
            logger.debug("Fetch ignored, no token")
            return False

        if preference is not None:
            self.state.career_preference = preference

        self.state.is_loading = True
        self.state.error = None
        try:
            response = await self.client.suggest(token, self.state.career_preference)
        except RecommendationRequestError as e:
            # Last good response stays visible next to the error
            self.state.error = e.message
        except Exception as e:
            logger.exception("Recommendation fetch failed unexpectedly")
            self.state.error = str(e) or messages.UNEXPECTED_ERROR
        else:
            self.state.recommendations = response
            codes = {rec.code for rec in response.recommendations}
            if self.state.expanded_code not in codes:
                self.state.expanded_code = None
        finally:
            self.state.is_loading = False

        return True

    def toggle_card(self, code: str) -> Optional[str]:
        self.state.expanded_code = presenter.toggle_expanded(self.state.expanded_code, code)
        return self.state.expanded_code

    def has_card(self, code: str) -> bool:
        response = self.state.recommendations
        if response is None or not response.fully_supported:
            return False
        return any(rec.code == code for rec in response.recommendations)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def branch(self) -> RenderBranch:
        return classify(self.state.is_loading, self.state.error, self.state.recommendations)

    def render(self) -> PageView:
        gate_status = self.gate.check()
        if gate_status is GateStatus.LOADING:
            return PageView(gate=gate_status, loading_label=messages.AUTH_LOADING)
        if gate_status is GateStatus.REDIRECT:
            return PageView(gate=gate_status, redirect_to=self.gate.login_path)

        state = self.state
        view = PageView(
            gate=gate_status,
            title=messages.PAGE_TITLE,
            subtitle=messages.PAGE_SUBTITLE,
            preference_label=messages.PREFERENCE_LABEL,
            preference_placeholder=messages.PREFERENCE_PLACEHOLDER,
            career_preference=state.career_preference,
            trigger=TriggerView(
                label=messages.TRIGGER_BUSY if state.is_loading else messages.TRIGGER_IDLE,
                disabled=state.is_loading,
            ),
            branch=self.branch,
        )

        response = state.recommendations
        if view.branch is RenderBranch.LOADING:
            view.skeletons = LOADING_SKELETONS
        elif view.branch is RenderBranch.EMPTY:
            view.empty_title = messages.EMPTY_TITLE
            view.empty_message = messages.EMPTY_MESSAGE
        elif view.branch is RenderBranch.ERROR:
            view.error = state.error
        elif view.branch is RenderBranch.UNIVERSITY_UNSUPPORTED:
            view.notice = presenter.university_unsupported_notice(self.contribution_url)
        elif view.branch is RenderBranch.FIELD_UNSUPPORTED:
            view.notice = presenter.field_unsupported_notice(response, self.contribution_url)
        else:
            view.current_status = presenter.build_current_status(response.current_status)
            view.error = state.error
            view.summary = presenter.build_summary(response)
            view.cards = presenter.build_cards(response.recommendations, state.expanded_code)

        return view
