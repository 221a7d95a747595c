from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field
from typing import Optional

from app.config import settings
from models.views import GateStatus, PageView
from services.controller import RecommendationsController
from services.sessions import SessionStore

router = APIRouter(prefix="/api", tags=["api"])

_sessions = SessionStore(
    api_base_url=settings.api_base_url,
    login_path=settings.login_path,
    contribution_url=settings.contribution_url,
    max_sessions=settings.max_sessions,
)


class PreferenceBody(BaseModel):
    career_preference: Optional[str] = Field(None, alias="careerPreference")

    class Config:
        populate_by_name = True


# ----------------------------------------------------------------------
# Dependencies
# ----------------------------------------------------------------------

def get_sessions() -> SessionStore:
    return _sessions


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Token from an `Authorization: Bearer <token>` header, if any."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_controller(token: Optional[str] = Depends(bearer_token),
                   sessions: SessionStore = Depends(get_sessions)) -> RecommendationsController:
    return sessions.controller_for(token)


def respond(controller: RecommendationsController):
    """Render the page, or send the caller to login when the gate says so."""
    view = controller.render()
    if view.gate is GateStatus.REDIRECT:
        return RedirectResponse(url=view.redirect_to, status_code=307)
    return view


# ----------------------------------------------------------------------
# Recommendations page
# ----------------------------------------------------------------------

@router.get("/recommendations", response_model=PageView)
async def get_recommendations_page(controller: RecommendationsController = Depends(get_controller)):
    """
    Current state of the recommendations page for this session.
    """
    return respond(controller)


@router.put("/recommendations/preference", response_model=PageView)
async def update_preference(body: PreferenceBody,
                            controller: RecommendationsController = Depends(get_controller)):
    """
    Stores the career preference text typed by the student.
    """
    if controller.gate.check() is GateStatus.OPEN:
        controller.set_career_preference(body.career_preference or "")
    return respond(controller)


@router.post("/recommendations/suggest", response_model=PageView)
async def suggest_recommendations(body: Optional[PreferenceBody] = None,
                                  controller: RecommendationsController = Depends(get_controller)):
    """
    Asks the backend for recommendations.

    A second call while one is still running is ignored and just returns the
    current (loading) page.
    """
    preference = body.career_preference if body else None
    await controller.fetch_recommendations(preference)
    return respond(controller)


@router.post("/recommendations/{code}/toggle", response_model=PageView)
async def toggle_recommendation(code: str, controller: RecommendationsController = Depends(get_controller)):
    """
    Opens the card with this code, or closes it when it is already open.
    """
    if controller.gate.check() is not GateStatus.OPEN:
        return respond(controller)

    if not controller.has_card(code):
        raise HTTPException(status_code=404, detail="Recommendation not found")

    controller.toggle_card(code)
    return respond(controller)


@router.get("/health")
async def health_check():
    """Liveness check."""
    return {
        "status": "ok",
        "message": "Recommendations client is up"
    }
