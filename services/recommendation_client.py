import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from models.recommendation import RecommendationRequest, RecommendationResponse
from services import messages

logger = logging.getLogger(__name__)


class RecommendationClientError(Exception):
    """Base error for talking to the recommendation backend."""


class RecommendationRequestError(RecommendationClientError):
    """
    A suggest call did not produce a usable response.

    `message` is already fit to show to the student.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def normalize_preference(preference: Optional[str]) -> Optional[str]:
    """Blank or whitespace-only text means "no preference"; anything else is sent as typed."""
    if preference is None or not preference.strip():
        return None
    return preference


def extract_error_message(response: httpx.Response) -> str:
    """
    Reads the `message` of a structured error body.

    Falls back to the generic failure text when the body is not JSON,
    not an object, or has no usable message.
    """
    try:
        body = response.json()
    except ValueError:
        return messages.REQUEST_FAILED

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return messages.REQUEST_FAILED


class RecommendationClient:
    """
    Calls POST {api_base_url}/recommendations/suggest on behalf of a student.

    No timeout and no retry: one request per call, settled or failed.
    """

    def __init__(self, api_base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_base_url = api_base_url.rstrip("/")
        self._transport = transport

    @property
    def suggest_url(self) -> str:
        return f"{self.api_base_url}/recommendations/suggest"

    async def suggest(self, token: str, career_preference: Optional[str] = None) -> RecommendationResponse:
        payload = RecommendationRequest(
            career_preference=normalize_preference(career_preference)
        ).to_payload()
        headers = {"Authorization": f"Bearer {token}"}

        logger.info(f"Requesting recommendations (preference given: {'careerPreference' in payload})")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.post(self.suggest_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Recommendation request failed: {e!r}")
            raise RecommendationRequestError(str(e) or messages.UNEXPECTED_ERROR) from e

        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(f"Recommendation backend answered {response.status_code}: {message}")
            raise RecommendationRequestError(message, status_code=response.status_code)

        try:
            return RecommendationResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Could not read recommendation response: {e}")
            raise RecommendationRequestError(
                messages.UNEXPECTED_ERROR, status_code=response.status_code
            ) from e
