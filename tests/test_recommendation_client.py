# tests/test_recommendation_client.py
import httpx
import pytest

from services import messages
from services.recommendation_client import (
    RecommendationClient,
    RecommendationRequestError,
    normalize_preference,
)
from fakes import API_BASE, supported_payload


def client_for(backend):
    return RecommendationClient(API_BASE + "/", transport=backend.transport)


@pytest.mark.anyio
async def test_posts_to_suggest_with_bearer_token(backend):
    backend.reply(json_body=supported_payload())

    response = await client_for(backend).suggest("abc123")

    request = backend.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://backend.test/api/recommendations/suggest"
    assert request.headers["Authorization"] == "Bearer abc123"
    assert response.recommendations[0].code == "GL"


@pytest.mark.anyio
@pytest.mark.parametrize("preference", [None, "", "   ", "\t\n"])
async def test_blank_preference_is_left_out(backend, preference):
    backend.reply(json_body=supported_payload())

    await client_for(backend).suggest("t", preference)

    assert backend.last_body() == {}


@pytest.mark.anyio
async def test_preference_is_sent(backend):
    backend.reply(json_body=supported_payload())

    await client_for(backend).suggest("t", "Research")

    assert backend.last_body() == {"careerPreference": "Research"}


@pytest.mark.anyio
async def test_preference_is_sent_as_typed(backend):
    backend.reply(json_body=supported_payload())

    await client_for(backend).suggest("t", " Research ")

    assert backend.last_body() == {"careerPreference": " Research "}


def test_normalize_preference():
    assert normalize_preference("  Industry ") == "  Industry "
    assert normalize_preference("  ") is None
    assert normalize_preference(None) is None


@pytest.mark.anyio
async def test_error_message_from_body(backend):
    backend.reply(status_code=401, json_body={"message": "X"})

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client_for(backend).suggest("t")

    assert exc_info.value.message == "X"
    assert exc_info.value.status_code == 401


@pytest.mark.anyio
@pytest.mark.parametrize("reply", [
    {"content": b"<html>Bad Gateway</html>"},
    {"content": b""},
    {"json_body": {"error": "Internal"}},
    {"json_body": {"message": ""}},
    {"json_body": ["not", "an", "object"]},
])
async def test_error_without_usable_message_uses_fallback(backend, reply):
    backend.reply(status_code=502, **reply)

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client_for(backend).suggest("t")

    assert exc_info.value.message == messages.REQUEST_FAILED


@pytest.mark.anyio
async def test_network_failure_keeps_exception_message(backend):
    backend.reply(error=httpx.ConnectError("Connection refused"))

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client_for(backend).suggest("t")

    assert exc_info.value.message == "Connection refused"
    assert exc_info.value.status_code is None


@pytest.mark.anyio
async def test_network_failure_without_message(backend):
    backend.reply(error=httpx.ConnectError(""))

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client_for(backend).suggest("t")

    assert exc_info.value.message == messages.UNEXPECTED_ERROR


@pytest.mark.anyio
@pytest.mark.parametrize("reply", [
    {"content": b"{not json"},
    {"json_body": {"recommendations": []}},
])
async def test_unreadable_success_body(backend, reply):
    backend.reply(status_code=200, **reply)

    with pytest.raises(RecommendationRequestError) as exc_info:
        await client_for(backend).suggest("t")

    assert exc_info.value.message == messages.UNEXPECTED_ERROR
