# tests/fakes.py
import json

import httpx

from services.auth_gate import AuthCapability, AuthGate
from services.controller import RecommendationsController

API_BASE = "http://backend.test/api"
CONTRIBUTION_URL = "https://example.org/contributing"


def recommendation(code, score, **overrides):
    rec = {
        "code": code,
        "name": f"Option {code}",
        "type": "speciality",
        "matchScore": score,
        "reasoning": f"Strong results in modules related to {code}",
        "keySubjects": ["Algorithmique", "Bases de données"],
        "careerOutcomes": ["Développeur"],
        "furtherOptions": [],
    }
    rec.update(overrides)
    return rec


def supported_payload(recommendations=None, **overrides):
    if recommendations is None:
        recommendations = [
            recommendation("GL", 92),
            recommendation("SI", 78),
            recommendation("RSD", 64),
            recommendation("ISIL", 41),
        ]
    body = {
        "currentStatus": {
            "university": "Université des Sciences et de la Technologie Houari Boumediene",
            "universityAr": "جامعة هواري بومدين للعلوم والتكنولوجيا",
            "field": "Mathématiques et Informatique",
            "fieldAr": "رياضيات و إعلام آلي",
            "major": "Informatique",
            "majorAr": None,
            "speciality": None,
            "specialityAr": None,
            "level": "L2",
            "levelAr": None,
            "currentAverage": 13.456,
            "academicYear": "2024/2025",
        },
        "recommendations": recommendations,
        "summary": "Your results in programming modules point towards software engineering.",
        "model": "llama-3.3-70b-versatile",
        "universitySupported": True,
        "fallbackUniversity": None,
        "fieldSupported": True,
        "unsupportedReason": None,
    }
    body.update(overrides)
    return body


def university_unsupported_payload():
    return {
        "currentStatus": {"university": "Université X"},
        "recommendations": [],
        "summary": None,
        "model": None,
        "universitySupported": False,
        "fallbackUniversity": "USTHB",
    }


def field_unsupported_payload(reason=None):
    return {
        "currentStatus": {"field": "Sciences de la matière"},
        "recommendations": [],
        "summary": None,
        "model": None,
        "universitySupported": True,
        "fieldSupported": False,
        "unsupportedReason": reason,
    }


class FakeBackend:
    """Stands in for the recommendation backend; replies are served in order, the last one repeats."""

    def __init__(self):
        self.requests = []
        self._replies = []

    def reply(self, status_code=200, json_body=None, content=None, error=None):
        self._replies.append((status_code, json_body, content, error))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._replies) > 1:
            status_code, json_body, content, error = self._replies.pop(0)
        else:
            status_code, json_body, content, error = self._replies[0]

        if error is not None:
            raise error
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_controller(transport, auth=None, redirects=None):
    if auth is None:
        auth = AuthCapability(token="student-token", is_authenticated=True, is_loading=False)
    if redirects is None:
        redirects = []
    gate = AuthGate(lambda: auth, redirects.append, login_path="/login")
    return RecommendationsController(
        gate,
        api_base_url=API_BASE,
        contribution_url=CONTRIBUTION_URL,
        transport=transport,
    )
