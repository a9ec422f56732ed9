"""
Shared fakes for the Tracxn session and the Gemini client.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import requests

from config.settings import Settings
from models.schemas import EvaluationForm


VALID_REPLY = {
    "executiveSummary": "Complementary premium positioning with shared sustainability values.",
    "parameters": [
        {"id": "positioning", "name": "Brand Positioning & Fit", "weight": 20,
         "rating": 4, "weightedScore": 16, "rationale": "Both target urban premium coffee drinkers."},
        {"id": "audience", "name": "Audience Overlap & Targeting", "weight": 15,
         "rating": 5, "weightedScore": 15, "rationale": "Strong overlap in 22-35 urban segment."},
    ],
    "rawSum": 31,
    "finalPercentage": 88.6,
    "recommendation": "Go",
    "suggestedModel": "Co-branded oat latte range",
    "concepts": [{"title": "Oat Cold Brew", "description": "Ready-to-drink can sold in both channels."}],
    "risks": [{"risk": "Dairy-alternative pricing gap", "mitigation": "Launch at café tier only."}],
    "sources": ["a.com", "b.com"],
}


def http_response(status: int, body: bytes = b"") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.encoding = "utf-8"
    resp.url = "https://api.tracxn.com/company"
    return resp


def gemini_response(text, uris=None):
    chunks = None
    if uris is not None:
        chunks = [SimpleNamespace(web=SimpleNamespace(uri=u)) for u in uris]
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


def fake_genai(response=None, error=None):
    models = Mock()
    if error is not None:
        models.generate_content.side_effect = error
    else:
        models.generate_content.return_value = response
    return SimpleNamespace(models=models)


@pytest.fixture
def valid_reply_text():
    return json.dumps(VALID_REPLY)


@pytest.fixture
def test_settings():
    return Settings(GEMINI_API_KEY="gemini-test-key", TRACXN_API_KEY="")


@pytest.fixture
def form():
    return EvaluationForm(
        brand_a="Blue Tokai",
        brand_b="Oatly",
        scope="Co-branded product & Distribution",
        geography="India / SE Asia",
    )


@pytest.fixture
def failing_session():
    session = Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("connection refused")
    return session
