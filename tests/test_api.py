"""
API route tests. The orchestrator is swapped for one wired to fakes.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from agents.analysis_client import AnalysisClient
from agents.orchestrator import PartnershipOrchestrator
from agents.profile_fetcher import BrandProfileFetcher
from api import routes
from api.main import app, credential_warnings
from config.settings import Settings, settings
from models.schemas import AnalysisResult, EvaluationForm

from conftest import VALID_REPLY, fake_genai, gemini_response, http_response


@pytest.fixture
def genai():
    return fake_genai()


@pytest.fixture
def client(genai, test_settings):
    orchestrator = PartnershipOrchestrator(
        settings=test_settings,
        fetcher=BrandProfileFetcher(session=Mock(spec=requests.Session)),
        client=AnalysisClient(client=genai),
    )
    routes.set_orchestrator(orchestrator)
    yield TestClient(app)
    routes.set_orchestrator(None)


class TestSystemRoutes:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "running"

    def test_health(self, client):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_credential_warnings(self, monkeypatch):
        monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
        monkeypatch.setattr(settings, "TRACXN_API_KEY", "")
        missing = credential_warnings()
        assert len(missing) == 2
        assert "503" in missing[0]

        monkeypatch.setattr(settings, "GEMINI_API_KEY", "g")
        monkeypatch.setattr(settings, "TRACXN_API_KEY", "t")
        assert credential_warnings() == []

    def test_parameters(self, client):
        body = client.get("/api/v1/parameters").json()
        assert len(body["parameters"]) == 10
        assert body["total"] == 100
        assert body["max_weight"] == 40
        assert body["parameters"][0] == {"id": "positioning", "name": "Brand Positioning & Fit", "weight": 20}


class TestEvaluateRoute:
    def test_success(self, client, genai, valid_reply_text):
        genai.models.generate_content.return_value = gemini_response(valid_reply_text, uris=["c.com"])
        resp = client.post("/api/v1/evaluate", json={"brand_a": "Blue Tokai", "brand_b": "Oatly"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "success"
        assert body["fetch_status"] == {"a": False, "b": False}
        assert body["weights_balanced"] is True
        assert body["result"]["recommendation"] == "Go"
        assert body["result"]["finalPercentage"] == 88.6
        assert sorted(body["result"]["sources"]) == ["a.com", "b.com", "c.com"]

        last = client.get("/api/v1/result")
        assert last.status_code == 200
        assert last.json()["executiveSummary"] == body["result"]["executiveSummary"]

    def test_weight_overrides_unbalanced(self, client, genai, valid_reply_text):
        genai.models.generate_content.return_value = gemini_response(valid_reply_text)
        resp = client.post("/api/v1/evaluate", json={"weights": {"upside": 40}})
        assert resp.status_code == 200
        assert resp.json()["weight_total"] == 137
        assert resp.json()["weights_balanced"] is False

    def test_weight_out_of_range(self, client):
        resp = client.post("/api/v1/evaluate", json={"weights": {"upside": 41}})
        assert resp.status_code == 422

    def test_unknown_parameter(self, client):
        resp = client.post("/api/v1/evaluate", json={"weights": {"vibes": 10}})
        assert resp.status_code == 400

    def test_malformed_reply(self, client, genai):
        genai.models.generate_content.return_value = gemini_response("definitely not json")
        resp = client.post("/api/v1/evaluate", json={})
        assert resp.status_code == 502
        assert resp.json()["detail"] == "AI response was not valid JSON. Please try again."
        assert client.get("/api/v1/result").status_code == 404

    def test_missing_key(self, genai):
        routes.set_orchestrator(PartnershipOrchestrator(
            settings=Settings(GEMINI_API_KEY="", TRACXN_API_KEY=""),
            client=AnalysisClient(client=genai),
        ))
        try:
            resp = TestClient(app).post("/api/v1/evaluate", json={})
        finally:
            routes.set_orchestrator(None)
        assert resp.status_code == 503
        assert resp.json()["detail"] == "Gemini API Key is missing."

    def test_no_result_yet(self, client):
        assert client.get("/api/v1/result").status_code == 404

    def test_fetch_status_belongs_to_own_request(self, test_settings):
        session = Mock(spec=requests.Session)
        session.get.return_value = http_response(200, b'{"name": "profile"}')
        analysis = Mock(spec=AnalysisClient)
        orchestrator = PartnershipOrchestrator(
            settings=test_settings,
            fetcher=BrandProfileFetcher(session=session),
            client=analysis,
        )
        reply = AnalysisResult.model_validate(VALID_REPLY)

        def analyze(request, data_a, data_b):
            if request.brand_a == "First":
                # another request runs to completion on the shared orchestrator
                orchestrator.run(EvaluationForm(
                    brand_a="Second", brand_b="Other", scope="s", geography="g",
                ))
            return reply

        analysis.analyze.side_effect = analyze
        routes.set_orchestrator(orchestrator)
        try:
            resp = TestClient(app).post(
                "/api/v1/evaluate",
                json={"brand_a": "First", "brand_b": "Oatly", "tracxn_key": "k"},
            )
        finally:
            routes.set_orchestrator(None)

        assert resp.status_code == 200
        assert resp.json()["fetch_status"] == {"a": True, "b": True}
        assert orchestrator.fetch_status.to_dict() == {"a": False, "b": False}
