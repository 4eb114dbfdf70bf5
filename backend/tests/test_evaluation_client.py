"""Evaluation client tests: one decode step, distinct error classes.

Uses ``httpx.MockTransport`` for server behaviour that the real app
never produces, and ``httpx.ASGITransport`` for an end-to-end round trip.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio
import json

import httpx
import pytest

from app.main import app
from app.schemas.evaluation_schema import EvaluationReport
from app.schemas.submission_schema import Submission
from app.services.evaluation_client import (
    EvaluationClientError,
    EvaluationRejectedError,
    EvaluationServerError,
    EvaluationTransportError,
    MalformedResponseError,
    request_evaluation,
)
from app.services.history import EvaluationHistory
from app.services.scoring_engine import round_half_up

BASE_URL = "http://ideascope.test"

SUBMISSION = Submission(
    title="Campus Ride Share",
    description="Match students driving home for the weekend with riders.",
    track="hackathon",
    target_audience="University students without cars",
)

REPORT_JSON = {
    "scores": {
        "novelty": 6.1,
        "marketPotential": 5.4,
        "technicalFeasibility": 5.0,
        "impact": 6.3,
        "overall": 5.7,
    },
    "summary": "Promising hackathon idea requiring further development.",
    "strengths": ["Clear and descriptive project title"],
    "weaknesses": ["Description could be more detailed and comprehensive"],
    "recommendations": ["a", "b", "c", "d"],
}


@pytest.fixture(autouse=True)
def no_credential(monkeypatch):
    monkeypatch.delenv("HUGGING_FACE_API_KEY", raising=False)


def _request(handler):
    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await request_evaluation(SUBMISSION, base_url=BASE_URL, client=client)

    return asyncio.run(_run())


class TestRequestEvaluation:
    def test_success_and_payload_shape(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=REPORT_JSON)

        report = _request(handler)

        assert isinstance(report, EvaluationReport)
        assert report.scores.market_potential == 5.4
        assert str(seen[0].url) == f"{BASE_URL}/api/evaluate"
        sent = json.loads(seen[0].content)
        assert sent["targetAudience"] == "University students without cars"
        assert "budget" not in sent

    def test_validation_rejection(self):
        body = {
            "error": "Missing or invalid required field: title",
            "type": "validation_error",
            "field": "title",
        }
        with pytest.raises(EvaluationRejectedError) as exc_info:
            _request(lambda request: httpx.Response(400, json=body))

        assert exc_info.value.field == "title"
        assert exc_info.value.error_type == "validation_error"
        assert str(exc_info.value) == body["error"]

    def test_parse_rejection_is_distinguishable(self):
        body = {"error": "Invalid JSON in request body", "type": "parse_error", "details": "x"}
        with pytest.raises(EvaluationRejectedError) as exc_info:
            _request(lambda request: httpx.Response(400, json=body))

        assert exc_info.value.error_type == "parse_error"
        assert exc_info.value.field is None

    def test_server_error(self):
        body = {"error": "Failed to evaluate idea", "details": "boom", "timestamp": "2026-01-01T00:00:00+00:00"}
        with pytest.raises(EvaluationServerError) as exc_info:
            _request(lambda request: httpx.Response(500, json=body))

        assert exc_info.value.status_code == 500
        assert exc_info.value.timestamp == body["timestamp"]

    def test_non_json_response(self):
        with pytest.raises(MalformedResponseError, match="non-JSON"):
            _request(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))

    def test_invalid_json_with_json_content_type(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"{oops", headers={"Content-Type": "application/json"})

        with pytest.raises(MalformedResponseError, match="Invalid JSON"):
            _request(handler)

    def test_incomplete_report(self):
        partial = {k: v for k, v in REPORT_JSON.items() if k != "scores"}
        with pytest.raises(MalformedResponseError, match="Invalid response structure"):
            _request(lambda request: httpx.Response(200, json=partial))

    def test_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(EvaluationTransportError):
            _request(handler)

    def test_all_errors_share_base_class(self):
        for error in (
            EvaluationTransportError,
            MalformedResponseError,
            EvaluationRejectedError,
            EvaluationServerError,
        ):
            assert issubclass(error, EvaluationClientError)


class TestRoundTrip:
    def test_against_running_app(self):
        app.state.history = EvaluationHistory()

        async def _run():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport) as client:
                return await request_evaluation(SUBMISSION, base_url="http://testserver", client=client)

        report = asyncio.run(_run())

        assert len(report.recommendations) == 4
        assert report.scores.overall == round_half_up(
            (
                report.scores.novelty
                + report.scores.market_potential
                + report.scores.technical_feasibility
                + report.scores.impact
            )
            / 4
        )
        assert len(app.state.history) == 1
