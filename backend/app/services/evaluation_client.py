"""Client for the evaluation endpoint.

Posts a submission and decodes the response body exactly once into an
``EvaluationReport``. Failures surface as distinct exception classes so
callers can tell a rejected payload from a broken server or network.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..schemas.evaluation_schema import EvaluationReport
from ..schemas.submission_schema import Submission

logger = logging.getLogger(__name__)

EVALUATE_PATH = "/api/evaluate"
_DEFAULT_TIMEOUT = 30.0


class EvaluationClientError(Exception):
    """Base class for every client-side evaluation failure."""


class EvaluationTransportError(EvaluationClientError):
    """The request never produced an HTTP response."""


class MalformedResponseError(EvaluationClientError):
    """The response was not JSON or not a well-formed report."""


class EvaluationRejectedError(EvaluationClientError):
    """The server rejected the payload (HTTP 4xx)."""

    def __init__(self, message: str, *, error_type: Optional[str] = None, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.field = field


class EvaluationServerError(EvaluationClientError):
    """The server failed while evaluating (HTTP 5xx)."""

    def __init__(self, message: str, *, status_code: int, timestamp: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.timestamp = timestamp


async def _send(client: httpx.AsyncClient, url: str, payload: dict[str, Any]) -> httpx.Response:
    return await client.post(url, json=payload)


async def request_evaluation(
    submission: Submission,
    *,
    base_url: str = "",
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = _DEFAULT_TIMEOUT,
) -> EvaluationReport:
    """POST *submission* to the evaluation endpoint and return the report.

    Raises
    ------
    EvaluationTransportError
        On connection errors and timeouts.
    MalformedResponseError
        If the body is not JSON, or a 200 body is not a valid report.
    EvaluationRejectedError
        On HTTP 4xx; carries the server's ``type`` and ``field``.
    EvaluationServerError
        On any other non-2xx status.
    """
    url = f"{base_url.rstrip('/')}{EVALUATE_PATH}"
    payload = submission.model_dump(by_alias=True, exclude_none=True)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                response = await _send(owned, url, payload)
        else:
            response = await _send(client, url, payload)
    except httpx.HTTPError as exc:
        logger.warning("Evaluation request to %s failed: %s", url, exc)
        raise EvaluationTransportError(f"Evaluation request failed: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise MalformedResponseError(
            f"Server returned non-JSON response ({response.status_code}): {response.text[:200]}"
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc

    body = data if isinstance(data, dict) else {}

    if 400 <= response.status_code < 500:
        raise EvaluationRejectedError(
            body.get("error") or f"Evaluation rejected (HTTP {response.status_code})",
            error_type=body.get("type"),
            field=body.get("field"),
        )

    if not response.is_success:
        raise EvaluationServerError(
            body.get("error") or f"Evaluation failed (HTTP {response.status_code})",
            status_code=response.status_code,
            timestamp=body.get("timestamp"),
        )

    try:
        return EvaluationReport.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid response structure from server: {exc}") from exc
