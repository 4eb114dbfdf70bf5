"""Server-side transport adapter.

One decode step turns a raw request body into either a ``Submission``
or a tagged failure; ``to_response`` maps every result variant onto an
HTTP status and JSON body.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Union

from fastapi import status
from fastapi.responses import JSONResponse

from ..schemas.submission_schema import Submission, SubmissionValidationError, parse_submission
from ..schemas.transport_schema import (
    EvaluationResult,
    EvaluationSuccess,
    InternalFailure,
    ParseFailure,
    ValidationFailure,
)
from .evaluation_service import evaluate_idea

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def decode_submission(raw: Union[bytes, str, None]) -> Union[Submission, ParseFailure, ValidationFailure]:
    """Decode a request body into a submission or a tagged failure."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            return ParseFailure(details=f"Request body is not valid UTF-8: {exc}")

    if raw is None or not raw.strip():
        return ParseFailure(details="Request body is empty")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        return ParseFailure(details=str(exc))
    except RecursionError:
        return ParseFailure(details="Request body is nested too deeply")

    if not isinstance(data, dict):
        return ParseFailure(details=f"Expected a JSON object, got {type(data).__name__}")

    try:
        return parse_submission(data)
    except SubmissionValidationError as exc:
        return ValidationFailure(field=exc.field, message=exc.message)


async def evaluate_payload(raw: Union[bytes, str, None]) -> EvaluationResult:
    """Decode and evaluate *raw*. Never raises."""
    decoded = decode_submission(raw)
    if not isinstance(decoded, Submission):
        logger.info("Rejected evaluation request: %s (%s)", decoded.kind, getattr(decoded, "field", "body"))
        return decoded

    try:
        report = await evaluate_idea(decoded)
    except Exception as exc:
        logger.exception("Evaluation failed for track=%s", decoded.track)
        return InternalFailure(details=str(exc), timestamp=utc_timestamp())

    return EvaluationSuccess(submission=decoded, report=report)


def to_response(result: EvaluationResult) -> JSONResponse:
    """Map a tagged result to its HTTP response."""
    if isinstance(result, EvaluationSuccess):
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=result.report.model_dump(mode="json", by_alias=True),
        )

    if isinstance(result, ParseFailure):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": result.message, "type": result.kind, "details": result.details},
        )

    if isinstance(result, ValidationFailure):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": result.message, "type": result.kind, "field": result.field},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": result.message,
            "type": result.kind,
            "details": result.details,
            "timestamp": result.timestamp,
        },
    )
