"""Idea Evaluation Route.

Thin HTTP surface over the transport adapter: decoding, evaluation and
status mapping all live in ``services.transport``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..schemas.evaluation_schema import EvaluationReport
from ..schemas.history_schema import EvaluationRecord
from ..schemas.submission_schema import Submission
from ..schemas.transport_schema import ErrorBody, EvaluationSuccess
from ..services.history import EvaluationHistory
from ..services.transport import evaluate_payload, to_response
from .dependencies import get_history

router = APIRouter(
    prefix="/api",
    tags=["Evaluation"],
)


@router.post(
    "/evaluate",
    response_model=EvaluationReport,
    status_code=status.HTTP_200_OK,
    summary="Evaluate an Idea",
    response_description="Scores, summary, strengths, weaknesses and recommendations",
    responses={
        400: {"model": ErrorBody, "description": "Malformed JSON or invalid field"},
        500: {"model": ErrorBody, "description": "Unexpected failure during evaluation"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": Submission.model_json_schema(by_alias=True)},
            },
        },
    },
)
async def evaluate(
    request: Request,
    history: EvaluationHistory = Depends(get_history),
) -> JSONResponse:
    """Evaluate a submission read from the raw JSON body.

    The body is decoded here rather than by FastAPI so malformed JSON
    and field errors both come back as 400 with a distinct ``type``.
    """
    result = await evaluate_payload(await request.body())

    if isinstance(result, EvaluationSuccess):
        history.add(EvaluationRecord.from_evaluation(result.submission, result.report))

    return to_response(result)
