"""Tagged result of decoding and evaluating one HTTP request body.

Every request ends in exactly one of these variants; the route maps
the variant to a status code without inspecting the payload again.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .evaluation_schema import EvaluationReport
from .submission_schema import Submission


class EvaluationSuccess(BaseModel):
    kind: Literal["success"] = "success"
    submission: Submission
    report: EvaluationReport


class ParseFailure(BaseModel):
    """The body was not a JSON object."""

    kind: Literal["parse_error"] = "parse_error"
    message: str = "Invalid JSON in request body"
    details: str


class ValidationFailure(BaseModel):
    """The body was JSON but a field failed validation."""

    kind: Literal["validation_error"] = "validation_error"
    field: str
    message: str


class InternalFailure(BaseModel):
    kind: Literal["internal_error"] = "internal_error"
    message: str = "Failed to evaluate idea"
    details: str
    timestamp: str


EvaluationResult = Annotated[
    Union[EvaluationSuccess, ParseFailure, ValidationFailure, InternalFailure],
    Field(discriminator="kind"),
]


class ErrorBody(BaseModel):
    """JSON body of every non-200 response (documented in OpenAPI)."""

    error: str
    type: str
    field: Optional[str] = None
    details: Optional[str] = None
    timestamp: Optional[str] = None
