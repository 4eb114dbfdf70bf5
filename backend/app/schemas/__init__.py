# Schemas package
from .submission_schema import Submission, SubmissionValidationError, Track, parse_submission
from .score_schema import IdeaScores
from .evaluation_schema import EvaluationReport
from .history_schema import EvaluationRecord, TrackSelection
from .transport_schema import (
    ErrorBody,
    EvaluationResult,
    EvaluationSuccess,
    InternalFailure,
    ParseFailure,
    ValidationFailure,
)

__all__ = [
    "Submission",
    "SubmissionValidationError",
    "Track",
    "parse_submission",
    "IdeaScores",
    "EvaluationReport",
    "EvaluationRecord",
    "TrackSelection",
    "ErrorBody",
    "EvaluationResult",
    "EvaluationSuccess",
    "InternalFailure",
    "ParseFailure",
    "ValidationFailure",
]
