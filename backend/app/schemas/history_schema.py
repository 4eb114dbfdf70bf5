from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .evaluation_schema import EvaluationReport
from .score_schema import IdeaScores
from .submission_schema import Submission, Track


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EvaluationRecord(BaseModel):
    """Flat history entry: the submission, its report, an id and a timestamp."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: UUID = Field(default_factory=uuid4)
    title: str
    description: str
    track: Track
    target_audience: Optional[str] = None
    timeline: Optional[str] = None
    budget: Optional[str] = None
    keywords: Optional[str] = None

    scores: IdeaScores
    summary: str
    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]

    submitted_at: datetime = Field(default_factory=_utc_now)

    @classmethod
    def from_evaluation(cls, submission: Submission, report: EvaluationReport) -> "EvaluationRecord":
        return cls(**submission.model_dump(), **report.model_dump())


class TrackSelection(BaseModel):
    """Request/response body for the selected-track endpoints."""

    track: Optional[Track] = None
