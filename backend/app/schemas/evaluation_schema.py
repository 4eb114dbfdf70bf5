from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..constants import MAX_RECOMMENDATIONS, MAX_STRENGTHS, MAX_WEAKNESSES
from .score_schema import IdeaScores


class EvaluationReport(BaseModel):
    """Complete evaluation report for one submission.

    Built once by the evaluation service and never mutated.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    scores: IdeaScores
    summary: str = Field(..., min_length=1, description="Bucketed natural-language verdict")
    strengths: List[str] = Field(..., max_length=MAX_STRENGTHS)
    weaknesses: List[str] = Field(..., max_length=MAX_WEAKNESSES)
    recommendations: List[str] = Field(
        ...,
        min_length=MAX_RECOMMENDATIONS,
        max_length=MAX_RECOMMENDATIONS,
        description="Fixed per-track recommendations",
    )