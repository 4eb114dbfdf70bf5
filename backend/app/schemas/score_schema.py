from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IdeaScores(BaseModel):
    """Heuristic sub-scores and their mean.

    Produced by the Scoring Engine from a ``Submission``.
    Every field is a float on a 0-10 scale rounded to one decimal.
    ``overall`` is the mean of the four sub-scores as returned.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    novelty: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="base + audience bonus + noise",
    )
    market_potential: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="base + track-detail bonus + noise",
    )
    technical_feasibility: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="base - 0.3 + noise",
    )
    impact: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="base + audience bonus + noise",
    )
    overall: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="mean(novelty, marketPotential, technicalFeasibility, impact), rounded half up to one decimal",
    )
