"""Heuristic Scoring Engine.

Maps a submission to four sub-scores and their mean using a
description-length ramp, two presence bonuses and uniform noise.

Rules
-----
- NO API calls
- NO I/O
- Total over any valid ``Submission``: there is no error path
- Non-deterministic unless an ``rng`` is supplied
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from ..config import get_score_floor, get_score_noise_width
from ..constants import (
    ADDITIONAL_BONUS,
    AUDIENCE_DETAIL_MIN_CHARS,
    BASE_SCORE_FLOOR,
    DEFAULT_NOISE_WIDTH,
    DESCRIPTION_LENGTH_UNIT,
    DESCRIPTION_RAMP_STEP,
    DETAIL_BONUS,
    FEASIBILITY_PENALTY,
    MAX_SCORE,
    MIN_SCORE,
)
from ..schemas.score_schema import IdeaScores
from ..schemas.submission_schema import Submission


@dataclass(frozen=True)
class ScoringOptions:
    """Tunables for :func:`compute_scores`.

    ``floor`` is ``None`` by default: sub-scores are then bounded to
    [MIN_SCORE, MAX_SCORE] only.
    """

    noise_width: float = DEFAULT_NOISE_WIDTH
    floor: Optional[float] = None

    @classmethod
    def from_env(cls) -> "ScoringOptions":
        return cls(noise_width=get_score_noise_width(), floor=get_score_floor())


def _bound(value: float, floor: Optional[float]) -> float:
    """Clamp *value* to [floor or MIN_SCORE, MAX_SCORE]."""
    lo = MIN_SCORE if floor is None else min(MAX_SCORE, max(MIN_SCORE, floor))
    return max(lo, min(MAX_SCORE, value))


def round_half_up(value: float) -> float:
    """Round a non-negative score to one decimal, ties away from zero.

    Matches the web client's ``Math.round(x * 10) / 10``; the built-in
    ``round`` would send 6.55 to 6.5.
    """
    return math.floor(value * 10 + 0.5) / 10


def base_score(submission: Submission) -> float:
    """Linear ramp on raw description length, capped at MAX_SCORE."""
    ramp = (len(submission.description) / DESCRIPTION_LENGTH_UNIT) * DESCRIPTION_RAMP_STEP
    return min(MAX_SCORE, BASE_SCORE_FLOOR[submission.track] + ramp)


def detail_bonus(submission: Submission) -> float:
    return DETAIL_BONUS if submission.audience_length() > AUDIENCE_DETAIL_MIN_CHARS else 0.0


def additional_bonus(submission: Submission) -> float:
    return ADDITIONAL_BONUS if submission.has_track_detail() else 0.0


def compute_scores(
    submission: Submission,
    *,
    rng: Optional[random.Random] = None,
    options: Optional[ScoringOptions] = None,
) -> IdeaScores:
    """Score *submission* on a 0-10 scale.

    Parameters
    ----------
    submission : Submission
        A validated submission.
    rng : random.Random, optional
        Source of noise. Defaults to the module-level generator.
    options : ScoringOptions, optional
        Noise width and optional floor. Read from the environment when omitted.

    Returns
    -------
    IdeaScores
        Four sub-scores, each rounded to one decimal, and ``overall``
        computed from those rounded values.
    """
    rng = rng or random.Random()
    options = options or ScoringOptions.from_env()
    width = options.noise_width

    base = base_score(submission)
    detail = detail_bonus(submission)
    additional = additional_bonus(submission)

    def _sub_score(adjustment: float) -> float:
        noise = rng.uniform(-width, width)
        return round_half_up(_bound(base + adjustment + noise, options.floor))

    novelty = _sub_score(detail)
    market_potential = _sub_score(additional)
    technical_feasibility = _sub_score(-FEASIBILITY_PENALTY)
    impact = _sub_score(detail)

    overall = round_half_up((novelty + market_potential + technical_feasibility + impact) / 4)

    return IdeaScores(
        novelty=novelty,
        market_potential=market_potential,
        technical_feasibility=technical_feasibility,
        impact=impact,
        overall=overall,
    )
