"""Evaluation orchestrator.

Composes the scoring engine and the insight generator into one
``EvaluationReport``. The only suspension points are the optional
simulated latency and the advisory text-analysis call; neither can fail
an evaluation.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import Any, Mapping, Optional, Union

from ..config import get_evaluation_delay_range
from ..schemas.evaluation_schema import EvaluationReport
from ..schemas.submission_schema import Submission, parse_submission
from .insight_generator import (
    generate_recommendations,
    generate_strengths,
    generate_summary,
    generate_weaknesses,
)
from .scoring_engine import ScoringOptions, compute_scores
from .text_analysis_client import analyze_text

logger = logging.getLogger(__name__)


async def _simulate_latency(rng: random.Random) -> None:
    low, high = get_evaluation_delay_range()
    if high <= 0:
        return
    await asyncio.sleep(rng.uniform(low, high))


async def _run_advisory_analysis(text: str) -> Optional[Any]:
    """Call the text-analysis collaborator. Any failure yields ``None``."""
    try:
        return await analyze_text(text)
    except Exception as exc:
        logger.warning("Advisory text analysis raised %s; continuing without it", exc)
        return None


async def evaluate_idea(
    submission: Union[Submission, Mapping[str, Any]],
    *,
    rng: Optional[random.Random] = None,
    options: Optional[ScoringOptions] = None,
) -> EvaluationReport:
    """Evaluate one submission and return its report.

    Pipeline order:
    1. Validate (mappings are decoded via ``parse_submission``)
    2. Simulated latency, if configured
    3. Advisory text analysis (result not consumed)
    4. Score
    5. Strengths, weaknesses, recommendations, summary

    Raises
    ------
    SubmissionValidationError
        If *submission* is a mapping that fails validation.
    """
    if not isinstance(submission, Submission):
        submission = parse_submission(submission)

    rng = rng or random.Random()
    start = time.perf_counter()
    logger.info("Evaluation START track=%s title_chars=%d", submission.track, len(submission.title))
    logger.debug("Evaluation title=%r", submission.title)

    await _simulate_latency(rng)

    # Advisory only: the result does not feed into scoring.
    advisory = await _run_advisory_analysis(submission.description)
    logger.debug("Advisory text analysis %s", "received" if advisory is not None else "unavailable")

    scores = compute_scores(submission, rng=rng, options=options)

    report = EvaluationReport(
        scores=scores,
        summary=generate_summary(submission.track, scores.overall),
        strengths=generate_strengths(submission),
        weaknesses=generate_weaknesses(submission),
        recommendations=generate_recommendations(submission.track),
    )

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Evaluation END track=%s overall=%.1f duration=%.0fms",
        submission.track,
        scores.overall,
        duration_ms,
    )
    return report
