"""Rule-based insight generation: strengths, weaknesses, recommendations, summary.

Rules are evaluated in declaration order and truncated to the first N
matches; there is no weighting. All functions are pure.
"""

from __future__ import annotations

from typing import List

from ..constants import (
    MAX_RECOMMENDATIONS,
    MAX_STRENGTHS,
    MAX_WEAKNESSES,
    STRENGTH_AUDIENCE_MIN_CHARS,
    STRENGTH_DEFINED_AUDIENCE,
    STRENGTH_DESCRIPTION_MIN_CHARS,
    STRENGTH_DESCRIPTIVE_TITLE,
    STRENGTH_DETAILED_DESCRIPTION,
    STRENGTH_FALLBACK,
    STRENGTH_TITLE_MIN_CHARS,
    SUMMARY_BUCKETS,
    SUMMARY_FALLBACK,
    TRACK_RECOMMENDATIONS,
    TRACK_STRENGTHS,
    TRACK_WEAKNESSES,
    WEAKNESS_AUDIENCE_MAX_CHARS,
    WEAKNESS_DESCRIPTION_MAX_CHARS,
    WEAKNESS_SHORT_DESCRIPTION,
    WEAKNESS_SHORT_TITLE,
    WEAKNESS_TITLE_MAX_CHARS,
    WEAKNESS_VAGUE_AUDIENCE,
)
from ..schemas.submission_schema import Submission


def generate_strengths(submission: Submission) -> List[str]:
    """Return up to MAX_STRENGTHS strengths, or a single fallback."""
    strengths: List[str] = []

    if len(submission.description) > STRENGTH_DESCRIPTION_MIN_CHARS:
        strengths.append(STRENGTH_DETAILED_DESCRIPTION)

    if submission.audience_length() > STRENGTH_AUDIENCE_MIN_CHARS:
        strengths.append(STRENGTH_DEFINED_AUDIENCE)

    if submission.has_track_detail():
        strengths.append(TRACK_STRENGTHS[submission.track])

    if len(submission.title) > STRENGTH_TITLE_MIN_CHARS:
        strengths.append(STRENGTH_DESCRIPTIVE_TITLE)

    if not strengths:
        strengths.append(STRENGTH_FALLBACK)

    return strengths[:MAX_STRENGTHS]


def generate_weaknesses(submission: Submission) -> List[str]:
    """Return up to MAX_WEAKNESSES weaknesses. May be empty."""
    weaknesses: List[str] = []

    if len(submission.description) < WEAKNESS_DESCRIPTION_MAX_CHARS:
        weaknesses.append(WEAKNESS_SHORT_DESCRIPTION)

    if submission.audience_length() < WEAKNESS_AUDIENCE_MAX_CHARS:
        weaknesses.append(WEAKNESS_VAGUE_AUDIENCE)

    if not submission.has_track_detail():
        weaknesses.append(TRACK_WEAKNESSES[submission.track])

    if len(submission.title) < WEAKNESS_TITLE_MAX_CHARS:
        weaknesses.append(WEAKNESS_SHORT_TITLE)

    return weaknesses[:MAX_WEAKNESSES]


def generate_recommendations(track: str) -> List[str]:
    """Fixed recommendations for *track*, independent of submission content."""
    return list(TRACK_RECOMMENDATIONS[track][:MAX_RECOMMENDATIONS])


def generate_summary(track: str, overall: float) -> str:
    """Pick the summary bucket for *overall*; lower bounds are inclusive."""
    for lower_bound, template in SUMMARY_BUCKETS:
        if overall >= lower_bound:
            return template.format(track=track)
    return SUMMARY_FALLBACK.format(Track=track.capitalize())
