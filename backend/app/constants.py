"""Centralized constants for scoring and insight generation.

Every threshold, bonus and canned sentence used by the scoring engine and
the insight generator lives here. The web client renders these strings
verbatim, so wording changes are user-visible.
"""

from __future__ import annotations

# ── Tracks ──────────────────────────────────────────────────────────────

TRACKS: tuple[str, ...] = ("startup", "project", "research", "hackathon")

# The one optional submission field that matters for each track.
TRACK_OPTIONAL_FIELD: dict[str, str] = {
    "startup": "budget",
    "project": "timeline",
    "research": "keywords",
    "hackathon": "keywords",
}

# ── Scoring ─────────────────────────────────────────────────────────────

MIN_SCORE: float = 0.0
MAX_SCORE: float = 10.0

# Starting point of the description-length ramp, per track.
BASE_SCORE_FLOOR: dict[str, float] = {
    "startup": 4.0,
    "project": 4.0,
    "research": 4.0,
    "hackathon": 4.0,
}
DESCRIPTION_LENGTH_UNIT: float = 150.0   # chars per ramp step
DESCRIPTION_RAMP_STEP: float = 3.0       # points per ramp step

# Audience must be longer than this (after trimming) to earn the bonus.
AUDIENCE_DETAIL_MIN_CHARS: int = 0
DETAIL_BONUS: float = 1.2
ADDITIONAL_BONUS: float = 0.8
FEASIBILITY_PENALTY: float = 0.3

DEFAULT_NOISE_WIDTH: float = 0.75

# In-memory evaluation history cap (HISTORY_MAX_ENTRIES overrides).
DEFAULT_HISTORY_MAX_ENTRIES: int = 200

# ── Insight thresholds ──────────────────────────────────────────────────
# Strength and weakness thresholds are not complementary:
# an audience of 30-50 chars triggers neither rule, and a description
# of 200-250 chars triggers neither either.

STRENGTH_DESCRIPTION_MIN_CHARS: int = 250
STRENGTH_AUDIENCE_MIN_CHARS: int = 50
STRENGTH_TITLE_MIN_CHARS: int = 10

WEAKNESS_DESCRIPTION_MAX_CHARS: int = 200
WEAKNESS_AUDIENCE_MAX_CHARS: int = 30
WEAKNESS_TITLE_MAX_CHARS: int = 5

MAX_STRENGTHS: int = 4
MAX_WEAKNESSES: int = 3
MAX_RECOMMENDATIONS: int = 4

# ── Canned text ─────────────────────────────────────────────────────────

STRENGTH_DETAILED_DESCRIPTION = "Comprehensive and detailed concept description"
STRENGTH_DEFINED_AUDIENCE = "Well-defined target audience with clear market understanding"
STRENGTH_DESCRIPTIVE_TITLE = "Clear and descriptive project title"
STRENGTH_FALLBACK = "Clear problem identification and concept foundation"

TRACK_STRENGTHS: dict[str, str] = {
    "startup": "Realistic budget planning demonstrates financial awareness",
    "project": "Clear project timeline with defined milestones",
    "research": "Well-defined research scope with relevant keywords",
    "hackathon": "Clear technology stack and implementation approach",
}

WEAKNESS_SHORT_DESCRIPTION = "Description could be more detailed and comprehensive"
WEAKNESS_VAGUE_AUDIENCE = "Target audience definition needs more clarity"
WEAKNESS_SHORT_TITLE = "Project title could be more descriptive"

TRACK_WEAKNESSES: dict[str, str] = {
    "startup": "Budget estimation would strengthen the proposal",
    "project": "Project timeline and milestones should be specified",
    "research": "Research keywords would clarify the scope and focus",
    "hackathon": "Technology stack and tools should be specified",
}

TRACK_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "startup": (
        "Conduct comprehensive competitive analysis and market research",
        "Develop a detailed go-to-market strategy with customer acquisition plan",
        "Create financial projections and break-even analysis for 3-5 years",
        "Build a strong founding team with complementary skills",
    ),
    "project": (
        "Establish clear milestones, deliverables, and success metrics",
        "Document technical architecture and design decisions thoroughly",
        "Plan comprehensive testing, validation, and quality assurance",
        "Create detailed documentation for maintenance and future development",
    ),
    "research": (
        "Conduct thorough literature review of related research and publications",
        "Define clear research methodology, hypothesis, and validation approach",
        "Identify potential publication venues and research impact areas",
        "Plan collaboration with domain experts and research advisors",
    ),
    "hackathon": (
        "Create a detailed project roadmap with clear milestones",
        "Focus on MVP features that can be completed within hackathon timeframe",
        "Prepare compelling demo, presentation, and pitch strategy",
        "Plan team roles and responsibilities for efficient execution",
    ),
}

# (inclusive lower bound, template), highest bucket first.
SUMMARY_BUCKETS: tuple[tuple[float, str], ...] = (
    (
        8.0,
        "Excellent {track} idea with strong potential. The concept demonstrates "
        "clear innovation, viable execution path, and significant market "
        "opportunity. Highly recommended to proceed with detailed planning and "
        "validation.",
    ),
    (
        6.5,
        "Good {track} idea with solid fundamentals. The concept has merit and "
        "shows promise with clear strengths. Consider refining key aspects and "
        "conducting deeper analysis before full implementation.",
    ),
    (
        5.0,
        "Promising {track} idea requiring further development. The core concept "
        "is interesting and has potential but needs strengthening in several "
        "areas. Focus on addressing identified weaknesses and validating "
        "assumptions.",
    ),
)
SUMMARY_FALLBACK = (
    "{Track} idea with potential but significant challenges. Recommend "
    "substantial refinement, deeper exploration of the concept, and validation "
    "of key assumptions before proceeding."
)
