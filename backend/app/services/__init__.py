from .scoring_engine import ScoringOptions, compute_scores
from .insight_generator import (
    generate_recommendations,
    generate_strengths,
    generate_summary,
    generate_weaknesses,
)
from .text_analysis_client import analyze_text
from .evaluation_service import evaluate_idea
from .history import EvaluationHistory

__all__ = [
    "ScoringOptions",
    "compute_scores",
    "generate_recommendations",
    "generate_strengths",
    "generate_summary",
    "generate_weaknesses",
    "analyze_text",
    "evaluate_idea",
    "EvaluationHistory",
]
