"""Runtime configuration read from the environment.

Values are read on every call (not cached at import) so a changed
environment, or a test that patches it, takes effect immediately.
Malformed numbers fall back to the documented default.
"""

from __future__ import annotations

import os
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .constants import DEFAULT_HISTORY_MAX_ENTRIES, DEFAULT_NOISE_WIDTH

load_dotenv()

_HUGGING_FACE_DEFAULT_URL = (
    "https://api-inference.huggingface.co/models/facebook/bart-large-mnli"
)
_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:3001"


def _env_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def _env_optional_float(key: str) -> Optional[float]:
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).strip().lower() == "true"


# ---------------------------------------------------------------------------
# Text analysis collaborator
# ---------------------------------------------------------------------------

def get_hugging_face_key() -> str:
    """Return HUGGING_FACE_API_KEY, or an empty string when unset."""
    return os.getenv("HUGGING_FACE_API_KEY", "").strip()


def get_hugging_face_model_url() -> str:
    return os.getenv("HUGGING_FACE_MODEL_URL", _HUGGING_FACE_DEFAULT_URL).strip()


def get_hugging_face_timeout() -> float:
    return _env_float("HUGGING_FACE_TIMEOUT", 10.0)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def get_score_noise_width() -> float:
    """Half-width of the uniform noise added to each sub-score."""
    width = _env_float("SCORE_NOISE_WIDTH", DEFAULT_NOISE_WIDTH)
    return width if width >= 0 else DEFAULT_NOISE_WIDTH


def get_score_floor() -> Optional[float]:
    """Optional lower clamp for sub-scores. ``None`` disables it."""
    return _env_optional_float("SCORE_FLOOR")


def get_evaluation_delay_range() -> Tuple[float, float]:
    """Simulated processing latency as a ``(min, max)`` pair in seconds."""
    low = max(0.0, _env_float("EVALUATION_DELAY_MIN_MS", 0.0))
    high = max(low, _env_float("EVALUATION_DELAY_MAX_MS", 0.0))
    return low / 1000.0, high / 1000.0


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------

def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def is_debug() -> bool:
    return _env_bool("DEBUG", False)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

def get_history_max_entries() -> int:
    """Most recent evaluations kept in memory; non-positive values use the default."""
    limit = _env_int("HISTORY_MAX_ENTRIES", DEFAULT_HISTORY_MAX_ENTRIES)
    return limit if limit > 0 else DEFAULT_HISTORY_MAX_ENTRIES
