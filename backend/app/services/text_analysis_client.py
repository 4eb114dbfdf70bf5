"""Hugging Face Inference API client for advisory text analysis.

Reads configuration from environment variables:
  HUGGING_FACE_API_KEY: optional; analysis is skipped when missing
  HUGGING_FACE_MODEL_URL: inference endpoint (default: facebook/bart-large-mnli)
  HUGGING_FACE_TIMEOUT: seconds (default 10)

The result is advisory: callers must treat ``None`` as the normal case.
This module never raises for collaborator failures.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import (
    get_hugging_face_key,
    get_hugging_face_model_url,
    get_hugging_face_timeout,
)

logger = logging.getLogger(__name__)


def is_text_analysis_available() -> bool:
    """Return True if the Hugging Face API key is configured."""
    return bool(get_hugging_face_key())


async def _post(client: httpx.AsyncClient, url: str, api_key: str, text: str) -> httpx.Response:
    return await client.post(
        url,
        headers={"Authorization": f"Bearer {api_key}"},
        json={"inputs": text},
    )


async def analyze_text(
    text: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[Any]:
    """Send *text* to the inference endpoint and return the decoded JSON.

    Returns ``None`` when the key is missing, the request fails or times
    out, the status is not 2xx, or the body is not JSON.
    """
    api_key = get_hugging_face_key()
    if not api_key:
        logger.warning("Hugging Face API key not configured (HUGGING_FACE_API_KEY); using heuristic evaluation only")
        return None

    url = get_hugging_face_model_url()

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=get_hugging_face_timeout()) as owned:
                response = await _post(owned, url, api_key, text)
        else:
            response = await _post(client, url, api_key, text)
    except httpx.TimeoutException:
        logger.warning("Hugging Face request timed out; using heuristic evaluation only")
        return None
    except httpx.HTTPError as exc:
        logger.warning("Hugging Face request failed: %s; using heuristic evaluation only", exc)
        return None

    if not response.is_success:
        logger.warning(
            "Hugging Face returned HTTP %s; using heuristic evaluation only",
            response.status_code,
        )
        return None

    try:
        return response.json()
    except ValueError:
        logger.warning("Hugging Face response is not valid JSON; using heuristic evaluation only")
        return None
