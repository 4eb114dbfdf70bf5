from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from ..config import get_history_max_entries
from ..schemas.history_schema import EvaluationRecord


class EvaluationHistory:
    """Per-application evaluation history and track selection.

    One instance lives on ``app.state.history`` and is handed to routes
    through a dependency. At most ``max_entries`` records are kept; adding
    beyond that evicts the oldest. Not thread-safe; the server runs it on
    a single event loop.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is None:
            max_entries = get_history_max_entries()
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._records: Deque[EvaluationRecord] = deque(maxlen=max_entries)
        self._selected_track: Optional[str] = None

    @property
    def max_entries(self) -> int:
        return self._records.maxlen

    @property
    def selected_track(self) -> Optional[str]:
        return self._selected_track

    def select_track(self, track: Optional[str]) -> None:
        self._selected_track = track

    def add(self, record: EvaluationRecord) -> None:
        """Prepend *record*: most recent first."""
        self._records.appendleft(record)

    def entries(self) -> List[EvaluationRecord]:
        return list(self._records)

    def clear(self) -> int:
        """Drop all records and return how many were removed."""
        removed = len(self._records)
        self._records.clear()
        return removed

    def __len__(self) -> int:
        return len(self._records)
