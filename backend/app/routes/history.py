from typing import List

from fastapi import APIRouter, Depends

from ..constants import TRACK_OPTIONAL_FIELD, TRACKS
from ..schemas.history_schema import EvaluationRecord, TrackSelection
from ..services.history import EvaluationHistory
from .dependencies import get_history

router = APIRouter(
    prefix="/api",
    tags=["History"],
)


@router.get(
    "/history",
    response_model=List[EvaluationRecord],
    summary="List past evaluations",
    response_description="Evaluation records, most recent first",
)
def list_history(history: EvaluationHistory = Depends(get_history)) -> List[EvaluationRecord]:
    return history.entries()


@router.delete(
    "/history",
    summary="Clear evaluation history",
)
def clear_history(history: EvaluationHistory = Depends(get_history)) -> dict:
    removed = history.clear()
    return {"cleared": removed}


@router.get(
    "/tracks",
    summary="List evaluation tracks",
    response_description="Each track with the optional field it rewards",
)
def list_tracks(history: EvaluationHistory = Depends(get_history)) -> dict:
    return {
        "tracks": [
            {"track": track, "optionalField": TRACK_OPTIONAL_FIELD[track]}
            for track in TRACKS
        ],
        "selected": history.selected_track,
    }


@router.put(
    "/tracks/selected",
    response_model=TrackSelection,
    summary="Select the active track",
)
def select_track(
    selection: TrackSelection,
    history: EvaluationHistory = Depends(get_history),
) -> TrackSelection:
    history.select_track(selection.track)
    return TrackSelection(track=history.selected_track)
