from fastapi import Request

from ..services.history import EvaluationHistory


def get_history(request: Request) -> EvaluationHistory:
    """Return the history context attached to the running app."""
    return request.app.state.history
