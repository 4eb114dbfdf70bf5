import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_cors_origins, is_debug
from .routes.evaluation import router as evaluation_router
from .routes.history import router as history_router
from .services.history import EvaluationHistory
from .services.text_analysis_client import is_text_analysis_available
from .services.transport import utc_timestamp


# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    print("Starting IdeaScope evaluation service")
    print(f"   Hugging Face Key:  {'Configured' if is_text_analysis_available() else 'Not set (heuristic scoring only)'}")
    print("   Ready to evaluate ideas!")

    yield

    print("Shutting down IdeaScope evaluation service")


app = FastAPI(
    title="IdeaScope: Idea Evaluation API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Explicit per-app context; routes reach it through a dependency.
app.state.history = EvaluationHistory()


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(evaluation_router)
app.include_router(history_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "IdeaScope",
        "version": "0.1.0",
        "description": "Heuristic evaluation of startup, project, research and hackathon ideas",
        "docs": "/docs",
        "endpoints": {
            "evaluate": "POST /api/evaluate - Evaluate an idea",
            "history": "GET /api/history - List past evaluations",
            "clear_history": "DELETE /api/history - Clear past evaluations",
            "tracks": "GET /api/tracks - List tracks",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "ideascope",
        "version": "0.1.0",
        "text_analysis_configured": is_text_analysis_available(),
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "type": "internal_error",
            "details": str(exc) if is_debug() else "An unexpected error occurred",
            "timestamp": utc_timestamp(),
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=is_debug(),
    )
