"""
Main FastAPI application.
"""
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from defectdash.api.routes import metrics, projects
from defectdash.core.config import settings
from defectdash.core.errors import (
    APIConnectionError,
    APIError,
    DefectDashError,
    ProjectNotFoundError,
    ValidationError,
)
from defectdash.core.logging import setup_logging
from defectdash.core.types import ErrorResponse

setup_logging()
logger = logging.getLogger("defectdash.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown logic.
    """
    logger.info(f"Starting DefectDash API (remote: {settings.DASHBOARD_API_BASE_URL})...")
    yield
    logger.info("Shutting down DefectDash API...")


app = FastAPI(
    title="DefectDash",
    description="Defect metrics dashboard API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Configuration
# Allow all for development convenience
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(metrics.router, prefix="/api/v1", tags=["metrics"])
app.include_router(projects.router, prefix="/api/v1", tags=["projects"])


def _status_for(error: DefectDashError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, ProjectNotFoundError):
        return 404
    if isinstance(error, APIConnectionError):
        return 503
    if isinstance(error, APIError):
        return 502
    return 500


@app.exception_handler(DefectDashError)
async def defectdash_error_handler(request: Request, exc: DefectDashError):
    """Render domain errors as ErrorResponse."""
    status_code = _status_for(exc)
    logger.warning(f"{request.method} {request.url.path} failed ({status_code}): {exc.message}")
    body = ErrorResponse(error=exc.message, code=exc.code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "defectdash",
    }


@app.get("/ready")
async def readiness_check():
    """Readiness probe."""
    return {"status": "ready"}


def main():
    """Run the API with uvicorn."""
    import uvicorn
    uvicorn.run("defectdash.api.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
