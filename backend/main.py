"""
SkillHive API application.

Run with:
    uvicorn backend.main:app --reload

Or:
    skillhive-api
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from skillhive import __version__
from skillhive.core.config import get_config
from backend.api import (
    profiles,
    hackathons,
    recommendation,
    teammates,
    enrollments,
    dashboard,
)
from backend.core.exceptions import AppException
from backend.core.logging import configure_logging, get_logger
from backend.schemas.response.common import HealthResponse
from backend.middleware import (
    app_exception_response,
    error_handler_middleware,
    logging_middleware,
)
from backend.utils import data_store, load_seed_directory

config = get_config()

# Configure structured logging
configure_logging(config)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed_dir = config.api.seed_dir
    if seed_dir is not None:
        counts = load_seed_directory(seed_dir)
        logger.info("Store seeded", **counts)
    else:
        logger.info("No seed directory configured; store starts empty")
    yield


app = FastAPI(
    title="SkillHive API",
    description="Skill-based hackathon recommendations and teammate matching",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

# Middleware registration order matters!
# Logging middleware should be first to capture all requests
app.middleware("http")(logging_middleware)
# Error handler should be after logging to catch errors in logged requests
app.middleware("http")(error_handler_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.api.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppException)
async def handle_app_exception(request: Request, exc: AppException):
    trace_id = getattr(request.state, "trace_id", "unknown")
    return app_exception_response(exc, trace_id)


# Routers
app.include_router(profiles.router, prefix="/api", tags=["profiles"])
app.include_router(hackathons.router, prefix="/api", tags=["hackathons"])
app.include_router(recommendation.router, prefix="/api", tags=["recommendation"])
app.include_router(teammates.router, prefix="/api", tags=["teammates"])
app.include_router(enrollments.router, prefix="/api", tags=["enrollments"])
app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])


@app.get("/")
async def root():
    return {"message": "Welcome to SkillHive API", "version": __version__}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(status="healthy", version=__version__, records=data_store.get_stats())


def run():
    """Serve the API with uvicorn (``skillhive-api`` console script)."""
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
