"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from goal_tracker.config import get_settings
from goal_tracker.database import init_db
from goal_tracker.api import api_router
from goal_tracker.exceptions import (
    GoalTrackerError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Another user's goal is reported exactly like a missing one.
ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_404_NOT_FOUND,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    await init_db()
    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Personal goal tracker with per-user goals and bearer-token authentication",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GoalTrackerError)
async def goal_tracker_error_handler(request: Request, exc: GoalTrackerError):
    """Convert domain errors into JSON responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("goal_tracker.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
