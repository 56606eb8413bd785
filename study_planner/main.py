"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from study_planner.api import assignments, auth, quick_tasks, schedule, todos
from study_planner.config import get_settings
from study_planner.logging_config import setup_logging
from study_planner.services.storage import StorageUnavailableError
from study_planner.services.validation import ValidationFailure, format_errors

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    setup_logging(settings.log_level)
    logger.info(f"Starting study planner API ({settings.environment})")
    yield


app = FastAPI(
    title="Study Planner API",
    description="Personal todos, class schedule, assignments and quick tasks",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    """Malformed payloads are the client's problem: 400 with the reason."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unparseable or missing bodies get the same 400 shape as schema failures."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": format_errors(exc)}
    )


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    """Database failures are logged where they happen; the client gets no internals."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Failed to {exc.action}"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(todos.router)
app.include_router(schedule.router)
app.include_router(assignments.router)
app.include_router(quick_tasks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
