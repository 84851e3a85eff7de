"""
Wrestling Universe Manager API

FastAPI application for championship titles and show rosters.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from universe_manager.config import settings
from universe_manager.database import init_db
from universe_manager.exceptions import (
    ConflictError,
    NotFoundError,
    StorageError,
    UniverseError,
    ValidationError,
)
from universe_manager.api import (
    wrestlers_router,
    shows_router,
    titles_router,
    health_router,
    seed_router,
)

logging.basicConfig(level=settings.effective_log_level, format=settings.log_format)
logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (ValidationError, 422),
    (ConflictError, 409),
    (StorageError, 503),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: Create tables if they don't exist
    init_db()
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Wrestling Universe Manager API

    Championship and roster book-keeping for a wrestling promotion:
    - **Titles**: Championship belts, their current holders and reign history
    - **Shows**: Brands with exclusive rosters (one show per wrestler)
    - **Wrestlers**: Registration and per-wrestler title/show lookups

    ## Rules
    - A title has at most one open reign; crowning a new champion closes it
    - Assigning a wrestler to a show transfers them off their previous show
    - Championship and roster history is never deleted
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UniverseError)
async def universe_error_handler(request: Request, exc: UniverseError) -> JSONResponse:
    """Map the engine's error taxonomy onto HTTP status codes."""
    status_code = 500
    for error_cls, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            status_code = code
            break
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage faults that escaped a service are reported like StorageError."""
    logger.error(f"{request.method} {request.url.path} storage failure: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


# Register routers
app.include_router(wrestlers_router)
app.include_router(shows_router)
app.include_router(titles_router)
app.include_router(health_router)
app.include_router(seed_router)


@app.get("/", tags=["health"])
def root():
    """Root endpoint returning API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health", tags=["health"])
def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}
