"""
Wine Cellar API

FastAPI backend serving wine recommendations filtered by wine type and region.

Usage:
    uvicorn main:app --reload
"""

# Load environment variables from .env file FIRST
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cellar import __version__
from cellar.config import Config

# Configure logging from environment
logging.basicConfig(
    level=getattr(logging, Config.log_level(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
logger.info(f"Starting with LOG_LEVEL={Config.log_level()}")

from cellar.db import ensure_schema
from cellar.models import QueryStatus
from cellar.routes import wine_router
from cellar.routes.wine import envelope_response
from cellar.services.wine_repository import WineRepository

# Startup state - set to True once DB is ready
_is_ready = False


def is_ready() -> bool:
    """Check if the service is ready to handle requests."""
    return _is_ready


def set_ready(ready: bool = True):
    """Set the service ready state."""
    global _is_ready
    _is_ready = ready


def prepare_database(db_path: str) -> int:
    """Migrate the database and seed it from the JSON catalog if empty. Returns wine count."""
    ensure_schema(db_path)
    repo = WineRepository(db_path)
    try:
        if repo.count() == 0 and Config.seed_on_startup():
            inserted, skipped = repo.seed_from_json(Config.seed_path())
            logger.info(f"Seeded cellar: {inserted} wines inserted, {skipped} skipped")
        return repo.count()
    finally:
        repo.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    wine_count = prepare_database(Config.database_path())
    set_ready(True)
    logger.info(f"Service ready to handle requests ({wine_count} wines)")
    yield
    set_ready(False)


app = FastAPI(
    title="Wine Cellar API",
    description="Wine recommendations by wine type and region",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def warmup_middleware(request: Request, call_next):
    """Return 503 with retry hint if service is still warming up."""
    # Always allow health checks (for probes) and root
    if request.url.path in ("/health", "/", "/docs", "/openapi.json"):
        return await call_next(request)

    if not is_ready():
        return JSONResponse(
            status_code=503,
            content={
                "error": "Service warming up",
                "message": "The server is starting up. Please retry in a few seconds.",
                "retry_after": 10,
            },
            headers={"Retry-After": "10"},
        )

    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reshape query validation errors on /wine routes into the result envelope."""
    if not request.url.path.startswith("/wine"):
        return await request_validation_exception_handler(request, exc)

    problems = []
    for error in exc.errors():
        field = error.get("loc", ["request"])[-1]
        problems.append(f"{field}: {error.get('msg', 'invalid value')}")
    description = "; ".join(problems) or "Invalid request"

    logger.info(f"Rejected request {request.url.path}: {description}")
    return envelope_response(400, QueryStatus.INVALID_REQUEST, description)


app.include_router(wine_router, tags=["wine"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Wine Cellar API",
        "version": __version__,
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint for container probes."""
    return {"status": "healthy"}
