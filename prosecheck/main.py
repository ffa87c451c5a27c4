"""prosecheck HTTP service.

FastAPI application: structured logging, per-request log context, a warm
engine for the default language, and JSON error bodies for failures.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from prosecheck.api.router import api_router
from prosecheck.config import get_settings
from prosecheck.errors import ConfigurationError
from prosecheck.services.engine_cache import engine_cache

VERSION = "0.1.0"


def configure_logging(debug: bool, level: str) -> None:
    """Console output while debugging, one JSON object per event otherwise."""
    renderer = structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
    )


configure_logging(get_settings().DEBUG, get_settings().LOG_LEVEL)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "app_starting",
        debug=settings.DEBUG,
        default_lang=settings.DEFAULT_LANG,
        fault_policy=settings.VALIDATOR_FAULT_POLICY,
    )

    # A broken bundled rule set should stop startup, not the first request.
    engine = engine_cache.get_or_create(settings.DEFAULT_LANG)
    logger.info("app_started", validators=len(engine.registry))

    yield

    engine_cache.clear()
    logger.info("app_stopped")


app = FastAPI(
    title="prosecheck",
    description="Checks natural-language documents against configurable style and grammar rules.",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Bind a request id to every log event of the request and log its duration."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)

    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "request_completed",
        method=request.method,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    response.headers["X-Request-ID"] = request_id
    return response


# ── Error responses ──


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("configuration_error", validator=exc.validator, key=exc.key, error=str(exc))
    return JSONResponse(
        status_code=500,
        content={"error": "configuration_error", "message": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("unhandled_exception", method=request.method, error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "message": "An unexpected error occurred."},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "name": "prosecheck",
        "version": VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
        "validate": "/api/v1/document/validate",
    }


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("prosecheck.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
