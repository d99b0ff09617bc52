"""FastAPI application factory.

create_app() returns a configured FastAPI instance. The Database handle
is built here (or passed in, as the tests do) and hung on app.state,
so the process entry point owns the connection pool's lifetime.
Lifespan disposes of it on shutdown.

Every error leaves the app as {"error": "<message>"}.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from undangan import __version__
from undangan.api import api_router
from undangan.config import settings
from undangan.db.engine import Database

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info(
        "undangan.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    yield

    logger.info("undangan.shutdown")
    await app.state.db.dispose()


# ─── Error envelope ──────────────────────────────────────


def _format_validation_error(exc: RequestValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": _format_validation_error(exc)},
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    # Full detail goes to the log only; the client gets an opaque message.
    logger.error(
        "storage.error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Undangan",
        description="Wedding invitation management backend",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db = database or Database(settings.database_url, echo=settings.debug)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → Security → CORS → handler

    from undangan.middleware.request_id import RequestIdMiddleware
    from undangan.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: undangan.main:app)
app = create_app()
