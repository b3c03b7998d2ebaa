"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging from ``settings.log_level``.  Scans
share no state: each request opens and closes its own HTTP client.

Routers
-------
    /api/scan-links  — scan a bio page and classify its links
    /health          — liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clearout import __version__
from clearout.config import settings
from clearout.log import setup_logging

from clearout.api.routers import scan as scan_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    setup_logging(settings.log_level)
    yield


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # A missing, non-JSON or non-string ``url`` is a caller error, not 422.
    return JSONResponse(status_code=400, content={"error": "URL is required"})


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="ClearOut API",
        description=(
            "Scans a bio page, extracts every outbound link and reports "
            "which links work, redirect or are broken."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # The UI is served separately; allow browser frontends on any origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(scan_router.router, prefix="/api", tags=["scan"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn clearout.api.app:app --reload
app = create_app()
