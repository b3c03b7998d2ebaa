"""Link scanning endpoint.

Routes
------
POST /api/scan-links    Body: {"url": "https://..."}    → scan_page

Every failure is answered with ``{"error": "<message>"}``:

    400  missing / invalid URL, or the page answered with a non-2xx status
    408  the page fetch timed out
    500  anything else
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from clearout.scanner import PageFetchError, ScanError, scan_page

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScanRequest(BaseModel):
    url: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/scan-links", response_model=None)
async def scan_links(body: ScanRequest) -> dict[str, Any] | JSONResponse:
    """Fetch the page at ``url``, probe every outbound link and summarise.

    Returns the scan result with aggregate counts and per-link detail.
    """
    try:
        result = await scan_page(body.url)
    except PageFetchError as exc:
        logger.info(
            "Page fetch for %r failed (upstream %s %s): %s",
            body.url,
            exc.upstream_status,
            exc.reason,
            exc.message,
        )
        return error_response(exc.status_code, exc.message)
    except ScanError as exc:
        logger.info("Scan of %r failed (%d): %s", body.url, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)
    except Exception:
        logger.exception("Unexpected error scanning %r", body.url)
        return error_response(500, "Internal server error")
    return result.to_dict()
