"""Single-link health check.

:func:`probe_link` issues a ``HEAD`` request, follows redirects and folds
every outcome, including transport failures, into a :class:`LinkResult`.
It never raises; one bad link must not fail a whole scan.
"""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from clearout.config import settings
from clearout.scanner.models import LinkResult

logger = logging.getLogger(__name__)

# Fallback reason phrases for responses that arrive without one.
_STATUS_TEXTS = {
    200: "OK",
    201: "Created",
    301: "Moved Permanently",
    302: "Found",
    304: "Not Modified",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def status_text(status: int) -> str:
    """Return the static reason phrase for *status*, or ``"Unknown"``."""
    return _STATUS_TEXTS.get(status, "Unknown")


def default_headers() -> dict[str, str]:
    """Request headers identifying the scanner to remote servers."""
    return {"User-Agent": settings.user_agent}


def _elapsed_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def _failure(url: str, message: str, start: float) -> LinkResult:
    return LinkResult(
        original_url=url,
        final_url=url,
        status=0,
        status_text=message,
        is_working=False,
        is_redirect=False,
        response_time_ms=_elapsed_ms(start),
    )


async def _head(client: httpx.AsyncClient, url: str, timeout: float) -> httpx.Response:
    # The per-request timeout overrides the client default (5 s in httpx);
    # wait_for bounds the whole exchange, redirects included, and cancels the
    # in-flight request when the deadline passes.
    return await asyncio.wait_for(
        client.head(
            url, headers=default_headers(), follow_redirects=True, timeout=timeout
        ),
        timeout=timeout,
    )


async def probe_link(
    url: str,
    client: httpx.AsyncClient | None = None,
    timeout_ms: int | None = None,
) -> LinkResult:
    """Probe *url* and classify the outcome.

    Args:
        url: Absolute URL to check.
        client: Shared client for the current scan.  A private client is
            opened (and closed) when omitted.
        timeout_ms: Total time budget; defaults to ``settings.probe_timeout_ms``.

    Returns:
        A :class:`LinkResult`.  Transport failures are reported with
        ``status=0`` and a descriptive ``status_text``; timeouts always start
        with ``"Request timed out"``.
    """
    if timeout_ms is None:
        timeout_ms = settings.probe_timeout_ms
    timeout = timeout_ms / 1000

    start = time.perf_counter()
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await _head(own_client, url, timeout)
        else:
            response = await _head(client, url, timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.debug("Probe timed out after %d ms: %s", timeout_ms, url)
        return _failure(url, f"Request timed out after {timeout_ms} ms", start)
    except Exception as exc:
        logger.debug("Probe failed for %s: %r", url, exc)
        return _failure(url, str(exc).strip() or type(exc).__name__, start)

    response_time_ms = _elapsed_ms(start)
    final_url = str(response.url) or url
    status = response.status_code

    return LinkResult(
        original_url=url,
        final_url=final_url,
        status=status,
        status_text=response.reason_phrase or status_text(status),
        is_working=200 <= status < 400,
        # Raw string comparison: a trailing-slash or case change made by the
        # transport counts as a redirect too.
        is_redirect=final_url != url,
        response_time_ms=response_time_ms,
    )
