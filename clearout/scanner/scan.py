"""Scan orchestration: fetch a page, extract its links, probe and aggregate."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from clearout.config import settings
from clearout.scanner.errors import (
    InvalidUrlError,
    PageFetchError,
    PageFetchTimeoutError,
)
from clearout.scanner.extractor import extract_links
from clearout.scanner.models import LinkResult, ScanResult
from clearout.scanner.prober import default_headers, status_text
from clearout.scanner.scheduler import probe_all
from clearout.scanner.urls import is_http_url

logger = logging.getLogger(__name__)


def summarise(links: Sequence[LinkResult]) -> ScanResult:
    """Aggregate per-link results into a :class:`ScanResult`.

    Redirects are counted separately from plain working links, so the three
    counters always add up to ``total_links``.
    """
    links = tuple(links)
    return ScanResult(
        total_links=len(links),
        working_links=sum(1 for link in links if link.is_working and not link.is_redirect),
        broken_links=sum(1 for link in links if not link.is_working),
        redirects=sum(1 for link in links if link.is_working and link.is_redirect),
        links=links,
    )


async def fetch_page(
    url: str,
    client: httpx.AsyncClient,
    timeout_ms: int | None = None,
) -> str:
    """Download the HTML of *url*.

    Raises:
        PageFetchTimeoutError: The page did not answer within *timeout_ms*.
        PageFetchError: Transport failure or non-2xx response.
    """
    if timeout_ms is None:
        timeout_ms = settings.page_fetch_timeout_ms

    try:
        response = await asyncio.wait_for(
            client.get(
                url,
                headers=default_headers(),
                follow_redirects=True,
                timeout=timeout_ms / 1000,
            ),
            timeout=timeout_ms / 1000,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise PageFetchTimeoutError(
            "Request timeout - the URL took too long to respond"
        ) from exc
    except httpx.HTTPError as exc:
        raise PageFetchError(f"Failed to fetch URL: {exc}") from exc

    if not response.is_success:
        reason = response.reason_phrase or status_text(response.status_code)
        raise PageFetchError(
            f"Failed to fetch URL: {response.status_code} {reason}",
            upstream_status=response.status_code,
            reason=reason,
        )
    return response.text


async def scan_page(
    page_url: str,
    *,
    concurrency: int | None = None,
    page_timeout_ms: int | None = None,
    probe_timeout_ms: int | None = None,
) -> ScanResult:
    """Scan *page_url* and classify every outbound link it contains.

    A page without any extractable link is a valid, all-zero result.

    Raises:
        InvalidUrlError: *page_url* is empty or not an http(s) URL.
        PageFetchTimeoutError: The page fetch timed out.
        PageFetchError: The page could not be fetched.
    """
    if not page_url or not isinstance(page_url, str):
        raise InvalidUrlError("URL is required")
    if not is_http_url(page_url):
        raise InvalidUrlError("Invalid URL format")

    logger.info("Scanning %s", page_url)

    # One client per scan: nothing is pooled across scans.
    async with httpx.AsyncClient(headers=default_headers()) as client:
        html = await fetch_page(page_url, client, timeout_ms=page_timeout_ms)
        urls = extract_links(html, page_url)
        if not urls:
            logger.info("No links found on %s", page_url)
            return ScanResult()

        logger.info("Probing %d link(s) from %s", len(urls), page_url)
        links = await probe_all(
            urls,
            concurrency=concurrency,
            client=client,
            timeout_ms=probe_timeout_ms,
        )

    result = summarise(links)
    logger.info(
        "Scan of %s done: %d total, %d working, %d redirects, %d broken",
        page_url,
        result.total_links,
        result.working_links,
        result.redirects,
        result.broken_links,
    )
    return result


def run_scan(page_url: str, **kwargs) -> ScanResult:
    """Synchronous wrapper around :func:`scan_page` for the CLI."""
    return asyncio.run(scan_page(page_url, **kwargs))
