"""Bounded-concurrency batch probing."""

from __future__ import annotations

import asyncio
from typing import Iterator, List, Sequence

import httpx

from clearout.config import settings
from clearout.scanner.models import LinkResult
from clearout.scanner.prober import probe_link


def _chunks(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    for i in range(0, len(items), size):
        yield items[i : i + size]


async def probe_all(
    urls: Sequence[str],
    concurrency: int | None = None,
    client: httpx.AsyncClient | None = None,
    timeout_ms: int | None = None,
) -> List[LinkResult]:
    """Probe every URL in *urls*, at most *concurrency* at a time.

    URLs are taken in consecutive chunks; a chunk is probed concurrently and
    the next one only starts once every probe in it has finished.  A slow
    link therefore delays the following chunk, but peak outbound connections
    never exceed *concurrency*.

    ``asyncio.gather`` returns results positionally, so the output order
    always equals the input order whatever order the probes complete in.

    Raises:
        ValueError: If *concurrency* is smaller than 1.
    """
    if concurrency is None:
        concurrency = settings.concurrency
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")

    results: List[LinkResult] = []
    for chunk in _chunks(list(urls), concurrency):
        chunk_results = await asyncio.gather(
            *(probe_link(url, client=client, timeout_ms=timeout_ms) for url in chunk)
        )
        results.extend(chunk_results)
    return results
