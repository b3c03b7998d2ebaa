"""Link extraction: turns a page's HTML into an ordered list of unique URLs."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from clearout.scanner.urls import is_http_url, normalize_url


def extract_links(html: str, base_url: str) -> List[str]:
    """Return the absolute http(s) URLs of every ``<a href>`` in *html*.

    Each href is normalised against *base_url*.  Invalid URLs and other
    schemes (``mailto:``, ``tel:``, ``javascript:`` …) are dropped, and
    duplicates are removed keeping the first occurrence, so the result
    follows document order.

    ``html.parser`` is lenient: malformed or truncated markup yields whatever
    anchors could be parsed rather than an error.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    seen: set[str] = set()
    links: List[str] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if isinstance(href, list):  # multi-valued attribute quirk
            href = " ".join(href)
        href = (href or "").strip()
        if not href:
            continue

        url = normalize_url(href, base_url)
        if not is_http_url(url):
            continue
        if url not in seen:
            seen.add(url)
            links.append(url)
    return links
