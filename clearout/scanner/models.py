"""Data models for the link-scanning pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LinkResult:
    """Outcome of probing a single outbound link."""

    original_url: str
    final_url: str
    status: int
    status_text: str
    is_working: bool
    is_redirect: bool
    response_time_ms: int

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON shape served by the API."""
        return {
            "originalUrl": self.original_url,
            "finalUrl": self.final_url,
            "status": self.status,
            "statusText": self.status_text,
            "isWorking": self.is_working,
            "isRedirect": self.is_redirect,
            "responseTimeMs": self.response_time_ms,
        }


@dataclass(frozen=True)
class ScanResult:
    """Aggregate counts plus per-link detail for one scanned page.

    ``redirects`` is a subset of the working links, so
    ``working_links + redirects + broken_links == total_links``.
    """

    total_links: int = 0
    working_links: int = 0
    broken_links: int = 0
    redirects: int = 0
    links: tuple[LinkResult, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalLinks": self.total_links,
            "workingLinks": self.working_links,
            "brokenLinks": self.broken_links,
            "redirects": self.redirects,
            "links": [link.to_dict() for link in self.links],
        }
