"""Utilities for rendering scan results in the CLI."""

from __future__ import annotations

from typing import List

from clearout.scanner.models import LinkResult, ScanResult


def render_summary(result: ScanResult) -> str:
    """Render the aggregate counters as a short block of text."""
    return "\n".join(
        [
            f"Total     : {result.total_links}",
            f"Working   : {result.working_links}",
            f"Redirects : {result.redirects}",
            f"Broken    : {result.broken_links}",
        ]
    )


def render_links(links: List[LinkResult] | tuple[LinkResult, ...]) -> str:
    """Render one line per link: icon, status, timing, URL (and redirect target)."""
    lines = []
    for link in links:
        icon = _get_icon(link)
        status = str(link.status) if link.status else "ERR"
        line = f"{icon} {status:>3}  {link.response_time_ms:>6} ms  {link.original_url}"
        if link.is_redirect:
            line += f"  → {link.final_url}"
        if not link.is_working:
            line += f"  ({link.status_text})"
        lines.append(line)
    return "\n".join(lines)


def _get_icon(link: LinkResult) -> str:
    if link.is_working and not link.is_redirect:
        return "✅"
    if link.is_working:
        return "↪️"
    return "❌"
