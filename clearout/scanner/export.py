"""Static HTML snippet listing the clean links of a scan."""

from __future__ import annotations

from html import escape
from typing import List

from clearout.scanner.models import LinkResult, ScanResult

_HEADER = "<!-- Cleaned Links from ClearOut.bio -->"


def export_links(result: ScanResult) -> List[LinkResult]:
    """Return the working, non-redirect links of *result* in scan order."""
    return [link for link in result.links if link.is_working and not link.is_redirect]


def render_links_html(result: ScanResult) -> str:
    """Render the exportable links as a ``<div class="bio-links">`` snippet."""
    anchors = [
        f'  <a href="{escape(link.final_url)}" target="_blank" '
        f'rel="noopener noreferrer">{escape(link.final_url)}</a>'
        for link in export_links(result)
    ]
    return "\n".join([_HEADER, '<div class="bio-links">', *anchors, "</div>"])
