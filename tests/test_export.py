"""Tests for the clean-links HTML export."""

from __future__ import annotations

from clearout.scanner.export import export_links, render_links_html
from clearout.scanner.models import LinkResult, ScanResult


def _result(*links: LinkResult) -> ScanResult:
    return ScanResult(total_links=len(links), links=tuple(links))


_OK = LinkResult("https://a.com/ok", "https://a.com/ok", 200, "OK", True, False, 1)
_MOVED = LinkResult("https://a.com/old", "https://a.com/new", 200, "OK", True, True, 1)
_BROKEN = LinkResult("https://a.com/x", "https://a.com/x", 404, "Not Found", False, False, 1)


class TestExportLinks:
    def test_keeps_only_working_non_redirects(self) -> None:
        assert export_links(_result(_OK, _MOVED, _BROKEN)) == [_OK]


class TestRenderLinksHtml:
    def test_snippet_shape(self) -> None:
        assert render_links_html(_result(_OK, _BROKEN)) == (
            "<!-- Cleaned Links from ClearOut.bio -->\n"
            '<div class="bio-links">\n'
            '  <a href="https://a.com/ok" target="_blank" rel="noopener noreferrer">'
            "https://a.com/ok</a>\n"
            "</div>"
        )

    def test_empty_result(self) -> None:
        assert render_links_html(ScanResult()) == (
            '<!-- Cleaned Links from ClearOut.bio -->\n<div class="bio-links">\n</div>'
        )

    def test_escapes_urls(self) -> None:
        link = LinkResult(
            'https://a.com/?q="x"&y=1', 'https://a.com/?q="x"&y=1', 200, "OK", True, False, 1
        )
        html = render_links_html(_result(link))
        assert 'href="https://a.com/?q=&quot;x&quot;&amp;y=1"' in html
