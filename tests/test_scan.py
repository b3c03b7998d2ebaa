"""Tests for scan orchestration (fetch → extract → probe → aggregate).

``respx`` mocks both the page fetch (``GET``) and the link probes (``HEAD``),
so every test runs the real pipeline end-to-end without network access.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from clearout.scanner.errors import (
    InvalidUrlError,
    PageFetchError,
    PageFetchTimeoutError,
)
from clearout.scanner.models import LinkResult, ScanResult
from clearout.scanner.scan import run_scan, scan_page, summarise

_PAGE = "https://bio.example.com/me"

_BIO_HTML = """\
<html><body>
  <a href="https://example.com/ok">Working</a>
  <a href="/missing">Broken</a>
  <a href="https://example.com/old">Moved</a>
  <a href="https://example.com/ok">Working (duplicate)</a>
  <a href="mailto:me@example.com">Mail</a>
</body></html>
"""


def _link(url: str, *, working: bool, redirect: bool = False) -> LinkResult:
    return LinkResult(
        original_url=url,
        final_url=url + "/moved" if redirect else url,
        status=200 if working else 404,
        status_text="OK" if working else "Not Found",
        is_working=working,
        is_redirect=redirect,
        response_time_ms=1,
    )


# ---------------------------------------------------------------------------
# summarise
# ---------------------------------------------------------------------------

class TestSummarise:
    def test_counts(self) -> None:
        links = [
            _link("https://a.com", working=True),
            _link("https://b.com", working=True, redirect=True),
            _link("https://c.com", working=False),
            _link("https://d.com", working=False),
        ]
        result = summarise(links)

        assert result.total_links == 4
        assert result.working_links == 1
        assert result.redirects == 1
        assert result.broken_links == 2
        assert result.working_links + result.redirects + result.broken_links == result.total_links

    def test_preserves_order(self) -> None:
        links = [_link(f"https://{c}.com", working=True) for c in "zyx"]
        assert [link.original_url for link in summarise(links).links] == [
            "https://z.com",
            "https://y.com",
            "https://x.com",
        ]

    def test_empty(self) -> None:
        assert summarise([]) == ScanResult()


# ---------------------------------------------------------------------------
# scan_page end-to-end
# ---------------------------------------------------------------------------

class TestScanPage:
    def test_mixed_page(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(return_value=httpx.Response(200, text=_BIO_HTML))
            respx.head("https://example.com/ok").mock(return_value=httpx.Response(200))
            respx.head("https://bio.example.com/missing").mock(
                return_value=httpx.Response(404)
            )
            respx.head("https://example.com/old").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://example.com/new"}
                )
            )
            respx.head("https://example.com/new").mock(return_value=httpx.Response(200))

            result = asyncio.run(scan_page(_PAGE))

        assert result.total_links == 3
        assert result.working_links == 1
        assert result.redirects == 1
        assert result.broken_links == 1
        assert [link.original_url for link in result.links] == [
            "https://example.com/ok",
            "https://bio.example.com/missing",
            "https://example.com/old",
        ]
        assert result.links[2].final_url == "https://example.com/new"

    def test_page_without_links_is_empty_result(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(
                return_value=httpx.Response(200, text="<html><body>nothing</body></html>")
            )
            result = asyncio.run(scan_page(_PAGE))

        assert result == ScanResult()
        assert result.to_dict() == {
            "totalLinks": 0,
            "workingLinks": 0,
            "brokenLinks": 0,
            "redirects": 0,
            "links": [],
        }

    def test_page_fetch_follows_redirect(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(
                return_value=httpx.Response(
                    302, headers={"Location": "https://bio.example.com/me/"}
                )
            )
            respx.get("https://bio.example.com/me/").mock(
                return_value=httpx.Response(200, text="<p>empty</p>")
            )
            result = asyncio.run(scan_page(_PAGE))

        assert result.total_links == 0

    def test_broken_probe_does_not_fail_scan(self) -> None:
        html = '<a href="https://up.example.com/">up</a><a href="https://down.example.com/">down</a>'
        with respx.mock:
            respx.get(_PAGE).mock(return_value=httpx.Response(200, text=html))
            respx.head("https://up.example.com/").mock(return_value=httpx.Response(200))
            respx.head("https://down.example.com/").mock(
                side_effect=httpx.ConnectError("Connection refused")
            )
            result = asyncio.run(scan_page(_PAGE, concurrency=1))

        assert result.total_links == 2
        assert result.working_links == 1
        assert result.broken_links == 1
        assert result.links[1].status == 0

    def test_run_scan_sync_wrapper(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(return_value=httpx.Response(200, text=""))
            result = run_scan(_PAGE)

        assert result.total_links == 0


# ---------------------------------------------------------------------------
# scan_page failures
# ---------------------------------------------------------------------------

class TestScanPageErrors:
    @pytest.mark.parametrize("url", ["", None])
    def test_missing_url(self, url) -> None:
        with pytest.raises(InvalidUrlError, match="URL is required"):
            asyncio.run(scan_page(url))

    @pytest.mark.parametrize("url", ["not a url", "example.com", "ftp://example.com/"])
    def test_invalid_url(self, url: str) -> None:
        with pytest.raises(InvalidUrlError, match="Invalid URL format") as exc_info:
            asyncio.run(scan_page(url))
        assert exc_info.value.status_code == 400

    def test_upstream_error_status(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(return_value=httpx.Response(404))
            with pytest.raises(PageFetchError) as exc_info:
                asyncio.run(scan_page(_PAGE))

        exc = exc_info.value
        assert exc.upstream_status == 404
        assert exc.reason == "Not Found"
        assert exc.status_code == 400
        assert exc.message == "Failed to fetch URL: 404 Not Found"

    def test_timeout(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(side_effect=httpx.ReadTimeout("timed out"))
            with pytest.raises(PageFetchTimeoutError) as exc_info:
                asyncio.run(scan_page(_PAGE))

        assert exc_info.value.status_code == 408

    def test_transport_error(self) -> None:
        with respx.mock:
            respx.get(_PAGE).mock(side_effect=httpx.ConnectError("Connection refused"))
            with pytest.raises(PageFetchError) as exc_info:
                asyncio.run(scan_page(_PAGE))

        assert exc_info.value.upstream_status is None
        assert exc_info.value.status_code == 500


# ---------------------------------------------------------------------------
# Timeout budgets
# ---------------------------------------------------------------------------

class TestScanTimeoutBudgets:
    def test_requests_carry_configured_budgets(self) -> None:
        """The shared scan client must not cut requests off at httpx's 5 s default."""
        seen: dict[str, dict] = {}

        def _record(name: str, response: httpx.Response):
            def side_effect(request: httpx.Request) -> httpx.Response:
                seen[name] = request.extensions["timeout"]
                return response

            return side_effect

        html = '<a href="https://example.com/slow">slow</a>'
        with respx.mock:
            respx.get(_PAGE).mock(
                side_effect=_record("page", httpx.Response(200, text=html))
            )
            respx.head("https://example.com/slow").mock(
                side_effect=_record("probe", httpx.Response(200))
            )
            result = asyncio.run(
                scan_page(_PAGE, page_timeout_ms=20000, probe_timeout_ms=12000)
            )

        assert result.working_links == 1
        assert seen["page"] == {"connect": 20.0, "read": 20.0, "write": 20.0, "pool": 20.0}
        assert seen["probe"] == {"connect": 12.0, "read": 12.0, "write": 12.0, "pool": 12.0}

    def test_default_budgets_come_from_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("clearout.scanner.scan.settings.page_fetch_timeout_ms", 15000)
        monkeypatch.setattr("clearout.scanner.prober.settings.probe_timeout_ms", 10000)
        seen: list[float] = []

        def side_effect(request: httpx.Request) -> httpx.Response:
            seen.append(request.extensions["timeout"]["read"])
            if request.method == "GET":
                return httpx.Response(200, text='<a href="https://example.com/a">a</a>')
            return httpx.Response(200)

        with respx.mock:
            respx.get(_PAGE).mock(side_effect=side_effect)
            respx.head("https://example.com/a").mock(side_effect=side_effect)
            asyncio.run(scan_page(_PAGE))

        assert seen == [15.0, 10.0]
