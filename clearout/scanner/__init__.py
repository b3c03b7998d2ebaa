"""Scanner package — link extraction, probing and scan orchestration."""

from clearout.scanner.errors import (
    InvalidUrlError,
    PageFetchError,
    PageFetchTimeoutError,
    ScanError,
)
from clearout.scanner.export import export_links, render_links_html
from clearout.scanner.extractor import extract_links
from clearout.scanner.models import LinkResult, ScanResult
from clearout.scanner.prober import probe_link
from clearout.scanner.scan import run_scan, scan_page, summarise
from clearout.scanner.scheduler import probe_all
from clearout.scanner.urls import is_valid_url, normalize_url

__all__ = [
    "LinkResult",
    "ScanResult",
    "ScanError",
    "InvalidUrlError",
    "PageFetchError",
    "PageFetchTimeoutError",
    "normalize_url",
    "is_valid_url",
    "extract_links",
    "probe_link",
    "probe_all",
    "scan_page",
    "run_scan",
    "summarise",
    "export_links",
    "render_links_html",
]
