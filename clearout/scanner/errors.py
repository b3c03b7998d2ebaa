"""Exceptions raised by the scan orchestrator.

Each carries the HTTP ``status_code`` the API layer should answer with, so
the router never has to inspect exception types itself.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for failures that abort a whole scan."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidUrlError(ScanError):
    """The page URL supplied by the caller is missing or malformed."""

    status_code = 400


class PageFetchError(ScanError):
    """The target page could not be fetched.

    ``upstream_status`` is set when the remote server answered with a
    non-success status; it is ``None`` for transport failures.
    """

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        reason: str = "",
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.reason = reason
        self.status_code = 400 if upstream_status is not None else 500


class PageFetchTimeoutError(ScanError):
    """The target page did not respond within the page fetch timeout."""

    status_code = 408
