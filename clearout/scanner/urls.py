"""URL normalisation and validation helpers."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

HTTP_SCHEMES = ("http", "https")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _origin(url: str) -> str:
    """Return ``scheme://host[:port]`` for *url*.

    The port is omitted when it is the scheme's default, matching how
    browsers serialise an origin.

    Raises:
        ValueError: If *url* has no scheme or host, or an invalid port.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"URL has no origin: {url!r}")

    host = parts.hostname
    if ":" in host:  # IPv6 literal
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    return f"{parts.scheme}://{host}"


def normalize_url(href: str, base_url: str | None = None) -> str:
    """Resolve *href* into an absolute URL string.

    Resolution order:

    * ``http://`` / ``https://`` hrefs are returned unchanged.
    * protocol-relative ``//host/path`` gets an ``https:`` prefix.
    * root-relative ``/path`` is joined onto the origin of *base_url*.
    * anything else is resolved relative to *base_url*.
    * without a base, ``https://`` is prepended as a last resort.

    Never raises: on any resolution failure the original *href* is returned
    and left for :func:`is_valid_url` to reject.
    """
    try:
        if href.startswith(("http://", "https://")):
            return href
        if href.startswith("//"):
            return "https:" + href
        if href.startswith("/"):
            if base_url:
                return _origin(base_url) + href
            return href
        if base_url:
            return urljoin(base_url, href)
        return "https://" + href
    except ValueError:
        return href


def is_valid_url(value: object) -> bool:
    """Return ``True`` if *value* is a syntactically valid absolute URL.

    A scheme is always required; ``http``/``https`` URLs must also carry a
    host.  Non-hierarchical schemes such as ``mailto:`` are valid here and
    filtered later by the caller.
    """
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parts = urlsplit(value.strip())
        parts.port  # raises ValueError for a non-numeric / out-of-range port
    except ValueError:
        return False

    if not parts.scheme:
        return False
    if parts.scheme in HTTP_SCHEMES:
        return bool(parts.hostname) and not any(ch.isspace() for ch in parts.netloc)
    return True


def is_http_url(value: str) -> bool:
    """Return ``True`` for a valid URL whose scheme is ``http`` or ``https``."""
    return is_valid_url(value) and urlsplit(value.strip()).scheme in HTTP_SCHEMES
