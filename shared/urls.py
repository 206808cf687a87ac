"""
URL helpers: framework-agnostic, pure functions.

parse_url() is the only place a caller-supplied URL string is validated.
split_userinfo() and redact_url() work on the raw, percent-encoded user-info
so credentials go on the wire exactly as they were written in the URL.
"""

from __future__ import annotations

from typing import Optional, Union
from urllib.parse import urlsplit, urlunsplit

import httpx

from errors import MalformedUrlError

SUPPORTED_SCHEMES = ("http", "https")

UrlLike = Union[str, httpx.URL]


def parse_url(url: str) -> httpx.URL:
    """Parse *url* into an httpx.URL, raising MalformedUrlError if unusable.

    A URL is usable when it parses, uses http or https, and names a host.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise MalformedUrlError(f"Malformed URL: {url!r}", cause=e) from e
    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise MalformedUrlError(
            f"Malformed URL: {url!r} (unsupported scheme {parsed.scheme!r})"
        )
    if not parsed.host:
        raise MalformedUrlError(f"Malformed URL: {url!r} (no host)")
    return parsed


def split_userinfo(url: httpx.URL) -> tuple[httpx.URL, Optional[str]]:
    """Return *url* without its user-info, and the raw user-info (or None)."""
    userinfo = url.userinfo.decode("ascii")
    if not userinfo:
        return url, None
    return url.copy_with(userinfo=b""), userinfo


def redact_url(url: UrlLike) -> str:
    """Render *url* for logging with any password replaced by ``***``."""
    raw = str(url)
    parts = urlsplit(raw)
    if "@" not in parts.netloc:
        return raw
    userinfo, _, host = parts.netloc.rpartition("@")
    username = userinfo.partition(":")[0]
    return urlunsplit(parts._replace(netloc=f"{username}:***@{host}"))
