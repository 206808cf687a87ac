"""HTTP Basic authentication helpers."""

from __future__ import annotations

import base64


def base64encode(text: str) -> str:
    """UTF-8 encode *text* and return it as standard base64, no line breaks."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def basic_auth_header(userinfo: str) -> str:
    """Build the Authorization header value for a ``user:password`` pair.

    >>> basic_auth_header("user:pw")
    'Basic dXNlcjpwdw=='
    """
    return f"Basic {base64encode(userinfo)}"
