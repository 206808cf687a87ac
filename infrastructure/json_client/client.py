"""Synchronous JSON-over-HTTP client backed by httpx.

One call is one exchange: open a client, send, read the whole body, parse it,
close everything, return a Result. Nothing is shared between calls, so a
single JsonHttpClient can be used from several threads at once.

Only a malformed URL string, or a POST body JSON cannot encode, is raised to
the caller. Transport failures and unparseable bodies come back as
ExceptionResult; non-2xx statuses with a JSON body come back as a JsonResult
with is_error set.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
from structlog.stdlib import BoundLogger

from config import ClientSettings
from errors import ParseError, TransportError
from schemas.results import NO_STATUS, ExceptionResult, JsonResult, Result
from shared.auth import basic_auth_header
from shared.logging import get_logger
from shared.urls import UrlLike, parse_url, redact_url, split_userinfo

log = get_logger(__name__)

# Statuses at or above this are read as an error body
ERROR_BODY_THRESHOLD = 400

_JSON_CONTENT_TYPE = "application/json"

_POST_HEADERS = {
    "Accept": _JSON_CONTENT_TYPE,
    "Accept-Charset": "utf-8",
    "Cache-Control": "no-cache",
}


class JsonHttpClient:
    """Issues GET and POST requests and wraps the outcome in a Result.

    Args:
        settings: Timeout, keep-alive and redirect behaviour. Loaded from the
            environment when omitted.
        transport: httpx transport to send requests through. Tests pass an
            ``httpx.MockTransport``; production code leaves it unset.
        logger: structlog logger to report through. Defaults to this module's.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[BoundLogger] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._transport = transport
        self._log = logger or log

    # ── Public API ────────────────────────────────────────────────────────────

    def get(self, url: UrlLike) -> Result:
        """GET *url* and parse the response body as a JSON object.

        Raises:
            MalformedUrlError: *url* is a string that is not a usable URL.
        """
        return self._exchange("GET", url)

    def post(self, url: UrlLike, json_body: dict[str, Any]) -> Result:
        """POST *json_body* as UTF-8 JSON to *url* and parse the response.

        Raises:
            MalformedUrlError: *url* is a string that is not a usable URL.
            ValueError: *json_body* holds NaN or Infinity.
            TypeError: *json_body* holds a value JSON cannot represent.
        """
        content = json.dumps(
            json_body, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
        return self._exchange("POST", url, content.encode("utf-8"))

    def close(self) -> None:
        """No-op. Connections never outlive a single call."""

    def __enter__(self) -> "JsonHttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ── Exchange ──────────────────────────────────────────────────────────────

    def _exchange(
        self, method: str, url: UrlLike, content: Optional[bytes] = None
    ) -> Result:
        target = parse_url(url) if isinstance(url, str) else url

        call_log = self._log.bind(method=method, url=redact_url(target))
        call_log.debug("json_client_request")

        status = NO_STATUS
        session: Optional[httpx.Client] = None
        response: Optional[httpx.Response] = None
        try:
            target, userinfo = split_userinfo(target)
            headers = self._headers_for(method, userinfo)
            session = self._open_session()
            request = session.build_request(
                method, target, headers=headers, content=content
            )
            response = session.send(request, stream=True)
            status = response.status_code
            body = self._parse_body(call_log, status, response.read())
            return JsonResult(status, body)
        except ParseError as e:
            call_log.warning(
                "json_client_parse_failed", status=status, error=str(e.cause or e)
            )
            return ExceptionResult(status, e)
        except (httpx.RequestError, httpx.InvalidURL, OSError) as e:
            call_log.warning(
                "json_client_transport_failed",
                status=status,
                error=str(e),
                error_type=type(e).__name__,
            )
            error = TransportError(
                f"{method} {redact_url(target)} failed: {e}",
                status=None if status == NO_STATUS else status,
                cause=e,
            )
            return ExceptionResult(status, error)
        finally:
            self._close_safely(call_log, response)
            self._close_safely(call_log, session)

    def _headers_for(self, method: str, userinfo: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": _JSON_CONTENT_TYPE}
        if method == "POST":
            headers.update(_POST_HEADERS)
        if self._settings.user_agent:
            headers["User-Agent"] = self._settings.user_agent
        if not self._settings.keep_alive:
            headers["Connection"] = "close"
        if userinfo is not None:
            headers["Authorization"] = basic_auth_header(userinfo)
        return headers

    def _open_session(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._settings.timeout_seconds,
            follow_redirects=self._settings.follow_redirects,
            transport=self._transport,
        )

    @staticmethod
    def _parse_body(
        call_log: BoundLogger, status: int, raw: bytes
    ) -> dict[str, Any]:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(
                "Response body is not valid UTF-8", status=status, cause=e
            ) from e

        if status < ERROR_BODY_THRESHOLD:
            call_log.debug("response_body_read", status=status, body=text)
        else:
            call_log.warning("error_body_read", status=status, body=text[:200])

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(
                "Response body is not valid JSON", status=status, cause=e
            ) from e
        if not isinstance(payload, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(payload).__name__}", status=status
            )
        return payload

    @staticmethod
    def _close_safely(call_log: BoundLogger, resource: Any) -> None:
        if resource is None:
            return
        try:
            resource.close()
        except Exception as e:
            call_log.info(
                "resource_close_failed",
                resource=type(resource).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
