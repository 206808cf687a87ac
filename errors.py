"""
Client error hierarchy.

JsonClientError is the base for all typed errors. Only MalformedUrlError is
ever raised to callers; TransportError and ParseError are captured into an
ExceptionResult at the call boundary.

Non-2xx HTTP statuses are not errors at this level: they come back as a
JsonResult whose is_error flag is set.
"""

from __future__ import annotations

from typing import Any, Optional


class JsonClientError(Exception):
    """Base client error. All typed errors inherit from this."""

    error_code: str = "client_error"

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "code": self.error_code}
        if self.status is not None:
            payload["status"] = self.status
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


class MalformedUrlError(JsonClientError, ValueError):
    error_code = "malformed_url"


class TransportError(JsonClientError):
    error_code = "transport_error"


class ParseError(JsonClientError):
    error_code = "parse_error"
