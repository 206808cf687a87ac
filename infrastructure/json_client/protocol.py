"""JsonClient protocol: callers depend on this, not the concrete implementation."""

from typing import Any, Protocol

from schemas.results import Result
from shared.urls import UrlLike


class JsonClient(Protocol):
    def get(self, url: UrlLike) -> Result: ...

    def post(self, url: UrlLike, json_body: dict[str, Any]) -> Result: ...
