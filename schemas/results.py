"""
Result types returned by the JSON client.

Result is a tagged union of two frozen dataclasses:

JsonResult       : the response body parsed as a JSON object
ExceptionResult  : a transport failure or an unparseable body

Exactly one of them comes back from every client call. Neither holds a
reference to the connection or its streams.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal, Union

# Sentinel status used when the response headers were never received
NO_STATUS = -1


@dataclass(frozen=True)
class JsonResult:
    status: int
    json: dict[str, Any]
    kind: Literal["json"] = field(default="json", init=False)

    # The body is a dict, so results are not hashable
    __hash__ = None  # type: ignore[assignment]

    @property
    def is_error(self) -> bool:
        return self.status < 200 or self.status >= 300

    def __str__(self) -> str:
        body = json.dumps(self.json, separators=(",", ":"), ensure_ascii=False)
        return f"[{self.status}|{body}]"


@dataclass(frozen=True)
class ExceptionResult:
    status: int
    exception: BaseException
    kind: Literal["exception"] = field(default="exception", init=False)

    @property
    def is_error(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"[{self.status}|{type(self.exception).__name__}: {self.exception}]"


Result = Union[JsonResult, ExceptionResult]
