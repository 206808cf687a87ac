"""Unit tests for JsonClientError hierarchy."""

import pytest

from errors import (
    JsonClientError,
    MalformedUrlError,
    ParseError,
    TransportError,
)


class TestJsonClientErrorSubclasses:
    @pytest.mark.parametrize(
        "cls, code",
        [
            (MalformedUrlError, "malformed_url"),
            (TransportError, "transport_error"),
            (ParseError, "parse_error"),
        ],
        ids=["malformed_url", "transport", "parse"],
    )
    def test_error_codes(self, cls, code):
        e = cls("failed")
        assert isinstance(e, JsonClientError)
        assert e.error_code == code
        assert e.message == "failed"

    def test_malformed_url_is_value_error(self):
        assert isinstance(MalformedUrlError("bad"), ValueError)

    def test_cause_is_chained(self):
        original = ConnectionRefusedError("refused")
        e = TransportError("GET failed", cause=original)
        assert e.cause is original
        assert e.__cause__ is original


class TestJsonClientErrorToDict:
    def test_basic(self):
        e = ParseError("Response body is not valid JSON")
        assert e.to_dict() == {
            "error": "Response body is not valid JSON",
            "code": "parse_error",
        }

    def test_with_status_and_cause(self):
        e = TransportError("read failed", status=200, cause=OSError("reset"))
        d = e.to_dict()
        assert d["status"] == 200
        assert d["cause"] == "OSError: reset"

    def test_no_optional_keys_when_absent(self):
        d = MalformedUrlError("bad").to_dict()
        assert "status" not in d
        assert "cause" not in d
