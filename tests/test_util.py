from datetime import UTC, date, datetime

import pytest

from pyschoolportal.exceptions import ResponseDecodeError, ValidationError
from pyschoolportal.util import (
    export_filename,
    require_bool,
    require_id,
    require_int,
    require_list,
    require_object,
    to_websocket_url,
)


def test_export_filename_for_date() -> None:
    assert export_filename(date(2026, 1, 5)) == "registrations-2026-01-05.xlsx"


def test_export_filename_defaults_to_utc_today() -> None:
    assert export_filename() == f"registrations-{datetime.now(UTC).date().isoformat()}.xlsx"


def test_to_websocket_url() -> None:
    assert to_websocket_url("https://example.com/status/ws") == "wss://example.com/status/ws"
    assert to_websocket_url("http://localhost:8000/ws") == "ws://localhost:8000/ws"
    with pytest.raises(ValidationError):
        to_websocket_url("ftp://example.com")
    with pytest.raises(ValidationError):
        to_websocket_url("")


def test_require_id() -> None:
    assert require_id(5, "id") == "5"
    assert require_id(" 12 ", "id") == "12"
    for value in (None, "", "  ", True):
        with pytest.raises(ValidationError):
            require_id(value, "id")


def test_require_object() -> None:
    data = {"a": 1, "b": None}
    assert require_object(data, ("a", "b"), "thing") is data
    with pytest.raises(ResponseDecodeError):
        require_object(data, ("a", "c"), "thing")
    with pytest.raises(ResponseDecodeError):
        require_object([data], ("a",), "thing")


def test_require_scalars() -> None:
    assert require_list([], "thing") == []
    assert require_bool(False, "flag") is False
    assert require_int(7, "id") == 7
    with pytest.raises(ResponseDecodeError):
        require_list({}, "thing")
    with pytest.raises(ResponseDecodeError):
        require_bool({}, "flag")
    with pytest.raises(ResponseDecodeError):
        require_int(True, "id")
    with pytest.raises(ResponseDecodeError):
        require_int("7", "id")
