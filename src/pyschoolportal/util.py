"""Shared utilities for validation and payload mapping."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime
from typing import Any

from .exceptions import ResponseDecodeError, ValidationError

EXPORT_FILENAME_PREFIX = "registrations"
EXPORT_FILENAME_SUFFIX = ".xlsx"


def export_filename(today: date | None = None) -> str:
    if today is None:
        today = datetime.now(UTC).date()
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}{EXPORT_FILENAME_SUFFIX}"


def to_websocket_url(url: str) -> str:
    if not isinstance(url, str) or not url:
        raise ValidationError("URL must be a non-empty string.")
    if url.startswith("https://"):
        return f"wss://{url.removeprefix('https://')}"
    if url.startswith("http://"):
        return f"ws://{url.removeprefix('http://')}"
    raise ValidationError("URL must use the http or https scheme.")


def require_id(value: Any, field: str) -> str:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required.")
    text = str(value).strip()
    if not text:
        raise ValidationError(f"{field} is required.")
    return text


def require_object(data: Any, keys: Iterable[str], label: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"Response included invalid {label} data.")
    missing = [key for key in keys if key not in data]
    if missing:
        raise ResponseDecodeError(f"Response missing {label} fields: {', '.join(missing)}.")
    return data


def require_list(data: Any, label: str) -> list[Any]:
    if not isinstance(data, list):
        raise ResponseDecodeError(f"Response included invalid {label} list.")
    return data


def require_bool(data: Any, label: str) -> bool:
    if not isinstance(data, bool):
        raise ResponseDecodeError(f"Response included invalid {label} flag.")
    return data


def require_int(data: Any, label: str) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise ResponseDecodeError(f"Response included invalid {label}.")
    return data
