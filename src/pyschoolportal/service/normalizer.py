"""Response classification shared by every service.

A response is either a success (2xx), whose text body is decoded as JSON with
an empty body standing in for ``{}``, or a failure, which is turned into a
:class:`~pyschoolportal.exceptions.DomainError`. The error message is looked up
by status code first and falls back to the response's reason phrase.

Decoding failures on a success response raise
:class:`~pyschoolportal.exceptions.ResponseDecodeError`, never ``DomainError``,
so callers can tell a broken payload apart from a refused request.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol

from ..exceptions import DomainError, ResponseDecodeError


class ResponseLike(Protocol):
    status: int
    reason: str | None

    async def text(self) -> str: ...

    async def read(self) -> bytes: ...


StatusMessages = Mapping[int, str]

NO_STATUS_MESSAGES: StatusMessages = {}


def is_success(status: int) -> bool:
    return 200 <= status < 300


def error_message(status: int, reason: str | None, status_messages: StatusMessages) -> str:
    mapped = status_messages.get(status)
    if mapped is not None:
        return mapped
    return reason or ""


def raise_for_status(
    response: ResponseLike,
    status_messages: StatusMessages = NO_STATUS_MESSAGES,
) -> None:
    if is_success(response.status):
        return
    raise DomainError(
        response.status,
        error_message(response.status, response.reason, status_messages),
    )


def decode_body(text: str) -> Any:
    if not text:
        return {}
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise ResponseDecodeError("Response did not contain valid JSON.") from exc


async def read_json(
    response: ResponseLike,
    status_messages: StatusMessages = NO_STATUS_MESSAGES,
) -> Any:
    raise_for_status(response, status_messages)
    try:
        text = await response.text()
    except UnicodeDecodeError as exc:
        raise ResponseDecodeError("Response body is not valid text.") from exc
    return decode_body(text)


async def read_bytes(
    response: ResponseLike,
    status_messages: StatusMessages = NO_STATUS_MESSAGES,
) -> bytes:
    raise_for_status(response, status_messages)
    return await response.read()
