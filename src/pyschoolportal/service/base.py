"""Service base class and shared request behavior."""

from __future__ import annotations

from typing import Any

import aiohttp

from ..exceptions import NetworkError, ValidationError
from .normalizer import NO_STATUS_MESSAGES, StatusMessages, read_bytes, read_json

_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)
DEFAULT_API_URI = "api"
DEFAULT_HEADERS = {"Accept": "application/json"}


class BaseService:
    """Base class for backend service clients."""

    service_id = "base"
    status_messages: StatusMessages = NO_STATUS_MESSAGES

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        base_url: str | None = None,
        api_uri: str | None = DEFAULT_API_URI,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        if session is None:
            raise ValidationError("Session is required.")
        self._session = session
        self._base_url = self._normalize_base_url(base_url)
        self._api_uri = self._normalize_api_uri(api_uri)
        self._timeout = timeout or _DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str | None:
        return self._base_url

    def _build_url(self, path: str) -> str:
        if not isinstance(path, str) or not path:
            raise ValidationError("Path must be a non-empty string.")
        if path.startswith("http://") or path.startswith("https://"):
            raise ValidationError("Use relative paths when building service requests.")
        if self._base_url is None:
            raise ValidationError("base_url is required to build service requests.")
        normalized_path = path if path.startswith("/") else f"/{path}"
        return f"{self._base_url}{self._api_uri}{normalized_path}"

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        status_messages: StatusMessages | None = None,
        **kwargs: Any,
    ) -> Any:
        url = self._build_url(path)
        return await self._request(
            method,
            url,
            expect_bytes=False,
            status_messages=status_messages,
            **kwargs,
        )

    async def _request_bytes(
        self,
        method: str,
        path: str,
        *,
        status_messages: StatusMessages | None = None,
        **kwargs: Any,
    ) -> bytes:
        url = self._build_url(path)
        return await self._request(
            method,
            url,
            expect_bytes=True,
            status_messages=status_messages,
            **kwargs,
        )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        expect_bytes: bool,
        status_messages: StatusMessages | None,
        **kwargs: Any,
    ) -> Any:
        messages = self.status_messages if status_messages is None else status_messages
        headers = dict(DEFAULT_HEADERS)
        headers.update(kwargs.pop("headers", None) or {})
        timeout = kwargs.pop("timeout", None) or self._timeout
        try:
            async with self._session.request(
                method,
                url,
                headers=headers,
                timeout=timeout,
                **kwargs,
            ) as response:
                if expect_bytes:
                    return await read_bytes(response, messages)
                return await read_json(response, messages)
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise NetworkError("Network request failed.") from exc

    def _normalize_base_url(self, base_url: str | None) -> str | None:
        if base_url is None:
            return None
        if not isinstance(base_url, str) or not base_url.strip():
            raise ValidationError("base_url must be a non-empty string.")
        return base_url.strip().rstrip("/")

    def _normalize_api_uri(self, api_uri: str | None) -> str:
        if api_uri is None:
            return ""
        if not isinstance(api_uri, str):
            raise ValidationError("api_uri must be a string.")
        normalized = api_uri.strip().strip("/")
        if not normalized:
            return ""
        return f"/{normalized}"
