"""Client facade for service access."""

from __future__ import annotations

from typing import TypeVar

import aiohttp

from .exceptions import ValidationError
from .service.base import DEFAULT_API_URI, BaseService
from .service.registration import RegistrationService
from .service.voting import VotingService

_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)
_ServiceT = TypeVar("_ServiceT", bound=BaseService)

SERVICES: dict[str, type[BaseService]] = {
    VotingService.service_id: VotingService,
    RegistrationService.service_id: RegistrationService,
}


class Client:
    """Facade that shares one HTTP session between service clients.

    The voting and registration backends usually live on different hosts, so
    ``base_url`` and ``api_uri`` can be overridden per service.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._base_url = base_url
        self._api_uri = api_uri if api_uri is not None else DEFAULT_API_URI
        self._timeout = timeout or _DEFAULT_TIMEOUT

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def list_services(self) -> list[str]:
        return sorted(SERVICES)

    async def get_service(
        self,
        service_id: str,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
    ) -> BaseService:
        service_cls = SERVICES.get(service_id)
        if service_cls is None:
            raise ValidationError(f"Unknown service: {service_id!r}.")
        return self._build(service_cls, base_url, api_uri)

    async def get_voting(
        self,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
    ) -> VotingService:
        return self._build(VotingService, base_url, api_uri)

    async def get_registration(
        self,
        *,
        base_url: str | None = None,
        api_uri: str | None = None,
    ) -> RegistrationService:
        return self._build(RegistrationService, base_url, api_uri)

    def _build(
        self,
        service_cls: type[_ServiceT],
        base_url: str | None,
        api_uri: str | None,
    ) -> _ServiceT:
        return service_cls(
            self._ensure_session(),
            base_url=base_url if base_url is not None else self._base_url,
            api_uri=api_uri if api_uri is not None else self._api_uri,
            timeout=self._timeout,
        )

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session
