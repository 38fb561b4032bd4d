"""Registration service client."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from ...exceptions import ValidationError
from ...models import RegistrationRequest, RegistrationResponse, Session, SessionSnapshot
from ...sink import FileSink
from ...util import (
    export_filename,
    require_bool,
    require_id,
    require_int,
    require_list,
    require_object,
)
from ..base import BaseService
from .const import (
    ADMIN_CHECK_ENDPOINT,
    ADMIN_EXPORT_ENDPOINT,
    ADMIN_LOGIN_ENDPOINT,
    ADMIN_LOGOUT_ENDPOINT,
    ADMIN_REGISTRATIONS_ENDPOINT,
    ADMIN_TOGGLE_ENDPOINT,
    LOGIN_STATUS_MESSAGES,
    REGISTER_ENDPOINT,
    SESSIONS_ENDPOINT,
    STATUS_ENDPOINT,
    STATUS_MESSAGES,
    XLSX_MEDIA_TYPE,
)

_LOGGER = logging.getLogger(__name__)

_SNAPSHOT_FIELDS = (
    "id",
    "field_code",
    "field_name",
    "session_date",
    "start_time",
    "end_time",
    "max_capacity",
    "turnus",
)
_SESSION_FIELDS = (*_SNAPSHOT_FIELDS, "available_spots")
_PERSON_FIELDS = (
    "student_first_name",
    "student_last_name",
    "guardian_first_name",
    "guardian_last_name",
    "guardian_phone",
    "guardian_email",
)
_REGISTRATION_FIELDS = ("id", "session", *_PERSON_FIELDS, "confirmed", "created_at")


class RegistrationService(BaseService):
    """Client for the open-day registration backend.

    Refused requests raise ``DomainError``. The 412, 409 and 404 statuses carry
    fixed user-facing messages (submissions closed, session full, unknown
    session); every other status carries the response's reason phrase.
    """

    service_id = "registration"
    status_messages = STATUS_MESSAGES

    async def list_sessions(self) -> list[Session]:
        """Return all sessions with their remaining capacity."""
        _LOGGER.debug("Service %s list_sessions started", self.service_id)
        data = await self._request_json("GET", SESSIONS_ENDPOINT)
        sessions = [self._map_session(item) for item in require_list(data, "session")]
        _LOGGER.debug(
            "Service %s list_sessions completed with %d sessions",
            self.service_id,
            len(sessions),
        )
        return sessions

    async def create_registration(self, request: RegistrationRequest) -> int:
        """Submit a registration and return its id."""
        if not isinstance(request, RegistrationRequest):
            raise ValidationError("request must be a RegistrationRequest.")
        _LOGGER.debug("Service %s create_registration started", self.service_id)
        data = await self._request_json("POST", REGISTER_ENDPOINT, json=asdict(request))
        registration_id = require_int(data, "registration id")
        _LOGGER.debug(
            "Service %s create_registration completed with id %s",
            self.service_id,
            registration_id,
        )
        return registration_id

    async def get_registration_enabled(self) -> bool:
        _LOGGER.debug("Service %s get_registration_enabled started", self.service_id)
        data = await self._request_json("GET", STATUS_ENDPOINT)
        enabled = require_bool(data, "registration status")
        _LOGGER.debug("Service %s get_registration_enabled completed", self.service_id)
        return enabled

    async def login(self, password: str) -> None:
        """Authenticate as administrator.

        A rejected password raises ``DomainError`` with status 401.
        """
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required.")
        _LOGGER.debug("Service %s login started", self.service_id)
        await self._request_json(
            "POST",
            ADMIN_LOGIN_ENDPOINT,
            json={"password": password},
            status_messages=LOGIN_STATUS_MESSAGES,
        )
        _LOGGER.debug("Service %s login completed", self.service_id)

    async def logout(self) -> None:
        _LOGGER.debug("Service %s logout started", self.service_id)
        await self._request_json("POST", ADMIN_LOGOUT_ENDPOINT)
        _LOGGER.debug("Service %s logout completed", self.service_id)

    async def check_auth(self) -> bool:
        _LOGGER.debug("Service %s check_auth started", self.service_id)
        data = await self._request_json("GET", ADMIN_CHECK_ENDPOINT)
        authenticated = require_bool(data, "authentication")
        _LOGGER.debug("Service %s check_auth completed", self.service_id)
        return authenticated

    async def list_registrations(self) -> list[RegistrationResponse]:
        _LOGGER.debug("Service %s list_registrations started", self.service_id)
        data = await self._request_json("GET", ADMIN_REGISTRATIONS_ENDPOINT)
        registrations = [
            self._map_registration(item) for item in require_list(data, "registration")
        ]
        _LOGGER.debug(
            "Service %s list_registrations completed with %d registrations",
            self.service_id,
            len(registrations),
        )
        return registrations

    async def confirm_registration(self, registration_id: int) -> None:
        registration_id_value = require_id(registration_id, "registration_id")
        _LOGGER.debug(
            "Service %s confirm_registration %s started",
            self.service_id,
            registration_id_value,
        )
        await self._request_json(
            "POST",
            f"{ADMIN_REGISTRATIONS_ENDPOINT}/{registration_id_value}/confirm",
        )
        _LOGGER.debug(
            "Service %s confirm_registration %s completed",
            self.service_id,
            registration_id_value,
        )

    async def delete_registration(self, registration_id: int) -> None:
        registration_id_value = require_id(registration_id, "registration_id")
        _LOGGER.debug(
            "Service %s delete_registration %s started",
            self.service_id,
            registration_id_value,
        )
        await self._request_json(
            "DELETE",
            f"{ADMIN_REGISTRATIONS_ENDPOINT}/{registration_id_value}",
        )
        _LOGGER.debug(
            "Service %s delete_registration %s completed",
            self.service_id,
            registration_id_value,
        )

    async def export_registrations(
        self,
        sink: FileSink,
        *,
        include_unconfirmed: bool = False,
    ) -> str:
        """Download the registrations spreadsheet and hand it to ``sink``.

        The file is named ``registrations-<UTC date>.xlsx``; the name is
        returned. Nothing is persisted when the download fails.
        """
        params = {"include_unconfirmed": "true"} if include_unconfirmed else None
        _LOGGER.debug("Service %s export_registrations started", self.service_id)
        data = await self._request_bytes(
            "GET",
            ADMIN_EXPORT_ENDPOINT,
            headers={"Accept": XLSX_MEDIA_TYPE},
            params=params,
        )
        filename = export_filename()
        await sink.persist(data, filename)
        _LOGGER.debug(
            "Service %s export_registrations completed, saved %d bytes as %s",
            self.service_id,
            len(data),
            filename,
        )
        return filename

    async def toggle_registration(self) -> bool:
        """Flip the open/closed flag and return the new value."""
        _LOGGER.debug("Service %s toggle_registration started", self.service_id)
        data = await self._request_json("POST", ADMIN_TOGGLE_ENDPOINT)
        enabled = require_bool(data, "registration status")
        _LOGGER.debug(
            "Service %s toggle_registration completed, enabled: %s",
            self.service_id,
            enabled,
        )
        return enabled

    def _map_session(self, data: Any) -> Session:
        payload = require_object(data, _SESSION_FIELDS, "session")
        return Session(**{field: payload[field] for field in _SESSION_FIELDS})

    def _map_snapshot(self, data: Any) -> SessionSnapshot:
        payload = require_object(data, _SNAPSHOT_FIELDS, "session")
        return SessionSnapshot(**{field: payload[field] for field in _SNAPSHOT_FIELDS})

    def _map_registration(self, data: Any) -> RegistrationResponse:
        payload = require_object(data, _REGISTRATION_FIELDS, "registration")
        return RegistrationResponse(
            id=payload["id"],
            session=self._map_snapshot(payload["session"]),
            confirmed=payload["confirmed"],
            created_at=payload["created_at"],
            **{field: payload[field] for field in _PERSON_FIELDS},
        )
