"""Voting service client."""

from __future__ import annotations

import logging
from typing import Any

from ...exceptions import ValidationError
from ...models import (
    AdminStats,
    Candidate,
    CandidateResult,
    LotteryWinner,
    SessionInfo,
    VotingStatus,
)
from ...util import require_bool, require_id, require_list, require_object, to_websocket_url
from ..base import BaseService
from .channel import StatusChannel, StatusListener, map_status
from .const import (
    ADMIN_LOTTERY_ENDPOINT,
    ADMIN_RESULTS_ENDPOINT,
    ADMIN_STATS_ENDPOINT,
    ADMIN_STATUS_ENDPOINT,
    CANDIDATES_ENDPOINT,
    PRESENTER_CHECK_ENDPOINT,
    PRESENTER_LOGIN_ENDPOINT,
    PRESENTER_LOGOUT_ENDPOINT,
    SESSION_ENDPOINT,
    STATUS_ACTIONS,
    STATUS_ENDPOINT,
    STATUS_WS_ENDPOINT,
    VOTE_ENDPOINT,
)

_LOGGER = logging.getLogger(__name__)


class VotingService(BaseService):
    """Client for the live voting backend.

    Failures surface as ``DomainError`` carrying the response's reason phrase.
    """

    service_id = "voting"

    async def create_session(self, name: str) -> SessionInfo:
        """Register the voter and return their identity."""
        _LOGGER.debug("Service %s create_session started", self.service_id)
        data = await self._request_json("POST", SESSION_ENDPOINT, json={"name": name})
        session = self._map_session_info(data)
        _LOGGER.debug("Service %s create_session completed", self.service_id)
        return session

    async def get_session(self) -> SessionInfo:
        """Return the voter identity bound to the session cookie."""
        _LOGGER.debug("Service %s get_session started", self.service_id)
        data = await self._request_json("GET", SESSION_ENDPOINT)
        session = self._map_session_info(data)
        _LOGGER.debug("Service %s get_session completed", self.service_id)
        return session

    async def list_candidates(self) -> list[Candidate]:
        _LOGGER.debug("Service %s list_candidates started", self.service_id)
        data = await self._request_json("GET", CANDIDATES_ENDPOINT)
        candidates = [self._map_candidate(item) for item in require_list(data, "candidate")]
        _LOGGER.debug(
            "Service %s list_candidates completed with %d candidates",
            self.service_id,
            len(candidates),
        )
        return candidates

    async def cast_vote(self, candidate_id: int) -> None:
        """Cast a vote; a repeated vote is refused by the backend."""
        require_id(candidate_id, "candidate_id")
        _LOGGER.debug("Service %s cast_vote started", self.service_id)
        await self._request_json("POST", VOTE_ENDPOINT, json={"candidate_id": candidate_id})
        _LOGGER.debug("Service %s cast_vote completed", self.service_id)

    async def get_status(self) -> VotingStatus:
        """Return a one-off status snapshot."""
        _LOGGER.debug("Service %s get_status started", self.service_id)
        data = await self._request_json("GET", STATUS_ENDPOINT)
        status = map_status(data)
        _LOGGER.debug("Service %s get_status completed", self.service_id)
        return status

    async def login(self, password: str) -> None:
        """Authenticate as presenter."""
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required.")
        _LOGGER.debug("Service %s login started", self.service_id)
        await self._request_json("POST", PRESENTER_LOGIN_ENDPOINT, json={"password": password})
        _LOGGER.debug("Service %s login completed", self.service_id)

    async def logout(self) -> None:
        _LOGGER.debug("Service %s logout started", self.service_id)
        await self._request_json("POST", PRESENTER_LOGOUT_ENDPOINT)
        _LOGGER.debug("Service %s logout completed", self.service_id)

    async def check_auth(self) -> bool:
        _LOGGER.debug("Service %s check_auth started", self.service_id)
        data = await self._request_json("GET", PRESENTER_CHECK_ENDPOINT)
        authenticated = require_bool(data, "authentication")
        _LOGGER.debug("Service %s check_auth completed", self.service_id)
        return authenticated

    async def set_status(self, action: str) -> None:
        """Start or stop voting."""
        if action not in STATUS_ACTIONS:
            raise ValidationError(f"action must be one of: {', '.join(STATUS_ACTIONS)}.")
        _LOGGER.debug("Service %s set_status %s started", self.service_id, action)
        await self._request_json("POST", ADMIN_STATUS_ENDPOINT, json={"action": action})
        _LOGGER.debug("Service %s set_status %s completed", self.service_id, action)

    async def get_voting_enabled(self) -> bool:
        _LOGGER.debug("Service %s get_voting_enabled started", self.service_id)
        data = await self._request_json("GET", ADMIN_STATUS_ENDPOINT)
        enabled = require_bool(data, "voting status")
        _LOGGER.debug("Service %s get_voting_enabled completed", self.service_id)
        return enabled

    async def get_stats(self) -> AdminStats:
        _LOGGER.debug("Service %s get_stats started", self.service_id)
        data = await self._request_json("GET", ADMIN_STATS_ENDPOINT)
        payload = require_object(data, ("voted", "unvoted"), "stats")
        stats = AdminStats(voted=payload["voted"], unvoted=payload["unvoted"])
        _LOGGER.debug("Service %s get_stats completed", self.service_id)
        return stats

    async def get_results(self) -> list[CandidateResult]:
        _LOGGER.debug("Service %s get_results started", self.service_id)
        data = await self._request_json("GET", ADMIN_RESULTS_ENDPOINT)
        results: list[CandidateResult] = []
        for item in require_list(data, "result"):
            payload = require_object(item, ("name", "votes"), "result")
            results.append(CandidateResult(name=payload["name"], votes=payload["votes"]))
        _LOGGER.debug(
            "Service %s get_results completed with %d results",
            self.service_id,
            len(results),
        )
        return results

    async def pick_winner(self) -> LotteryWinner:
        """Draw a random voter; the backend answers 404 when nobody has joined."""
        _LOGGER.debug("Service %s pick_winner started", self.service_id)
        data = await self._request_json("GET", ADMIN_LOTTERY_ENDPOINT)
        payload = require_object(data, ("name", "voter_id"), "lottery winner")
        winner = LotteryWinner(name=payload["name"], voter_id=payload["voter_id"])
        _LOGGER.debug("Service %s pick_winner completed", self.service_id)
        return winner

    def status_url(self) -> str:
        return to_websocket_url(self._build_url(STATUS_WS_ENDPOINT))

    async def subscribe_to_status(self, listener: StatusListener) -> StatusChannel:
        """Open the status channel and return it once connected.

        The caller owns the returned channel and must close it.
        """
        channel = StatusChannel(self._session, self.status_url(), listener)
        await channel.open()
        return channel

    def _map_session_info(self, data: Any) -> SessionInfo:
        payload = require_object(data, ("voter_id", "name"), "session")
        return SessionInfo(voter_id=payload["voter_id"], name=payload["name"])

    def _map_candidate(self, data: Any) -> Candidate:
        payload = require_object(data, ("id", "name"), "candidate")
        return Candidate(id=payload["id"], name=payload["name"])
