from __future__ import annotations

import logging
from typing import Any

import pytest

from pyschoolportal.exceptions import DomainError, ResponseDecodeError, ValidationError
from pyschoolportal.models import AdminStats, LotteryWinner, SessionInfo, VotingStatus
from pyschoolportal.service.voting.api import VotingService


class _FakeResponse:
    def __init__(self, *, status: int = 200, reason: str = "OK", text_data: str = "") -> None:
        self.status = status
        self.reason = reason
        self._text_data = text_data

    async def text(self) -> str:
        return self._text_data

    async def read(self) -> bytes:
        return self._text_data.encode()


class _FakeRequestContext:
    def __init__(self, response: _FakeResponse) -> None:
        self._response = response

    async def __aenter__(self) -> _FakeResponse:
        return self._response

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class _SequenceSession:
    def __init__(self, responses: list[_FakeResponse]) -> None:
        self._responses = responses
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeRequestContext:
        self.calls.append({"method": method, "url": url, "kwargs": kwargs})
        return _FakeRequestContext(self._responses[len(self.calls) - 1])


def _service(*responses: _FakeResponse) -> tuple[VotingService, _SequenceSession]:
    session = _SequenceSession(list(responses))
    service = VotingService(session, base_url="https://vote.example")  # type: ignore[arg-type]
    return service, session


@pytest.mark.asyncio
async def test_cast_vote_empty_body_resolves() -> None:
    service, session = _service(_FakeResponse(status=200, text_data=""))
    assert await service.cast_vote(7) is None
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://vote.example/api/vote"
    assert call["kwargs"]["json"] == {"candidate_id": 7}


@pytest.mark.asyncio
async def test_cast_vote_created_status_resolves() -> None:
    service, _ = _service(_FakeResponse(status=201, reason="Created"))
    await service.cast_vote(1)


@pytest.mark.asyncio
async def test_cast_vote_duplicate_uses_reason() -> None:
    service, _ = _service(_FakeResponse(status=409, reason="Conflict"))
    with pytest.raises(DomainError) as exc_info:
        await service.cast_vote(7)
    assert exc_info.value.status == 409
    assert exc_info.value.message == "Conflict"


@pytest.mark.asyncio
async def test_cast_vote_not_started() -> None:
    service, _ = _service(_FakeResponse(status=412, reason="Precondition Failed"))
    with pytest.raises(DomainError) as exc_info:
        await service.cast_vote(7)
    assert exc_info.value.message == "Precondition Failed"


@pytest.mark.asyncio
async def test_create_session_posts_name() -> None:
    service, session = _service(_FakeResponse(text_data='{"voter_id": "K3X9Q", "name": "Ema"}'))
    info = await service.create_session("Ema")
    assert info == SessionInfo(voter_id="K3X9Q", name="Ema")
    assert session.calls[0]["url"] == "https://vote.example/api/session"
    assert session.calls[0]["kwargs"]["json"] == {"name": "Ema"}


@pytest.mark.asyncio
async def test_get_session_unauthorized() -> None:
    service, session = _service(_FakeResponse(status=401, reason="Unauthorized"))
    with pytest.raises(DomainError) as exc_info:
        await service.get_session()
    assert exc_info.value.status == 401
    assert session.calls[0]["method"] == "GET"


@pytest.mark.asyncio
async def test_get_status_snapshot() -> None:
    service, session = _service(_FakeResponse(text_data='{"ready": true, "has_voted": false}'))
    assert await service.get_status() == VotingStatus(ready=True, has_voted=False)
    assert session.calls[0]["url"] == "https://vote.example/api/status"


@pytest.mark.asyncio
async def test_set_status_sends_action() -> None:
    service, session = _service(_FakeResponse(), _FakeResponse())
    await service.set_status("start")
    await service.set_status("stop")
    assert [call["kwargs"]["json"] for call in session.calls] == [
        {"action": "start"},
        {"action": "stop"},
    ]
    assert session.calls[0]["url"] == "https://vote.example/api/admin/status"


@pytest.mark.asyncio
async def test_set_status_rejects_unknown_action() -> None:
    service, session = _service()
    with pytest.raises(ValidationError):
        await service.set_status("pause")
    assert session.calls == []


@pytest.mark.asyncio
async def test_get_voting_enabled() -> None:
    service, session = _service(_FakeResponse(text_data="false"))
    assert await service.get_voting_enabled() is False
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "https://vote.example/api/admin/status"


@pytest.mark.asyncio
async def test_get_voting_enabled_rejects_empty_body() -> None:
    service, _ = _service(_FakeResponse(text_data=""))
    with pytest.raises(ResponseDecodeError):
        await service.get_voting_enabled()


@pytest.mark.asyncio
async def test_get_stats() -> None:
    service, _ = _service(_FakeResponse(text_data='{"voted": 12, "unvoted": 3}'))
    assert await service.get_stats() == AdminStats(voted=12, unvoted=3)


@pytest.mark.asyncio
async def test_pick_winner() -> None:
    service, session = _service(_FakeResponse(text_data='{"name": "Ema", "voter_id": "K3X9Q"}'))
    assert await service.pick_winner() == LotteryWinner(name="Ema", voter_id="K3X9Q")
    assert session.calls[0]["url"] == "https://vote.example/api/admin/lottery"


@pytest.mark.asyncio
async def test_pick_winner_without_voters() -> None:
    service, _ = _service(_FakeResponse(status=404, reason="Not Found"))
    with pytest.raises(DomainError) as exc_info:
        await service.pick_winner()
    assert exc_info.value.message == "Not Found"


@pytest.mark.asyncio
async def test_presenter_login_logout_check() -> None:
    service, session = _service(
        _FakeResponse(),
        _FakeResponse(text_data="true"),
        _FakeResponse(),
    )
    await service.login("secret")
    assert await service.check_auth() is True
    await service.logout()
    assert [call["url"] for call in session.calls] == [
        "https://vote.example/api/presenter/login",
        "https://vote.example/api/presenter/check",
        "https://vote.example/api/presenter/logout",
    ]
    assert session.calls[0]["kwargs"]["json"] == {"password": "secret"}


@pytest.mark.asyncio
async def test_presenter_login_rejected_uses_reason() -> None:
    service, _ = _service(_FakeResponse(status=401, reason="Unauthorized"))
    with pytest.raises(DomainError) as exc_info:
        await service.login("wrong")
    assert exc_info.value.message == "Unauthorized"


@pytest.mark.asyncio
async def test_login_requires_password() -> None:
    service, _ = _service()
    with pytest.raises(ValidationError):
        await service.login("")


def test_status_url_upgrades_scheme() -> None:
    secure = VotingService(object(), base_url="https://vote.example")  # type: ignore[arg-type]
    plain = VotingService(object(), base_url="http://localhost:8000/")  # type: ignore[arg-type]
    assert secure.status_url() == "wss://vote.example/api/status/ws"
    assert plain.status_url() == "ws://localhost:8000/api/status/ws"


@pytest.mark.asyncio
async def test_read_endpoints_log_start_and_completion(
    caplog: pytest.LogCaptureFixture,
) -> None:
    service, _ = _service(
        _FakeResponse(text_data='[{"id": 1, "name": "Trieda 1.A"}]'),
        _FakeResponse(text_data='{"ready": true, "has_voted": false}'),
        _FakeResponse(text_data='[{"name": "Trieda 1.A", "votes": 3}]'),
    )
    with caplog.at_level(logging.DEBUG, logger="pyschoolportal.service.voting.api"):
        await service.list_candidates()
        await service.get_status()
        await service.get_results()
    for operation in ("list_candidates", "get_status", "get_results"):
        assert f"Service voting {operation} started" in caplog.text
        assert f"Service voting {operation} completed" in caplog.text
