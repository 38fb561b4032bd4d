"""Live voting status subscription over a WebSocket."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any

import aiohttp

from ...exceptions import NetworkError, ResponseDecodeError
from ...models import VotingStatus
from ...util import require_object
from ..normalizer import decode_body

_LOGGER = logging.getLogger(__name__)

StatusListener = Callable[[VotingStatus], Awaitable[None] | None]


class ChannelState(StrEnum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


def map_status(data: Any) -> VotingStatus:
    payload = require_object(data, ("ready", "has_voted"), "status")
    return VotingStatus(ready=payload["ready"], has_voted=payload["has_voted"])


def decode_status(data: str) -> VotingStatus:
    """Decode one text frame into a status snapshot."""
    if not data:
        raise ResponseDecodeError("Status frame is empty.")
    return map_status(decode_body(data))


class StatusChannel:
    """Forward voting status snapshots pushed by the server to a listener.

    The channel sends nothing to the server. Frames that fail to decode are
    logged and dropped without closing the socket. Once the server closes the
    socket the channel stays closed; reconnecting is up to the caller. A
    listener may be a coroutine function; its coroutines are scheduled as
    tasks and cancelled on close.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url: str,
        listener: StatusListener,
    ) -> None:
        self._session = session
        self._url = url
        self._listener = listener
        self._ws: aiohttp.ClientWebSocketResponse | None = None
        self._reader: asyncio.Task[None] | None = None
        self._state = ChannelState.CLOSED
        self._opened = False
        self._pending: set[asyncio.Future[Any]] = set()

    @property
    def url(self) -> str:
        return self._url

    @property
    def state(self) -> ChannelState:
        return self._state

    async def __aenter__(self) -> StatusChannel:
        if not self._opened:
            await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        if self._opened:
            raise RuntimeError("Status channel can only be opened once.")
        self._opened = True
        self._state = ChannelState.CONNECTING
        _LOGGER.debug("Status channel connecting to %s", self._url)
        try:
            self._ws = await self._session.ws_connect(self._url)
        except (aiohttp.ClientError, TimeoutError) as exc:
            self._state = ChannelState.CLOSED
            raise NetworkError("Status channel connection failed.") from exc
        self._state = ChannelState.OPEN
        _LOGGER.debug("Status channel open")
        self._reader = asyncio.create_task(self._read_loop())

    async def close(self) -> None:
        if self._state is not ChannelState.CLOSED:
            _LOGGER.debug("Status channel closing")
        self._state = ChannelState.CLOSED
        reader, self._reader = self._reader, None
        if reader is not None and not reader.done():
            reader.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reader
        for task in list(self._pending):
            task.cancel()
        ws, self._ws = self._ws, None
        if ws is not None and not ws.closed:
            await ws.close()

    async def _read_loop(self) -> None:
        ws = self._ws
        if ws is None:
            return
        try:
            async for message in ws:
                if message.type == aiohttp.WSMsgType.TEXT:
                    self._handle_frame(message.data)
                elif message.type == aiohttp.WSMsgType.ERROR:
                    _LOGGER.debug("Status channel error: %s", ws.exception())
                    break
                else:
                    _LOGGER.debug("Status channel dropped %s frame", message.type.name)
        except Exception:
            _LOGGER.exception("Status channel reader failed")
        finally:
            if self._state is ChannelState.OPEN:
                _LOGGER.debug("Status channel closed by server")
                self._state = ChannelState.CLOSED
                if not ws.closed:
                    await ws.close()

    def _handle_frame(self, data: str) -> None:
        try:
            status = decode_status(data)
        except ResponseDecodeError as exc:
            _LOGGER.warning("Failed to parse status frame: %s", exc)
            return
        try:
            result = self._listener(status)
        except Exception:
            _LOGGER.exception("Status listener failed")
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._pending.add(task)
            task.add_done_callback(self._listener_done)

    def _listener_done(self, task: asyncio.Future[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _LOGGER.error("Status listener failed", exc_info=exc)
