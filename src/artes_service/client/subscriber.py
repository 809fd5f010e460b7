"""Consumer side of the realtime channel.

Opens the socket, registers the user and selected company, keeps the
connection alive with pings and turns entity events into cache
invalidations. It does not reconnect by itself: after a drop the state is
``disconnected`` until the owner calls :meth:`ClientSubscriber.open` again.
"""
from __future__ import annotations

import asyncio
import inspect
import json
import logging
from enum import StrEnum
from typing import Any, Awaitable, Callable, Protocol

from websockets.asyncio.client import connect as ws_connect

from artes_service.client.invalidation import keys_for
from artes_service.domain.value_objects.enums import EventKind

logger = logging.getLogger(__name__)


class SubscriberState(StrEnum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"


class ClientTransport(Protocol):
    async def send(self, message: str) -> None: ...
    async def recv(self) -> str | bytes: ...
    async def close(self) -> None: ...


Connect = Callable[[str], Awaitable[ClientTransport]]
# Sync or async; a failing callback is logged and the channel stays up.
Invalidate = Callable[[str], Any]


async def websocket_connect(url: str) -> ClientTransport:
    return await ws_connect(url)


class ClientSubscriber:
    def __init__(
        self,
        url: str,
        user_id: str,
        invalidate: Invalidate,
        *,
        company_id: int | None = None,
        heartbeat_seconds: float = 30.0,
        connect: Connect = websocket_connect,
    ) -> None:
        self._url = url
        self._user_id = user_id
        self._company_id = company_id
        self._invalidate = invalidate
        self._heartbeat_seconds = heartbeat_seconds
        self._connect = connect

        self._state = SubscriberState.DISCONNECTED
        self._transport: ClientTransport | None = None
        self._reader_task: asyncio.Task[None] | None = None
        self._heartbeat_task: asyncio.Task[None] | None = None
        self.last_message: dict[str, Any] | None = None

    @property
    def state(self) -> SubscriberState:
        return self._state

    @property
    def company_id(self) -> int | None:
        return self._company_id

    async def open(self) -> bool:
        """Connect and register. Returns False if the connection failed."""
        if self._state != SubscriberState.DISCONNECTED:
            return self._state == SubscriberState.OPEN

        self._state = SubscriberState.CONNECTING
        try:
            self._transport = await self._connect(self._url)
        except Exception:
            logger.warning("Realtime connect to %s failed", self._url, exc_info=True)
            self._transport = None
            self._state = SubscriberState.DISCONNECTED
            return False

        self._state = SubscriberState.OPEN
        if not await self._send_register():
            logger.warning("Realtime register to %s failed", self._url)
            return False
        logger.info("Realtime channel open: %s", self._url)
        self._heartbeat_task = asyncio.create_task(
            self._heartbeat(), name=f"ws-client-heartbeat-{self._user_id}",
        )
        self._reader_task = asyncio.create_task(
            self._read_loop(), name=f"ws-client-reader-{self._user_id}",
        )
        return True

    async def close(self) -> None:
        if self._state in (SubscriberState.DISCONNECTED, SubscriberState.CLOSING):
            return
        self._state = SubscriberState.CLOSING
        await self._cancel(self._heartbeat_task)
        await self._cancel(self._reader_task)
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception:
                logger.debug("Error closing realtime transport", exc_info=True)
        self._transport = None
        self._state = SubscriberState.DISCONNECTED
        logger.info("Realtime channel closed")

    async def select_company(self, company_id: int | None) -> None:
        """Switch the active company; re-registers without reconnecting.

        A failed re-register drops the channel like any other transport error.
        """
        if company_id == self._company_id:
            return
        self._company_id = company_id
        if self._state == SubscriberState.OPEN:
            await self._send_register()

    async def send(self, frame: dict[str, Any]) -> bool:
        """Send one frame; False when not open or when the transport fails."""
        if self._state != SubscriberState.OPEN or self._transport is None:
            return False
        try:
            await self._transport.send(json.dumps(frame))
        except Exception:
            logger.info("Realtime send failed, dropping channel", exc_info=True)
            await self._drop()
            return False
        return True

    async def handle_frame(self, raw: str | bytes) -> tuple[str, ...]:
        """Apply one server frame; returns the cache keys invalidated."""
        try:
            message = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring undecodable realtime frame")
            return ()
        if not isinstance(message, dict):
            logger.warning("Ignoring non-object realtime frame")
            return ()

        self.last_message = message
        event_type = message.get("type")
        if event_type == EventKind.PONG:
            return ()

        keys = keys_for(event_type) if isinstance(event_type, str) else ()
        if not keys:
            logger.debug("Unknown realtime message type: %r", event_type)
            return ()
        for key in keys:
            try:
                result = self._invalidate(key)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.warning("Cache invalidation failed for %s", key, exc_info=True)
        return keys

    async def _send_register(self) -> bool:
        return await self.send(
            {
                "type": EventKind.REGISTER.value,
                "userId": self._user_id,
                "empresaId": self._company_id,
            }
        )

    async def _heartbeat(self) -> None:
        while True:
            await asyncio.sleep(self._heartbeat_seconds)
            if not await self.send({"type": EventKind.PING.value}):
                return

    async def _read_loop(self) -> None:
        transport = self._transport
        if transport is None:
            return
        try:
            while True:
                raw = await transport.recv()
                await self.handle_frame(raw)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.info("Realtime channel lost", exc_info=True)
        await self._drop()

    async def _drop(self) -> None:
        """Tear down after a transport error; the owner has to reopen."""
        if self._state != SubscriberState.OPEN:
            return
        self._state = SubscriberState.DISCONNECTED
        transport, self._transport = self._transport, None
        current = asyncio.current_task()
        for task in (self._heartbeat_task, self._reader_task):
            if task is not None and task is not current and not task.done():
                task.cancel()
        if transport is not None:
            try:
                await transport.close()
            except Exception:
                logger.debug("Error closing realtime transport", exc_info=True)

    @staticmethod
    async def _cancel(task: asyncio.Task[None] | None) -> None:
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
