"""Dispatch of inbound client frames."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

from pydantic import ValidationError

from artes_service.domain.value_objects.enums import EventKind
from artes_service.infrastructure.ws.protocol import PONG_FRAME, WsInbound, decode_inbound
from artes_service.infrastructure.ws.registry import ConnectionRegistry

logger = logging.getLogger(__name__)

Reply = Callable[[str], Awaitable[None]]


class MessageRouter:
    """Decodes a client frame (text, or UTF-8 JSON in a binary frame) and
    routes it by ``type``.

    Never raises for bad client input: malformed frames and unknown types
    are logged and dropped so the connection stays up.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    async def handle(self, connection_id: str, raw: str | bytes, reply: Reply) -> None:
        try:
            msg = decode_inbound(raw)
        except ValidationError:
            logger.warning("Dropping malformed WS frame from %s", connection_id)
            return

        if msg.type == EventKind.PING:
            await reply(PONG_FRAME)
        elif msg.type == EventKind.REGISTER:
            self._register(connection_id, msg)
        else:
            logger.info("Ignoring WS frame type=%r from %s", msg.type, connection_id)

    def _register(self, connection_id: str, msg: WsInbound) -> None:
        if not msg.user_id:
            logger.warning("register frame without userId from %s", connection_id)
            return
        self._registry.register(connection_id, msg.user_id, msg.empresa_id)
