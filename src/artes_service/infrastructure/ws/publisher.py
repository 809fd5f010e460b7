"""Local fan-out of entity events to registered WebSocket connections."""
from __future__ import annotations

import logging
from typing import Any

from starlette.websockets import WebSocketState

from artes_service.application.ports.clock import Clock, SystemClock, epoch_ms
from artes_service.domain.value_objects.enums import GLOBAL_EVENTS, EventKind
from artes_service.infrastructure.ws.protocol import encode_event
from artes_service.infrastructure.ws.registry import (
    Connection,
    ConnectionRegistry,
    by_company,
)

logger = logging.getLogger(__name__)


def _is_open(socket: Any) -> bool:
    if socket is None:
        return False
    return (
        getattr(socket, "client_state", None) == WebSocketState.CONNECTED
        and getattr(socket, "application_state", None) == WebSocketState.CONNECTED
    )


class LocalEventPublisher:
    """Implements application.ports.bus.EventPublisher for this process."""

    def __init__(self, registry: ConnectionRegistry, clock: Clock | None = None) -> None:
        self._registry = registry
        self._clock = clock or SystemClock()

    def targets(self, kind: EventKind, scope: int | None) -> list[Connection]:
        if scope is None or kind in GLOBAL_EVENTS:
            return self._registry.find()
        return self._registry.find(by_company(scope))

    async def publish(self, kind: EventKind, scope: int | None, data: Any) -> int:
        delivered = 0
        for conn in self.targets(kind, scope):
            if not _is_open(conn.socket):
                continue
            raw = encode_event(kind, data, epoch_ms(self._clock.now()))
            try:
                await conn.socket.send_text(raw)
            except Exception:
                # Stale entries are dropped by the socket's own close handling.
                logger.warning(
                    "WS send failed: %s kind=%s", conn.connection_id, kind, exc_info=True,
                )
                continue
            delivered += 1
        logger.debug("Published %s scope=%s to %d connection(s)", kind, scope, delivered)
        return delivered
