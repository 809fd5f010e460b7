from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from artes_service.api.deps import get_message_router, get_registry
from artes_service.config import settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["websocket"])


@router.websocket(settings.WS_PATH)
async def ws_realtime(websocket: WebSocket) -> None:
    """Live invalidation channel.

    Identity arrives in a ``register`` frame rather than at handshake time,
    so a connection receives nothing scoped until it registers.
    """
    registry = get_registry()
    message_router = get_message_router()

    await websocket.accept()
    connection_id = uuid.uuid4().hex
    registry.open(connection_id, websocket)

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes") or b""
            await message_router.handle(connection_id, raw, websocket.send_text)
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WS error for %s", connection_id)
    finally:
        registry.remove(connection_id)
