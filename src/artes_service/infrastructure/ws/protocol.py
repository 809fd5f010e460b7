"""WebSocket frame models and codec."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from artes_service.domain.value_objects.enums import EventKind


class WsInbound(BaseModel):
    """Client → Server."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str  # register | ping
    user_id: str | None = Field(default=None, alias="userId")
    empresa_id: int | None = Field(default=None, alias="empresaId")

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class WsControl(BaseModel):
    """Server → Client control frame (pong)."""

    type: str


class WsOutbound(BaseModel):
    """Server → Client entity event."""

    type: str  # art-created | art-archived | company-updated | ...
    data: Any = None
    timestamp: int  # epoch ms, taken at send time


def decode_inbound(raw: str | bytes) -> WsInbound:
    """Parse a client frame; raises pydantic.ValidationError on bad input."""
    return WsInbound.model_validate_json(raw)


def encode_event(kind: EventKind | str, data: Any, timestamp_ms: int) -> str:
    return WsOutbound(type=str(kind), data=data, timestamp=timestamp_ms).model_dump_json()


PONG_FRAME = WsControl(type=EventKind.PONG.value).model_dump_json()
