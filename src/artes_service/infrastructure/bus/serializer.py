from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from typing import Any


class _Encoder(json.JSONEncoder):
    def default(self, o: object) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Decimal):
            return float(o)
        return super().default(o)


def serialize_event(event_type: str, scope: int | None, data: Any) -> str:
    envelope = {"event": event_type, "scope": scope, "data": data}
    return json.dumps(envelope, cls=_Encoder)


def deserialize_event(raw: str | bytes) -> tuple[str, int | None, Any]:
    envelope = json.loads(raw)
    return envelope["event"], envelope.get("scope"), envelope.get("data")
