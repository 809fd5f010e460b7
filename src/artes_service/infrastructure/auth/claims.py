from __future__ import annotations

from typing import Any

from artes_service.application.dto.principal import Principal
from artes_service.domain.value_objects.enums import UserKind


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    """Map decoded JWT claims onto a Principal.

    The user kind comes from ``tipo`` (the users table column) or ``kind``;
    anything unrecognized falls back to a regular user.
    """
    kind_raw = payload.get("tipo", payload.get("kind", UserKind.USER))
    try:
        kind = UserKind(kind_raw)
    except ValueError:
        kind = UserKind.USER
    return Principal(
        user_id=str(payload["sub"]),
        kind=kind,
        roles=list(payload.get("roles", [])),
    )
