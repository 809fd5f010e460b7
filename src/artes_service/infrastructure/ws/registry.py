"""In-process registry of live WebSocket connections."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Connection:
    """Identity of one socket; mutated in place when the client re-registers."""

    connection_id: str
    socket: Any = None
    user_id: str | None = None
    company_id: int | None = None
    last_seen: datetime = field(default_factory=_utcnow)

    @property
    def registered(self) -> bool:
        return self.user_id is not None


ConnectionPredicate = Callable[[Connection], bool]


def by_company(company_id: int) -> ConnectionPredicate:
    return lambda conn: conn.company_id is not None and conn.company_id == company_id


def by_user(user_id: str) -> ConnectionPredicate:
    return lambda conn: conn.user_id == user_id


class ConnectionRegistry:
    """Tracks connections by id together with their user and active company.

    All access happens on the event loop thread, so there is no locking.
    Nothing is persisted: after a restart every client has to register again.
    """

    def __init__(self) -> None:
        self._connections: dict[str, Connection] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def open(self, connection_id: str, socket: Any) -> Connection:
        conn = self._connections.get(connection_id)
        if conn is None:
            conn = Connection(connection_id=connection_id, socket=socket)
            self._connections[connection_id] = conn
        else:
            conn.socket = socket
        logger.debug("WS opened: %s (total=%d)", connection_id, len(self._connections))
        return conn

    def register(
        self,
        connection_id: str,
        user_id: str,
        company_id: int | None,
    ) -> Connection:
        """Insert or update the identity bound to a connection."""
        conn = self._connections.get(connection_id)
        if conn is None:
            conn = Connection(connection_id=connection_id)
            self._connections[connection_id] = conn
        conn.user_id = user_id
        conn.company_id = company_id
        conn.last_seen = _utcnow()
        logger.debug(
            "WS registered: %s user=%s empresa=%s", connection_id, user_id, company_id,
        )
        return conn

    def remove(self, connection_id: str) -> None:
        if self._connections.pop(connection_id, None) is not None:
            logger.debug("WS removed: %s (total=%d)", connection_id, len(self._connections))

    def get(self, connection_id: str) -> Connection | None:
        return self._connections.get(connection_id)

    def find(self, predicate: ConnectionPredicate | None = None) -> list[Connection]:
        conns = list(self._connections.values())
        if predicate is None:
            return conns
        return [c for c in conns if predicate(c)]

    def clear(self) -> None:
        self._connections.clear()
