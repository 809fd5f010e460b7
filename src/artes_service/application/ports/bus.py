from __future__ import annotations

from typing import Any, Protocol

from artes_service.domain.value_objects.enums import EventKind


class EventPublisher(Protocol):
    async def publish(
        self,
        kind: EventKind,
        scope: int | None,
        data: Any,
    ) -> int:
        """Fan an entity event out to interested connections.

        ``scope`` is the affected company id, or None for global data.
        Returns the number of local deliveries; never raises on delivery
        failure.
        """
        ...
