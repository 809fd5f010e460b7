"""Redis Pub/Sub fan-out of realtime events across worker processes."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine

import redis.asyncio as aioredis

from artes_service.domain.value_objects.enums import EventKind
from artes_service.infrastructure.bus.serializer import deserialize_event, serialize_event

logger = logging.getLogger(__name__)


class RedisPubSubPublisher:
    """Implements application.ports.bus.EventPublisher across processes.

    Events are not delivered locally here; every process (this one
    included) receives them through its RedisPubSubSubscriber.
    """

    def __init__(self, redis: aioredis.Redis, channel: str) -> None:
        self._redis = redis
        self._channel = channel

    async def publish(self, kind: EventKind, scope: int | None, data: Any) -> int:
        try:
            raw = serialize_event(str(kind), scope, data)
            await self._redis.publish(self._channel, raw)
        except Exception:
            logger.exception("Failed to publish %s to channel=%s", kind, self._channel)
        return 0


OnEventCallback = Callable[[EventKind, int | None, Any], Coroutine[Any, Any, Any]]


class RedisPubSubSubscriber:
    """Background task that listens to a Redis channel and dispatches events."""

    def __init__(
        self,
        redis: aioredis.Redis,
        channel: str,
        callback: OnEventCallback,
    ) -> None:
        self._redis = redis
        self._channel = channel
        self._callback = callback
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        self._task = asyncio.create_task(self._listen(), name="redis-pubsub-subscriber")
        logger.info("Redis Pub/Sub subscriber started on channel=%s", self._channel)

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.info("Redis Pub/Sub subscriber stopped")

    async def handle_raw(self, raw: str | bytes) -> None:
        try:
            event_type, scope, data = deserialize_event(raw)
            kind = EventKind(event_type)
        except (ValueError, KeyError, TypeError):
            logger.warning("Dropping undecodable pubsub message on %s", self._channel)
            return
        await self._callback(kind, scope, data)

    async def _listen(self) -> None:
        pubsub = self._redis.pubsub()
        await pubsub.subscribe(self._channel)
        try:
            async for message in pubsub.listen():
                if message["type"] != "message":
                    continue
                try:
                    await self.handle_raw(message["data"])
                except Exception:
                    logger.exception("Error processing pubsub message")
        finally:
            await pubsub.unsubscribe(self._channel)
            await pubsub.aclose()
