from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from artes_service.api import deps
from artes_service.api.middleware.correlation_id import CorrelationIdMiddleware
from artes_service.api.middleware.metrics import RequestTimingMiddleware
from artes_service.api.v1.routers import (
    ai_content,
    arts,
    companies,
    design_suggestions,
    health,
    templates,
    ws,
)
from artes_service.application.exceptions import AppError
from artes_service.config import settings
from artes_service.domain.value_objects.enums import EventKind
from artes_service.infrastructure.bus.redis_pubsub import (
    RedisPubSubPublisher,
    RedisPubSubSubscriber,
)

logger = logging.getLogger(__name__)


async def _on_pubsub_event(kind: EventKind, scope: int | None, data: Any) -> None:
    """Deliver an event relayed by Redis to this process's sockets."""
    await deps.local_publisher.publish(kind, scope, data)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    subscriber: RedisPubSubSubscriber | None = None
    app.state.redis = None

    if settings.REALTIME_BACKEND == "redis":
        app.state.redis = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
        )
        logger.info("Redis connection pool created")
        subscriber = RedisPubSubSubscriber(
            app.state.redis,
            settings.REDIS_PUBSUB_CHANNEL,
            _on_pubsub_event,
        )
        await subscriber.start()
        deps.set_event_publisher(
            RedisPubSubPublisher(app.state.redis, settings.REDIS_PUBSUB_CHANNEL)
        )

    logger.info("Realtime backend=%s path=%s", settings.REALTIME_BACKEND, settings.WS_PATH)

    yield

    deps.get_registry().clear()
    if subscriber is not None:
        await subscriber.stop()
        deps.set_event_publisher(deps.local_publisher)
    if app.state.redis is not None:
        await app.state.redis.aclose()
        logger.info("Redis connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Artes Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(arts.router)
    app.include_router(companies.router)
    app.include_router(templates.router)
    app.include_router(ai_content.router)
    app.include_router(design_suggestions.router)
    app.include_router(ws.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(_req: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
