"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from artes_service.application.dto.principal import Principal
from artes_service.application.ports.auth import TokenVerifier
from artes_service.application.ports.bus import EventPublisher
from artes_service.config import settings
from artes_service.infrastructure.auth.hs256_verifier import HS256Verifier
from artes_service.infrastructure.auth.jwks_verifier import JWKSVerifier
from artes_service.infrastructure.db.session import AsyncSessionLocal
from artes_service.infrastructure.db.uow import SqlAlchemyUoW
from artes_service.infrastructure.ws.publisher import LocalEventPublisher
from artes_service.infrastructure.ws.registry import ConnectionRegistry
from artes_service.infrastructure.ws.router import MessageRouter

_bearer_scheme = HTTPBearer()

# Process-wide realtime state; empty at start, cleared on shutdown.
registry = ConnectionRegistry()
local_publisher = LocalEventPublisher(registry)
message_router = MessageRouter(registry)

_event_publisher: EventPublisher = local_publisher


def get_registry() -> ConnectionRegistry:
    return registry


def get_message_router() -> MessageRouter:
    return message_router


def get_event_publisher() -> EventPublisher:
    return _event_publisher


def set_event_publisher(publisher: EventPublisher) -> None:
    global _event_publisher  # noqa: PLW0603
    _event_publisher = publisher


EventsDep = Annotated[EventPublisher, Depends(get_event_publisher)]


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        try:
            yield uow
        finally:
            await session.close()


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def _get_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        assert settings.JWKS_URL, "JWKS_URL must be set when JWT_VERIFY_MODE=jwks"
        return JWKSVerifier(settings.JWKS_URL)
    return HS256Verifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _get_verifier()
    return _verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_bearer_scheme)],
) -> Principal:
    verifier = get_verifier()
    try:
        return await verifier.verify(credentials.credentials)
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_current_admin(principal: CurrentPrincipal) -> Principal:
    if not principal.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return principal


CurrentAdmin = Annotated[Principal, Depends(get_current_admin)]
