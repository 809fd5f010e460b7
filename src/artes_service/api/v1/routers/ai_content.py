from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from artes_service.api.deps import CurrentPrincipal, EventsDep, UoWDep
from artes_service.api.v1.schemas.ai_content import AiContentRequest, AiContentResponse
from artes_service.application.dto.ai_content import AiContentRequestDTO
from artes_service.services import ai_content_service

router = APIRouter(prefix="/api/ai-content", tags=["ai-content"])


@router.post("", response_model=AiContentResponse, status_code=201)
async def request_content(
    body: AiContentRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> AiContentResponse:
    content = await ai_content_service.request_content(
        AiContentRequestDTO(**body.model_dump()), principal, uow,
    )
    return AiContentResponse.model_validate(content, from_attributes=True)


@router.get("/by-company/{empresa_id}", response_model=list[AiContentResponse])
async def list_company_content(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[AiContentResponse]:
    items = await ai_content_service.list_company_content(empresa_id, principal, uow)
    return [AiContentResponse.model_validate(i, from_attributes=True) for i in items]


@router.get("/{content_id}", response_model=AiContentResponse)
async def get_content(
    content_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> AiContentResponse:
    content = await ai_content_service.get_content(content_id, principal, uow)
    return AiContentResponse.model_validate(content, from_attributes=True)


@router.post("/webhook/{content_id}", response_model=AiContentResponse)
async def content_webhook(
    content_id: int,
    uow: UoWDep,
    events: EventsDep,
    payload: Any = Body(...),
) -> AiContentResponse:
    """Callback from the content automation workflow (unauthenticated)."""
    content = await ai_content_service.complete_from_webhook(
        content_id, payload, uow, events,
    )
    return AiContentResponse.model_validate(content, from_attributes=True)
