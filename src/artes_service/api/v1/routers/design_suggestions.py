from __future__ import annotations

from fastapi import APIRouter

from artes_service.api.deps import CurrentPrincipal, UoWDep
from artes_service.api.v1.schemas.design import (
    DesignSuggestionRequest,
    DesignSuggestionResponse,
)
from artes_service.services import design_suggestion_service

router = APIRouter(prefix="/api/ai", tags=["ai-design"])


@router.post("/design-suggestions", response_model=list[DesignSuggestionResponse])
async def design_suggestions(
    body: DesignSuggestionRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[DesignSuggestionResponse]:
    suggestions = await design_suggestion_service.suggest_for_company(
        body.empresa_id, body.template_id, principal, uow,
    )
    return [DesignSuggestionResponse.model_validate(s, from_attributes=True) for s in suggestions]
