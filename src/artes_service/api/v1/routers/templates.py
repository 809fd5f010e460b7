from __future__ import annotations

from fastapi import APIRouter, Query

from artes_service.api.deps import CurrentAdmin, CurrentPrincipal, EventsDep, UoWDep
from artes_service.api.v1.schemas.template import CreateTemplateRequest, TemplateResponse
from artes_service.application.dto.template import NewTemplateDTO
from artes_service.services import template_service

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(
    principal: CurrentPrincipal,
    uow: UoWDep,
    segmento: int | None = Query(None),
) -> list[TemplateResponse]:
    templates = await template_service.list_templates(segmento, uow)
    return [TemplateResponse.model_validate(t, from_attributes=True) for t in templates]


@router.post("", response_model=TemplateResponse, status_code=201)
async def create_template(
    body: CreateTemplateRequest,
    admin: CurrentAdmin,
    uow: UoWDep,
    events: EventsDep,
) -> TemplateResponse:
    template = await template_service.create_template(
        NewTemplateDTO(**body.model_dump()), admin, uow, events,
    )
    return TemplateResponse.model_validate(template, from_attributes=True)
