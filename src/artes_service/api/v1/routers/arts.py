from __future__ import annotations

from fastapi import APIRouter

from artes_service.api.deps import CurrentPrincipal, EventsDep, UoWDep
from artes_service.api.v1.schemas.art import ArtResponse, CreateArtRequest
from artes_service.application.dto.art import NewArtDTO
from artes_service.services import art_service

router = APIRouter(prefix="/api/arts", tags=["arts"])


@router.post("", response_model=ArtResponse, status_code=201)
async def create_art(
    body: CreateArtRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> ArtResponse:
    art = await art_service.create_art(
        NewArtDTO(**body.model_dump()), principal, uow, events,
    )
    return ArtResponse.model_validate(art, from_attributes=True)


@router.get("/by-company/{empresa_id}", response_model=list[ArtResponse])
async def list_active_arts(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[ArtResponse]:
    arts = await art_service.list_active_arts(empresa_id, principal, uow)
    return [ArtResponse.model_validate(a, from_attributes=True) for a in arts]


@router.get("/archived/{empresa_id}", response_model=list[ArtResponse])
async def list_archived_arts(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[ArtResponse]:
    arts = await art_service.list_archived_arts(empresa_id, principal, uow)
    return [ArtResponse.model_validate(a, from_attributes=True) for a in arts]


@router.post("/{art_id}/archive", response_model=ArtResponse)
async def archive_art(
    art_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> ArtResponse:
    art = await art_service.archive_art(art_id, principal, uow, events)
    return ArtResponse.model_validate(art, from_attributes=True)


@router.post("/{art_id}/unarchive", response_model=ArtResponse)
async def unarchive_art(
    art_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> ArtResponse:
    art = await art_service.unarchive_art(art_id, principal, uow, events)
    return ArtResponse.model_validate(art, from_attributes=True)
