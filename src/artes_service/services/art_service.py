from __future__ import annotations

import logging

from artes_service.application.dto.art import NewArtDTO
from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import NotFoundError
from artes_service.application.policies.permissions import assert_company_access
from artes_service.application.ports.bus import EventPublisher
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.art import Art
from artes_service.domain.value_objects.enums import EventKind

logger = logging.getLogger(__name__)


def art_event_data(art: Art) -> dict:
    return {
        "id": art.id,
        "empresa_id": art.empresa_id,
        "arquivada": art.arquivada,
    }


async def create_art(
    data: NewArtDTO,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Art:
    await assert_company_access(principal, data.empresa_id, uow.companies, uow.memberships)
    art = await uow.arts_w.create(data)
    await uow.commit()
    logger.info("Art %d created for empresa=%d", art.id, art.empresa_id)

    await events.publish(EventKind.ART_CREATED, art.empresa_id, art_event_data(art))
    return art


async def list_active_arts(
    empresa_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> list[Art]:
    await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)
    return await uow.arts.list_for_company(empresa_id, archived=False)


async def list_archived_arts(
    empresa_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> list[Art]:
    await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)
    return await uow.arts.list_for_company(empresa_id, archived=True)


async def archive_art(
    art_id: int,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Art:
    return await _set_archived(art_id, True, principal, uow, events)


async def unarchive_art(
    art_id: int,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Art:
    return await _set_archived(art_id, False, principal, uow, events)


async def _set_archived(
    art_id: int,
    archived: bool,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Art:
    art = await uow.arts.get_by_id(art_id)
    if art is None:
        raise NotFoundError("Art not found")
    await assert_company_access(principal, art.empresa_id, uow.companies, uow.memberships)

    updated = await uow.arts_w.set_archived(art_id, archived)
    if updated is None:
        raise NotFoundError("Art not found")
    await uow.commit()

    kind = EventKind.ART_ARCHIVED if archived else EventKind.ART_UNARCHIVED
    await events.publish(kind, updated.empresa_id, art_event_data(updated))
    return updated
