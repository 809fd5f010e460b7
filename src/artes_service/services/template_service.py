from __future__ import annotations

from artes_service.application.dto.principal import Principal
from artes_service.application.dto.template import NewTemplateDTO
from artes_service.application.policies.permissions import assert_admin
from artes_service.application.ports.bus import EventPublisher
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.template import Template
from artes_service.domain.value_objects.enums import EventKind


async def list_templates(segmento: int | None, uow: UnitOfWork) -> list[Template]:
    return await uow.templates.list_templates(segmento=segmento)


async def create_template(
    data: NewTemplateDTO,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Template:
    assert_admin(principal)
    template = await uow.templates_w.create(data)
    await uow.commit()

    # Catalog entries are shared by all tenants
    await events.publish(
        EventKind.TEMPLATE_CREATED,
        None,
        {"id": template.id, "empresa_segmento": template.empresa_segmento},
    )
    return template
