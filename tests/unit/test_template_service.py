from __future__ import annotations

import pytest

from artes_service.application.dto.template import NewTemplateDTO
from artes_service.application.exceptions import ForbiddenError
from artes_service.domain.value_objects.enums import EventKind
from artes_service.services import template_service
from tests.conftest import FakeEventPublisher, FakeUoW


def _new_template(segmento: int | None = 6) -> NewTemplateDTO:
    return NewTemplateDTO(
        name="Story promo",
        template_id="tpl-story",
        width=1080,
        height=1920,
        image=None,
        empresa_segmento=segmento,
        logo_formato="redonda",
        texto_apoio="",
    )


@pytest.mark.asyncio
async def test_create_template_is_global_event(admin_principal):
    uow, events = FakeUoW(), FakeEventPublisher()

    template = await template_service.create_template(_new_template(), admin_principal, uow, events)

    assert uow._committed is True
    assert events.events == [
        (EventKind.TEMPLATE_CREATED, None, {"id": template.id, "empresa_segmento": 6}),
    ]


@pytest.mark.asyncio
async def test_create_template_requires_admin(user_principal):
    uow, events = FakeUoW(), FakeEventPublisher()

    with pytest.raises(ForbiddenError):
        await template_service.create_template(_new_template(), user_principal, uow, events)

    assert uow.templates._store == {}
    assert events.events == []


@pytest.mark.asyncio
async def test_list_templates_filters_by_segment(admin_principal):
    uow, events = FakeUoW(), FakeEventPublisher()
    await template_service.create_template(_new_template(6), admin_principal, uow, events)
    await template_service.create_template(_new_template(10), admin_principal, uow, events)

    assert len(await template_service.list_templates(None, uow)) == 2
    only_food = await template_service.list_templates(10, uow)
    assert [t.empresa_segmento for t in only_food] == [10]
