from __future__ import annotations

import pytest

from artes_service.application.dto.ai_content import AiContentRequestDTO
from artes_service.application.exceptions import ForbiddenError, NotFoundError
from artes_service.domain.value_objects.enums import (
    AiContentStatus,
    EventKind,
    PostType,
    VoiceTone,
)
from artes_service.services import ai_content_service
from artes_service.services.ai_content_service import parse_webhook_response
from tests.conftest import (
    FakeEventPublisher,
    FakeUoW,
    make_ai_content,
    make_company,
    make_membership,
)


def test_parse_single_post_payload():
    payload = [
        {
            "response": {
                "body": {
                    "arteInstagram": {
                        "headline": "Páscoa doce",
                        "conteudo": "Ovos artesanais a partir de R$ 29",
                        "chamadaParaAcao": "Peça já pelo WhatsApp",
                    }
                }
            }
        }
    ]

    parsed = parse_webhook_response(payload)

    assert parsed.headline == "Páscoa doce"
    assert parsed.conteudo == "Ovos artesanais a partir de R$ 29"
    assert parsed.cta == "Peça já pelo WhatsApp"


def test_parse_seasonal_calendar_takes_first_day():
    payload = [
        {
            "response": {
                "body": {
                    "calendario_sazonal": [
                        {"headline": "Dia 1", "content": "Primeiro", "cta": "Compre"},
                        {"headline": "Dia 2", "content": "Segundo", "cta": "Veja"},
                    ]
                }
            }
        }
    ]

    parsed = parse_webhook_response(payload)

    assert (parsed.headline, parsed.conteudo, parsed.cta) == ("Dia 1", "Primeiro", "Compre")


def test_parse_output_list():
    parsed = parse_webhook_response(
        {"output": [{"headline": "H", "conteudo": "C", "chamadaParaAcao": "A"}]}
    )

    assert (parsed.headline, parsed.conteudo, parsed.cta) == ("H", "C", "A")


def test_parse_output_object():
    parsed = parse_webhook_response({"output": {"headline": "H", "content": "C", "cta": "A"}})

    assert (parsed.headline, parsed.conteudo, parsed.cta) == ("H", "C", "A")


def test_parse_flat_object():
    parsed = parse_webhook_response({"headline": "H", "conteudo": "C", "cta": "A"})

    assert (parsed.headline, parsed.conteudo, parsed.cta) == ("H", "C", "A")


@pytest.mark.parametrize("payload", [None, [], "texto solto", {"output": []}, [{"x": 1}]])
def test_parse_unrecognised_payload_yields_empty(payload):
    parsed = parse_webhook_response(payload)

    assert (parsed.headline, parsed.conteudo, parsed.cta) == (None, None, None)


@pytest.fixture
def uow():
    uow = FakeUoW()
    uow.add_company(make_company(empresa_id=7), make_membership(user_id="u1", empresa_id=7))
    uow.add_company(make_company(empresa_id=8))
    return uow


@pytest.mark.asyncio
async def test_request_content_is_pending(user_principal, uow):
    data = AiContentRequestDTO(
        empresa_id=7,
        tema="Volta às aulas",
        tipo_postagem=PostType.CAROUSEL,
        tom_voz=VoiceTone.EDUCATIONAL,
        quantidade_artes=3,
    )

    content = await ai_content_service.request_content(data, user_principal, uow)

    assert content.status == AiContentStatus.PENDING
    assert content.user_id == "u1"
    assert content.tipo_postagem == "carousel"
    assert uow._committed is True


@pytest.mark.asyncio
async def test_request_content_for_foreign_company(user_principal, uow):
    data = AiContentRequestDTO(
        empresa_id=8, tema="x", tipo_postagem=PostType.FEED, tom_voz=VoiceTone.CASUAL,
    )

    with pytest.raises(ForbiddenError):
        await ai_content_service.request_content(data, user_principal, uow)


@pytest.mark.asyncio
async def test_webhook_completes_and_notifies_company(uow):
    uow.ai_content._store[15] = make_ai_content(content_id=15, empresa_id=7)
    events = FakeEventPublisher()

    content = await ai_content_service.complete_from_webhook(
        15, {"headline": "Pronto", "conteudo": "Texto", "cta": "Clique"}, uow, events,
    )

    assert content.status == AiContentStatus.COMPLETED
    assert content.headline == "Pronto"
    assert content.webhook_response == {"headline": "Pronto", "conteudo": "Texto", "cta": "Clique"}
    assert events.events == [
        (
            EventKind.AI_CONTENT_COMPLETED,
            7,
            {"id": 15, "empresa_id": 7, "status": AiContentStatus.COMPLETED, "headline": "Pronto"},
        ),
    ]


@pytest.mark.asyncio
async def test_webhook_for_unknown_content(uow):
    events = FakeEventPublisher()

    with pytest.raises(NotFoundError):
        await ai_content_service.complete_from_webhook(999, {}, uow, events)

    assert events.events == []


@pytest.mark.asyncio
async def test_get_and_list_content(user_principal, uow):
    uow.ai_content._store[1] = make_ai_content(content_id=1, empresa_id=7)
    uow.ai_content._store[2] = make_ai_content(content_id=2, empresa_id=8)

    listed = await ai_content_service.list_company_content(7, user_principal, uow)
    assert [c.id for c in listed] == [1]
    assert (await ai_content_service.get_content(1, user_principal, uow)).id == 1
    with pytest.raises(ForbiddenError):
        await ai_content_service.get_content(2, user_principal, uow)
