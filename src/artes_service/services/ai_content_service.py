from __future__ import annotations

import logging
from typing import Any

from artes_service.application.dto.ai_content import (
    AiContentRequestDTO,
    ParsedWebhookContent,
)
from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import NotFoundError
from artes_service.application.policies.permissions import assert_company_access
from artes_service.application.ports.bus import EventPublisher
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.ai_content import AiContentGeneration
from artes_service.domain.value_objects.enums import EventKind

logger = logging.getLogger(__name__)


def _get(obj: Any, *path: str | int) -> Any:
    for key in path:
        if isinstance(key, int):
            if not isinstance(obj, list) or len(obj) <= key:
                return None
        elif not isinstance(obj, dict):
            return None
        obj = obj[key] if isinstance(key, int) else obj.get(key)
    return obj


def _from_item(item: Any) -> ParsedWebhookContent:
    if not isinstance(item, dict):
        return ParsedWebhookContent(headline=None, conteudo=None, cta=None)
    return ParsedWebhookContent(
        headline=item.get("headline"),
        conteudo=item.get("conteudo") or item.get("content"),
        cta=item.get("cta") or item.get("chamadaParaAcao"),
    )


def parse_webhook_response(response: Any) -> ParsedWebhookContent:
    """Extract headline / conteudo / cta from a content workflow callback.

    The workflow has shipped several payload shapes over time:

    * ``[{"response": {"body": {"arteInstagram": {...}}}}]`` (single post)
    * ``[{"response": {"body": {"calendario_sazonal": [{...}, ...]}}}]``
    * ``{"output": [{...}, ...]}`` (older calendar)
    * ``{"output": {...}}``
    * a flat object with the fields at top level

    For lists only the first item is extracted.
    """
    body = _get(response, 0, "response", "body")

    arte = _get(body, "arteInstagram")
    if isinstance(arte, dict):
        return ParsedWebhookContent(
            headline=arte.get("headline"),
            conteudo=arte.get("conteudo"),
            cta=arte.get("chamadaParaAcao") or arte.get("cta"),
        )

    calendar = _get(body, "calendario_sazonal")
    if isinstance(calendar, list):
        return _from_item(calendar[0] if calendar else None)

    output = _get(response, "output")
    if isinstance(output, list):
        return _from_item(output[0] if output else None)
    if isinstance(output, dict):
        return _from_item(output)

    return _from_item(response)


async def request_content(
    data: AiContentRequestDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> AiContentGeneration:
    await assert_company_access(principal, data.empresa_id, uow.companies, uow.memberships)
    content = await uow.ai_content_w.create(data, principal.user_id)
    await uow.commit()
    logger.info(
        "AI content %d requested empresa=%d tipo=%s",
        content.id, content.empresa_id, content.tipo_postagem,
    )
    return content


async def list_company_content(
    empresa_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> list[AiContentGeneration]:
    await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)
    return await uow.ai_content.list_for_company(empresa_id)


async def get_content(
    content_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> AiContentGeneration:
    content = await uow.ai_content.get_by_id(content_id)
    if content is None:
        raise NotFoundError("AI content not found")
    await assert_company_access(principal, content.empresa_id, uow.companies, uow.memberships)
    return content


async def complete_from_webhook(
    content_id: int,
    response: Any,
    uow: UnitOfWork,
    events: EventPublisher,
) -> AiContentGeneration:
    """Store the workflow result and tell the company's clients it's ready."""
    existing = await uow.ai_content.get_by_id(content_id)
    if existing is None:
        raise NotFoundError("AI content not found")

    parsed = parse_webhook_response(response)
    content = await uow.ai_content_w.complete(content_id, response, parsed)
    if content is None:
        raise NotFoundError("AI content not found")
    await uow.commit()

    await events.publish(
        EventKind.AI_CONTENT_COMPLETED,
        content.empresa_id,
        {
            "id": content.id,
            "empresa_id": content.empresa_id,
            "status": content.status,
            "headline": content.headline,
        },
    )
    return content
