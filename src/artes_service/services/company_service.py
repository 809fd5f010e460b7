from __future__ import annotations

from typing import Any

from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import NotFoundError, ValidationError
from artes_service.application.policies.permissions import assert_company_access
from artes_service.application.ports.bus import EventPublisher
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.company import Company
from artes_service.domain.value_objects.enums import EventKind

# Columns a company may edit through the API; ownership and plan stay put.
EDITABLE_FIELDS = frozenset(
    {
        "nome",
        "slug",
        "cores",
        "logo",
        "logo_formato",
        "whatsapp",
        "telefone",
        "email",
        "endereco",
        "instagram",
        "facebook",
        "website",
        "empresa_segmento",
        "rodape",
        "hashtag",
    }
)


async def list_companies(principal: Principal, uow: UnitOfWork) -> list[Company]:
    if principal.is_admin:
        return await uow.companies.list_all()
    return await uow.companies.list_for_user(principal.user_id)


async def get_company(
    empresa_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> Company:
    return await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)


async def update_company(
    empresa_id: int,
    changes: dict[str, Any],
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Company:
    """Apply a partial update and notify every connection of that company."""
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"Fields not editable: {', '.join(sorted(unknown))}")

    await assert_company_access(
        principal, empresa_id, uow.companies, uow.memberships, manage=True,
    )
    company = await uow.companies_w.update(empresa_id, changes)
    if company is None:
        raise NotFoundError("Company not found")
    await uow.commit()

    await events.publish(
        EventKind.COMPANY_UPDATED,
        company.id,
        {"id": company.id, "fields": sorted(changes)},
    )
    return company
