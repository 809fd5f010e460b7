"""Company user management: add, change role, remove, answer an invite.

Every change publishes ``company-updated`` with ``fields=["users"]`` so the
company's clients refetch their member lists.
"""
from __future__ import annotations

import logging

from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import ConflictError, NotFoundError
from artes_service.application.policies.permissions import assert_company_access
from artes_service.application.ports.bus import EventPublisher
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.membership import Membership
from artes_service.domain.value_objects.enums import (
    EventKind,
    MembershipRole,
    MembershipStatus,
)

logger = logging.getLogger(__name__)

MEMBERS_FIELD = "users"


async def _notify(events: EventPublisher, empresa_id: int) -> None:
    await events.publish(
        EventKind.COMPANY_UPDATED,
        empresa_id,
        {"id": empresa_id, "fields": [MEMBERS_FIELD]},
    )


async def list_members(
    empresa_id: int,
    principal: Principal,
    uow: UnitOfWork,
) -> list[Membership]:
    await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)
    return await uow.memberships.list_for_company(empresa_id)


async def add_member(
    empresa_id: int,
    user_id: str,
    role: MembershipRole,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Membership:
    """Invite a user; the membership stays ``pendente`` until they accept."""
    await assert_company_access(
        principal, empresa_id, uow.companies, uow.memberships, manage=True,
    )

    existing = await uow.memberships.get(user_id, empresa_id)
    if (
        existing is not None
        and existing.ativo
        and existing.status != MembershipStatus.REJECTED
    ):
        raise ConflictError("User already belongs to this company")

    if existing is None:
        membership = await uow.memberships_w.add(
            user_id, empresa_id, role.value, MembershipStatus.PENDING.value,
        )
    else:
        # removed or rejected before: reuse the row as a fresh invite
        membership = await uow.memberships_w.update(
            user_id,
            empresa_id,
            {"role": role.value, "status": MembershipStatus.PENDING.value, "ativo": True},
        )
        if membership is None:
            raise NotFoundError("Membership not found")
    await uow.commit()
    logger.info("User %s invited to empresa=%d as %s", user_id, empresa_id, role)

    await _notify(events, empresa_id)
    return membership


async def change_role(
    empresa_id: int,
    user_id: str,
    role: MembershipRole,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Membership:
    await assert_company_access(
        principal, empresa_id, uow.companies, uow.memberships, manage=True,
    )
    await _require_active(user_id, empresa_id, uow)

    membership = await uow.memberships_w.update(user_id, empresa_id, {"role": role.value})
    if membership is None:
        raise NotFoundError("Membership not found")
    await uow.commit()

    await _notify(events, empresa_id)
    return membership


async def remove_member(
    empresa_id: int,
    user_id: str,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> None:
    """Deactivate the membership; the row is kept."""
    await assert_company_access(
        principal, empresa_id, uow.companies, uow.memberships, manage=True,
    )
    await _require_active(user_id, empresa_id, uow)

    await uow.memberships_w.update(user_id, empresa_id, {"ativo": False})
    await uow.commit()
    logger.info("User %s removed from empresa=%d", user_id, empresa_id)

    await _notify(events, empresa_id)


async def respond_to_invite(
    empresa_id: int,
    accept: bool,
    principal: Principal,
    uow: UnitOfWork,
    events: EventPublisher,
) -> Membership:
    """The invited user accepts or declines their own pending membership."""
    existing = await uow.memberships.get(principal.user_id, empresa_id)
    if existing is None or not existing.ativo:
        raise NotFoundError("Invite not found")
    if existing.status != MembershipStatus.PENDING:
        raise ConflictError("Invite already answered")

    status = MembershipStatus.ACCEPTED if accept else MembershipStatus.REJECTED
    membership = await uow.memberships_w.update(
        principal.user_id, empresa_id, {"status": status.value},
    )
    if membership is None:
        raise NotFoundError("Invite not found")
    await uow.commit()

    await _notify(events, empresa_id)
    return membership


async def _require_active(user_id: str, empresa_id: int, uow: UnitOfWork) -> Membership:
    existing = await uow.memberships.get(user_id, empresa_id)
    if existing is None or not existing.ativo:
        raise NotFoundError("Membership not found")
    return existing
