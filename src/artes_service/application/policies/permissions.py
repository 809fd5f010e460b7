from __future__ import annotations

from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import ForbiddenError, NotFoundError
from artes_service.application.repositories.company import (
    CompanyReader,
    MembershipReader,
)
from artes_service.domain.entities.company import Company
from artes_service.domain.value_objects.enums import MembershipRole, MembershipStatus


async def assert_company_access(
    principal: Principal,
    empresa_id: int,
    companies: CompanyReader,
    memberships: MembershipReader,
    *,
    manage: bool = False,
) -> Company:
    """Raise if the company doesn't exist or the principal can't reach it.

    With ``manage=True`` only the company owner, a membership with the
    admin role, or a platform admin passes.
    """
    company = await companies.get_by_id(empresa_id)
    if company is None:
        raise NotFoundError("Company not found")

    # Platform admins see every tenant
    if principal.is_admin or company.admin_user_id == principal.user_id:
        return company

    membership = await memberships.get(principal.user_id, empresa_id)
    if (
        membership is None
        or not membership.ativo
        or membership.status != MembershipStatus.ACCEPTED
    ):
        raise ForbiddenError("Not a member of this company")
    if manage and membership.role != MembershipRole.ADMIN:
        raise ForbiddenError("Company admin role required")

    return company


def assert_admin(principal: Principal) -> None:
    if not principal.is_admin:
        raise ForbiddenError("Admin access required")
