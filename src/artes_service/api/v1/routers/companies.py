from __future__ import annotations

from fastapi import APIRouter

from artes_service.api.deps import CurrentPrincipal, EventsDep, UoWDep
from artes_service.api.v1.schemas.company import CompanyResponse, PatchCompanyRequest
from artes_service.api.v1.schemas.membership import (
    AddMemberRequest,
    ChangeRoleRequest,
    MembershipResponse,
)
from artes_service.services import company_service, membership_service

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("", response_model=list[CompanyResponse])
async def list_companies(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[CompanyResponse]:
    companies = await company_service.list_companies(principal, uow)
    return [CompanyResponse.model_validate(c, from_attributes=True) for c in companies]


@router.get("/{empresa_id}", response_model=CompanyResponse)
async def get_company(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> CompanyResponse:
    company = await company_service.get_company(empresa_id, principal, uow)
    return CompanyResponse.model_validate(company, from_attributes=True)


@router.patch("/{empresa_id}", response_model=CompanyResponse)
async def patch_company(
    empresa_id: int,
    body: PatchCompanyRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> CompanyResponse:
    company = await company_service.update_company(
        empresa_id, body.model_dump(exclude_unset=True), principal, uow, events,
    )
    return CompanyResponse.model_validate(company, from_attributes=True)


@router.get("/{empresa_id}/users", response_model=list[MembershipResponse])
async def list_members(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[MembershipResponse]:
    members = await membership_service.list_members(empresa_id, principal, uow)
    return [MembershipResponse.model_validate(m) for m in members]


@router.post("/{empresa_id}/users", response_model=MembershipResponse, status_code=201)
async def add_member(
    empresa_id: int,
    body: AddMemberRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> MembershipResponse:
    membership = await membership_service.add_member(
        empresa_id, body.user_id, body.role, principal, uow, events,
    )
    return MembershipResponse.model_validate(membership)


@router.patch("/{empresa_id}/users/{user_id}", response_model=MembershipResponse)
async def change_member_role(
    empresa_id: int,
    user_id: str,
    body: ChangeRoleRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> MembershipResponse:
    membership = await membership_service.change_role(
        empresa_id, user_id, body.role, principal, uow, events,
    )
    return MembershipResponse.model_validate(membership)


@router.delete("/{empresa_id}/users/{user_id}", status_code=204)
async def remove_member(
    empresa_id: int,
    user_id: str,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> None:
    await membership_service.remove_member(empresa_id, user_id, principal, uow, events)


@router.post("/{empresa_id}/invite/accept", response_model=MembershipResponse)
async def accept_invite(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> MembershipResponse:
    membership = await membership_service.respond_to_invite(
        empresa_id, True, principal, uow, events,
    )
    return MembershipResponse.model_validate(membership)


@router.post("/{empresa_id}/invite/reject", response_model=MembershipResponse)
async def reject_invite(
    empresa_id: int,
    principal: CurrentPrincipal,
    uow: UoWDep,
    events: EventsDep,
) -> MembershipResponse:
    membership = await membership_service.respond_to_invite(
        empresa_id, False, principal, uow, events,
    )
    return MembershipResponse.model_validate(membership)
