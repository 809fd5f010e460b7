from __future__ import annotations

from pydantic import BaseModel

from artes_service.domain.value_objects.enums import MembershipRole


class MembershipResponse(BaseModel):
    user_id: str
    empresa_id: int
    role: str
    status: str
    ativo: bool

    model_config = {"from_attributes": True}


class AddMemberRequest(BaseModel):
    user_id: str
    role: MembershipRole = MembershipRole.MEMBER

    model_config = {"extra": "forbid"}


class ChangeRoleRequest(BaseModel):
    role: MembershipRole

    model_config = {"extra": "forbid"}
