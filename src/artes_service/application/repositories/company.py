from __future__ import annotations

from typing import Any, Protocol

from artes_service.domain.entities.company import Company
from artes_service.domain.entities.membership import Membership


class CompanyReader(Protocol):
    async def get_by_id(self, empresa_id: int) -> Company | None: ...

    async def list_all(self) -> list[Company]: ...

    async def list_for_user(self, user_id: str) -> list[Company]:
        """Companies the user administers or holds an accepted membership in."""
        ...


class CompanyWriter(Protocol):
    async def update(self, empresa_id: int, changes: dict[str, Any]) -> Company | None: ...


class MembershipReader(Protocol):
    async def get(self, user_id: str, empresa_id: int) -> Membership | None: ...

    async def list_for_company(self, empresa_id: int) -> list[Membership]:
        """Active memberships of a company, any status."""
        ...


class MembershipWriter(Protocol):
    async def add(
        self,
        user_id: str,
        empresa_id: int,
        role: str,
        status: str,
    ) -> Membership: ...

    async def update(
        self,
        user_id: str,
        empresa_id: int,
        changes: dict[str, Any],
    ) -> Membership | None:
        """Write ``changes`` to the latest membership row of the pair."""
        ...
