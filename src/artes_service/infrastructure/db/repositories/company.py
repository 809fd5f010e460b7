from __future__ import annotations

from typing import Any

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artes_service.domain.entities.company import Company
from artes_service.domain.entities.membership import Membership
from artes_service.domain.value_objects.enums import MembershipStatus
from artes_service.infrastructure.db.mappers import company as mapper
from artes_service.infrastructure.db.models.company import CompanyModel, MembershipModel


class CompanyReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, empresa_id: int) -> Company | None:
        result = await self._session.get(CompanyModel, empresa_id)
        return mapper.model_to_entity(result) if result else None

    async def list_all(self) -> list[Company]:
        result = await self._session.execute(select(CompanyModel).order_by(CompanyModel.nome))
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def list_for_user(self, user_id: str) -> list[Company]:
        member_of = select(MembershipModel.empresa_id).where(
            MembershipModel.user_id == user_id,
            MembershipModel.ativo.is_(True),
            MembershipModel.status == MembershipStatus.ACCEPTED.value,
        )
        stmt = (
            select(CompanyModel)
            .where(
                or_(
                    CompanyModel.admin == user_id,
                    CompanyModel.id.in_(member_of),
                )
            )
            .order_by(CompanyModel.nome)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class CompanyWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def update(self, empresa_id: int, changes: dict[str, Any]) -> Company | None:
        if not changes:
            model = await self._session.get(CompanyModel, empresa_id)
            return mapper.model_to_entity(model) if model else None
        stmt = (
            update(CompanyModel)
            .where(CompanyModel.id == empresa_id)
            .values(**changes)
            .returning(CompanyModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None


class MembershipReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: str, empresa_id: int) -> Membership | None:
        stmt = (
            select(MembershipModel)
            .where(
                MembershipModel.user_id == user_id,
                MembershipModel.empresa_id == empresa_id,
            )
            .order_by(MembershipModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.membership_to_entity(model) if model else None

    async def list_for_company(self, empresa_id: int) -> list[Membership]:
        stmt = (
            select(MembershipModel)
            .where(
                MembershipModel.empresa_id == empresa_id,
                MembershipModel.ativo.is_(True),
            )
            .order_by(MembershipModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [mapper.membership_to_entity(m) for m in result.scalars().all()]


class MembershipWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
        self,
        user_id: str,
        empresa_id: int,
        role: str,
        status: str,
    ) -> Membership:
        model = MembershipModel(
            user_id=user_id,
            empresa_id=empresa_id,
            role=role,
            status=status,
            ativo=True,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return mapper.membership_to_entity(model)

    async def update(
        self,
        user_id: str,
        empresa_id: int,
        changes: dict[str, Any],
    ) -> Membership | None:
        latest = (
            select(MembershipModel.id)
            .where(
                MembershipModel.user_id == user_id,
                MembershipModel.empresa_id == empresa_id,
            )
            .order_by(MembershipModel.created_at.desc())
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            update(MembershipModel)
            .where(MembershipModel.id == latest)
            .values(**changes)
            .returning(MembershipModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.membership_to_entity(model) if model else None
