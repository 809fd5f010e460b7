from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artes_service.application.dto.art import NewArtDTO
from artes_service.domain.entities.art import Art
from artes_service.infrastructure.db.mappers import art as mapper
from artes_service.infrastructure.db.models.art import ArtModel


class ArtReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, art_id: int) -> Art | None:
        result = await self._session.get(ArtModel, art_id)
        return mapper.model_to_entity(result) if result else None

    async def list_for_company(
        self,
        empresa_id: int,
        *,
        archived: bool = False,
    ) -> list[Art]:
        stmt = (
            select(ArtModel)
            .where(
                ArtModel.empresa == empresa_id,
                ArtModel.arquivada.is_(archived),
            )
            .order_by(ArtModel.created_at.desc(), ArtModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ArtWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: NewArtDTO) -> Art:
        model = ArtModel(
            empresa=data.empresa_id,
            link=data.link,
            width=data.width,
            height=data.height,
            texto_apoio=data.texto_apoio,
            arquivada=False,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return mapper.model_to_entity(model)

    async def set_archived(self, art_id: int, archived: bool) -> Art | None:
        stmt = (
            update(ArtModel)
            .where(ArtModel.id == art_id)
            .values(arquivada=archived)
            .returning(ArtModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
