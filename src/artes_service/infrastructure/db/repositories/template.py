from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artes_service.application.dto.template import NewTemplateDTO
from artes_service.domain.entities.template import Template
from artes_service.infrastructure.db.mappers import template as mapper
from artes_service.infrastructure.db.models.template import TemplateModel


class TemplateReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, template_id: int) -> Template | None:
        result = await self._session.get(TemplateModel, template_id)
        return mapper.model_to_entity(result) if result else None

    async def list_templates(self, *, segmento: int | None = None) -> list[Template]:
        stmt = select(TemplateModel)
        if segmento is not None:
            stmt = stmt.where(TemplateModel.empresa_segmento == segmento)
        stmt = stmt.order_by(TemplateModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class TemplateWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: NewTemplateDTO) -> Template:
        model = TemplateModel(
            name=data.name,
            template_id=data.template_id,
            width=data.width,
            height=data.height,
            image=data.image,
            empresa_segmento=data.empresa_segmento,
            logo_formato=data.logo_formato,
            texto_apoio=data.texto_apoio,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return mapper.model_to_entity(model)
