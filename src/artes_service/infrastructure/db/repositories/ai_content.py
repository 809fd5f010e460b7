from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from artes_service.application.dto.ai_content import (
    AiContentRequestDTO,
    ParsedWebhookContent,
)
from artes_service.domain.entities.ai_content import AiContentGeneration
from artes_service.domain.value_objects.enums import AiContentStatus
from artes_service.infrastructure.db.mappers import ai_content as mapper
from artes_service.infrastructure.db.models.ai_content import AiContentGenerationModel


class AiContentReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, content_id: int) -> AiContentGeneration | None:
        result = await self._session.get(AiContentGenerationModel, content_id)
        return mapper.model_to_entity(result) if result else None

    async def list_for_company(self, empresa_id: int) -> list[AiContentGeneration]:
        stmt = (
            select(AiContentGenerationModel)
            .where(AiContentGenerationModel.empresa_id == empresa_id)
            .order_by(AiContentGenerationModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class AiContentWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: AiContentRequestDTO, user_id: str) -> AiContentGeneration:
        model = AiContentGenerationModel(
            empresa_id=data.empresa_id,
            user_id=user_id,
            tema=data.tema,
            tipo_postagem=data.tipo_postagem.value,
            tom_voz=data.tom_voz.value,
            quantidade_artes=data.quantidade_artes,
            quantidade_dias=data.quantidade_dias,
            status=AiContentStatus.PENDING.value,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return mapper.model_to_entity(model)

    async def complete(
        self,
        content_id: int,
        response: Any,
        parsed: ParsedWebhookContent,
    ) -> AiContentGeneration | None:
        stmt = (
            update(AiContentGenerationModel)
            .where(AiContentGenerationModel.id == content_id)
            .values(
                webhook_response=response,
                headline=parsed.headline,
                conteudo=parsed.conteudo,
                cta=parsed.cta,
                status=AiContentStatus.COMPLETED.value,
            )
            .returning(AiContentGenerationModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
