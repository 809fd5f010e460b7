from __future__ import annotations

from artes_service.domain.entities.ai_content import AiContentGeneration
from artes_service.infrastructure.db.models.ai_content import AiContentGenerationModel


def model_to_entity(model: AiContentGenerationModel) -> AiContentGeneration:
    return AiContentGeneration(
        id=model.id,
        empresa_id=model.empresa_id,
        user_id=model.user_id,
        tema=model.tema,
        tipo_postagem=model.tipo_postagem,
        tom_voz=model.tom_voz,
        quantidade_artes=model.quantidade_artes,
        quantidade_dias=model.quantidade_dias,
        status=model.status,
        webhook_response=model.webhook_response,
        headline=model.headline,
        conteudo=model.conteudo,
        cta=model.cta,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
