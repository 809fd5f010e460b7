from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from artes_service.domain.value_objects.enums import PostType, VoiceTone


class AiContentRequest(BaseModel):
    empresa_id: int
    tema: str = Field(..., min_length=1)
    tipo_postagem: PostType
    tom_voz: VoiceTone
    quantidade_artes: int = Field(1, ge=1, le=10)
    quantidade_dias: int = Field(1, ge=1, le=31)


class AiContentResponse(BaseModel):
    id: int
    empresa_id: int
    user_id: str
    tema: str
    tipo_postagem: str
    tom_voz: str
    quantidade_artes: int
    quantidade_dias: int
    status: str
    webhook_response: Any
    headline: str | None
    conteudo: str | None
    cta: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
