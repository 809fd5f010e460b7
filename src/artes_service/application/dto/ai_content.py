from __future__ import annotations

from dataclasses import dataclass

from artes_service.domain.value_objects.enums import PostType, VoiceTone


@dataclass(frozen=True, slots=True)
class AiContentRequestDTO:
    empresa_id: int
    tema: str
    tipo_postagem: PostType
    tom_voz: VoiceTone
    quantidade_artes: int = 1
    quantidade_dias: int = 1


@dataclass(frozen=True, slots=True)
class ParsedWebhookContent:
    headline: str | None
    conteudo: str | None
    cta: str | None
