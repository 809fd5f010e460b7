from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class AiContentGeneration:
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
