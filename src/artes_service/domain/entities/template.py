from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Template:
    id: int
    name: str | None
    template_id: str | None
    width: int | None
    height: int | None
    image: str | None
    empresa_segmento: int | None
    logo_formato: str | None
    texto_apoio: str
    created_at: datetime
