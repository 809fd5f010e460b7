from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Art:
    id: int
    empresa_id: int
    link: str | None
    width: int | None
    height: int | None
    arquivada: bool
    texto_apoio: str
    created_at: datetime
