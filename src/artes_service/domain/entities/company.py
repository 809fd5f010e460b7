from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Company:
    id: int
    nome: str
    admin_user_id: str
    created_at: datetime
    slug: str | None = None
    cores: dict[str, Any] = field(default_factory=dict)
    logo: str | None = None
    logo_formato: str | None = None
    whatsapp: str | None = None
    telefone: str | None = None
    email: str | None = None
    endereco: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    website: str | None = None
    empresa_segmento: int | None = None
    ativo: bool = True
    rodape: str | None = None
    hashtag: str | None = None
