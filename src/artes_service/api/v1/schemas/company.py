from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CompanyResponse(BaseModel):
    id: int
    nome: str
    slug: str | None
    cores: dict[str, Any]
    logo: str | None
    logo_formato: str | None
    whatsapp: str | None
    telefone: str | None
    email: str | None
    endereco: str | None
    instagram: str | None
    facebook: str | None
    website: str | None
    empresa_segmento: int | None
    ativo: bool
    rodape: str | None
    hashtag: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class PatchCompanyRequest(BaseModel):
    """Only the fields present in the body are written."""

    nome: str | None = None
    slug: str | None = None
    cores: dict[str, Any] | None = None
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
    rodape: str | None = None
    hashtag: str | None = None

    model_config = {"extra": "forbid"}
