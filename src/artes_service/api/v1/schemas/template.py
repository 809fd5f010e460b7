from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateTemplateRequest(BaseModel):
    name: str
    template_id: str | None = None
    width: int | None = Field(None, ge=1)
    height: int | None = Field(None, ge=1)
    image: str | None = None
    empresa_segmento: int | None = None
    logo_formato: str | None = None
    texto_apoio: str = ""


class TemplateResponse(BaseModel):
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

    model_config = {"from_attributes": True}
