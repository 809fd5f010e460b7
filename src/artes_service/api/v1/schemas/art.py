from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateArtRequest(BaseModel):
    empresa_id: int
    link: str | None = None
    width: int | None = Field(None, ge=1)
    height: int | None = Field(None, ge=1)
    texto_apoio: str = ""


class ArtResponse(BaseModel):
    id: int
    empresa_id: int
    link: str | None
    width: int | None
    height: int | None
    arquivada: bool
    texto_apoio: str
    created_at: datetime

    model_config = {"from_attributes": True}
