from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class DesignSuggestionRequest(BaseModel):
    empresa_id: int
    template_id: int | None = None


class DesignSuggestionResponse(BaseModel):
    type: str
    title: str
    description: str
    data: dict[str, Any]
    confidence: int
    reasoning: str

    model_config = {"from_attributes": True}
