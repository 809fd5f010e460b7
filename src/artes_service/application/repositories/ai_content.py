from __future__ import annotations

from typing import Any, Protocol

from artes_service.application.dto.ai_content import (
    AiContentRequestDTO,
    ParsedWebhookContent,
)
from artes_service.domain.entities.ai_content import AiContentGeneration


class AiContentReader(Protocol):
    async def get_by_id(self, content_id: int) -> AiContentGeneration | None: ...

    async def list_for_company(self, empresa_id: int) -> list[AiContentGeneration]: ...


class AiContentWriter(Protocol):
    async def create(
        self, data: AiContentRequestDTO, user_id: str
    ) -> AiContentGeneration: ...

    async def complete(
        self,
        content_id: int,
        response: Any,
        parsed: ParsedWebhookContent,
    ) -> AiContentGeneration | None:
        """Store the raw webhook body and extracted fields, mark completed."""
        ...
