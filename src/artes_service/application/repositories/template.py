from __future__ import annotations

from typing import Protocol

from artes_service.application.dto.template import NewTemplateDTO
from artes_service.domain.entities.template import Template


class TemplateReader(Protocol):
    async def get_by_id(self, template_id: int) -> Template | None: ...

    async def list_templates(self, *, segmento: int | None = None) -> list[Template]: ...


class TemplateWriter(Protocol):
    async def create(self, data: NewTemplateDTO) -> Template: ...
