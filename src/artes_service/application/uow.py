from __future__ import annotations

from typing import Protocol

from artes_service.application.repositories.ai_content import (
    AiContentReader,
    AiContentWriter,
)
from artes_service.application.repositories.art import ArtReader, ArtWriter
from artes_service.application.repositories.company import (
    CompanyReader,
    CompanyWriter,
    MembershipReader,
    MembershipWriter,
)
from artes_service.application.repositories.template import (
    TemplateReader,
    TemplateWriter,
)


class UnitOfWork(Protocol):
    arts: ArtReader
    arts_w: ArtWriter
    companies: CompanyReader
    companies_w: CompanyWriter
    memberships: MembershipReader
    memberships_w: MembershipWriter
    templates: TemplateReader
    templates_w: TemplateWriter
    ai_content: AiContentReader
    ai_content_w: AiContentWriter

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
