from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from artes_service.infrastructure.db.repositories.ai_content import (
    AiContentReaderRepo,
    AiContentWriterRepo,
)
from artes_service.infrastructure.db.repositories.art import ArtReaderRepo, ArtWriterRepo
from artes_service.infrastructure.db.repositories.company import (
    CompanyReaderRepo,
    CompanyWriterRepo,
    MembershipReaderRepo,
    MembershipWriterRepo,
)
from artes_service.infrastructure.db.repositories.template import (
    TemplateReaderRepo,
    TemplateWriterRepo,
)


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.arts = ArtReaderRepo(session)
        self.arts_w = ArtWriterRepo(session)
        self.companies = CompanyReaderRepo(session)
        self.companies_w = CompanyWriterRepo(session)
        self.memberships = MembershipReaderRepo(session)
        self.memberships_w = MembershipWriterRepo(session)
        self.templates = TemplateReaderRepo(session)
        self.templates_w = TemplateWriterRepo(session)
        self.ai_content = AiContentReaderRepo(session)
        self.ai_content_w = AiContentWriterRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
