from __future__ import annotations

from typing import Protocol

from artes_service.application.dto.art import NewArtDTO
from artes_service.domain.entities.art import Art


class ArtReader(Protocol):
    async def get_by_id(self, art_id: int) -> Art | None: ...

    async def list_for_company(
        self, empresa_id: int, *, archived: bool = False
    ) -> list[Art]:
        """Arts of a company, newest first, filtered by the archived flag."""
        ...


class ArtWriter(Protocol):
    async def create(self, data: NewArtDTO) -> Art: ...

    async def set_archived(self, art_id: int, archived: bool) -> Art | None: ...
