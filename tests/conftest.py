"""Shared test fixtures."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from starlette.websockets import WebSocketState

from artes_service.application.dto.ai_content import (
    AiContentRequestDTO,
    ParsedWebhookContent,
)
from artes_service.application.dto.art import NewArtDTO
from artes_service.application.dto.principal import Principal
from artes_service.application.dto.template import NewTemplateDTO
from artes_service.domain.entities.ai_content import AiContentGeneration
from artes_service.domain.entities.art import Art
from artes_service.domain.entities.company import Company
from artes_service.domain.entities.membership import Membership
from artes_service.domain.entities.template import Template
from artes_service.domain.value_objects.enums import (
    AiContentStatus,
    EventKind,
    MembershipRole,
    MembershipStatus,
    UserKind,
)


@pytest.fixture
def user_principal() -> Principal:
    return Principal(user_id="u1", kind=UserKind.USER, roles=[])


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(user_id="root", kind=UserKind.ADMIN, roles=["admin"])


def _now() -> datetime:
    return datetime.now(timezone.utc)


def make_company(
    *,
    empresa_id: int = 7,
    nome: str = "Padaria Central",
    admin_user_id: str = "owner",
    segmento: int | None = None,
) -> Company:
    return Company(
        id=empresa_id,
        nome=nome,
        admin_user_id=admin_user_id,
        created_at=_now(),
        empresa_segmento=segmento,
    )


def make_membership(
    *,
    user_id: str = "u1",
    empresa_id: int = 7,
    role: str = MembershipRole.MEMBER,
    status: str = MembershipStatus.ACCEPTED,
) -> Membership:
    return Membership(user_id=user_id, empresa_id=empresa_id, role=role, status=status)


def make_art(
    *,
    art_id: int = 42,
    empresa_id: int = 7,
    arquivada: bool = False,
) -> Art:
    return Art(
        id=art_id,
        empresa_id=empresa_id,
        link=f"https://cdn.example.com/artes/{art_id}.png",
        width=1080,
        height=1080,
        arquivada=arquivada,
        texto_apoio="",
        created_at=_now(),
    )


def make_template(
    *,
    template_id: int = 3,
    width: int | None = 1080,
    height: int | None = 1080,
) -> Template:
    return Template(
        id=template_id,
        name="Post quadrado",
        template_id=f"tpl-{template_id}",
        width=width,
        height=height,
        image=None,
        empresa_segmento=None,
        logo_formato="quadrada",
        texto_apoio="",
        created_at=_now(),
    )


def make_ai_content(*, content_id: int = 15, empresa_id: int = 7) -> AiContentGeneration:
    now = _now()
    return AiContentGeneration(
        id=content_id,
        empresa_id=empresa_id,
        user_id="u1",
        tema="Promoção de páscoa",
        tipo_postagem="feed",
        tom_voz="casual",
        quantidade_artes=1,
        quantidade_dias=1,
        status=AiContentStatus.PENDING,
        webhook_response=None,
        headline=None,
        conteudo=None,
        cta=None,
        created_at=now,
        updated_at=now,
    )


@dataclass
class FakeCompanyReader:
    _store: dict[int, Company] = field(default_factory=dict)
    _memberships: list[Membership] = field(default_factory=list)

    async def get_by_id(self, empresa_id: int) -> Company | None:
        return self._store.get(empresa_id)

    async def list_all(self) -> list[Company]:
        return sorted(self._store.values(), key=lambda c: c.nome)

    async def list_for_user(self, user_id: str) -> list[Company]:
        ids = {
            m.empresa_id
            for m in self._memberships
            if m.user_id == user_id and m.ativo and m.status == MembershipStatus.ACCEPTED
        }
        return [
            c for c in self._store.values()
            if c.admin_user_id == user_id or c.id in ids
        ]


@dataclass
class FakeCompanyWriter:
    _reader: FakeCompanyReader

    async def update(self, empresa_id: int, changes: dict[str, Any]) -> Company | None:
        company = self._reader._store.get(empresa_id)
        if company is None:
            return None
        updated = dataclasses.replace(company, **changes)
        self._reader._store[empresa_id] = updated
        return updated


@dataclass
class FakeMembershipReader:
    _companies: FakeCompanyReader

    async def get(self, user_id: str, empresa_id: int) -> Membership | None:
        for m in self._companies._memberships:
            if m.user_id == user_id and m.empresa_id == empresa_id:
                return m
        return None

    async def list_for_company(self, empresa_id: int) -> list[Membership]:
        return [
            m for m in self._companies._memberships
            if m.empresa_id == empresa_id and m.ativo
        ]


@dataclass
class FakeMembershipWriter:
    _companies: FakeCompanyReader

    async def add(self, user_id: str, empresa_id: int, role: str, status: str) -> Membership:
        membership = Membership(
            user_id=user_id, empresa_id=empresa_id, role=role, status=status,
        )
        self._companies._memberships.append(membership)
        return membership

    async def update(
        self, user_id: str, empresa_id: int, changes: dict[str, Any],
    ) -> Membership | None:
        rows = self._companies._memberships
        for i, m in enumerate(rows):
            if m.user_id == user_id and m.empresa_id == empresa_id:
                rows[i] = dataclasses.replace(m, **changes)
                return rows[i]
        return None


@dataclass
class FakeArtReader:
    _store: dict[int, Art] = field(default_factory=dict)

    async def get_by_id(self, art_id: int) -> Art | None:
        return self._store.get(art_id)

    async def list_for_company(self, empresa_id: int, *, archived: bool = False) -> list[Art]:
        arts = [
            a for a in self._store.values()
            if a.empresa_id == empresa_id and a.arquivada == archived
        ]
        return sorted(arts, key=lambda a: a.id, reverse=True)


@dataclass
class FakeArtWriter:
    _reader: FakeArtReader

    async def create(self, data: NewArtDTO) -> Art:
        art_id = max(self._reader._store, default=0) + 1
        art = Art(
            id=art_id,
            empresa_id=data.empresa_id,
            link=data.link,
            width=data.width,
            height=data.height,
            arquivada=False,
            texto_apoio=data.texto_apoio,
            created_at=_now(),
        )
        self._reader._store[art_id] = art
        return art

    async def set_archived(self, art_id: int, archived: bool) -> Art | None:
        art = self._reader._store.get(art_id)
        if art is None:
            return None
        updated = dataclasses.replace(art, arquivada=archived)
        self._reader._store[art_id] = updated
        return updated


@dataclass
class FakeTemplateReader:
    _store: dict[int, Template] = field(default_factory=dict)

    async def get_by_id(self, template_id: int) -> Template | None:
        return self._store.get(template_id)

    async def list_templates(self, *, segmento: int | None = None) -> list[Template]:
        return [
            t for t in self._store.values()
            if segmento is None or t.empresa_segmento == segmento
        ]


@dataclass
class FakeTemplateWriter:
    _reader: FakeTemplateReader

    async def create(self, data: NewTemplateDTO) -> Template:
        template_id = max(self._reader._store, default=0) + 1
        template = Template(
            id=template_id,
            name=data.name,
            template_id=data.template_id,
            width=data.width,
            height=data.height,
            image=data.image,
            empresa_segmento=data.empresa_segmento,
            logo_formato=data.logo_formato,
            texto_apoio=data.texto_apoio,
            created_at=_now(),
        )
        self._reader._store[template_id] = template
        return template


@dataclass
class FakeAiContentReader:
    _store: dict[int, AiContentGeneration] = field(default_factory=dict)

    async def get_by_id(self, content_id: int) -> AiContentGeneration | None:
        return self._store.get(content_id)

    async def list_for_company(self, empresa_id: int) -> list[AiContentGeneration]:
        return [c for c in self._store.values() if c.empresa_id == empresa_id]


@dataclass
class FakeAiContentWriter:
    _reader: FakeAiContentReader

    async def create(self, data: AiContentRequestDTO, user_id: str) -> AiContentGeneration:
        content_id = max(self._reader._store, default=0) + 1
        now = _now()
        content = AiContentGeneration(
            id=content_id,
            empresa_id=data.empresa_id,
            user_id=user_id,
            tema=data.tema,
            tipo_postagem=data.tipo_postagem.value,
            tom_voz=data.tom_voz.value,
            quantidade_artes=data.quantidade_artes,
            quantidade_dias=data.quantidade_dias,
            status=AiContentStatus.PENDING,
            webhook_response=None,
            headline=None,
            conteudo=None,
            cta=None,
            created_at=now,
            updated_at=now,
        )
        self._reader._store[content_id] = content
        return content

    async def complete(
        self,
        content_id: int,
        response: Any,
        parsed: ParsedWebhookContent,
    ) -> AiContentGeneration | None:
        content = self._reader._store.get(content_id)
        if content is None:
            return None
        updated = dataclasses.replace(
            content,
            webhook_response=response,
            headline=parsed.headline,
            conteudo=parsed.conteudo,
            cta=parsed.cta,
            status=AiContentStatus.COMPLETED,
            updated_at=_now(),
        )
        self._reader._store[content_id] = updated
        return updated


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    arts: FakeArtReader = field(default_factory=FakeArtReader)
    arts_w: FakeArtWriter | None = None
    companies: FakeCompanyReader = field(default_factory=FakeCompanyReader)
    companies_w: FakeCompanyWriter | None = None
    memberships: FakeMembershipReader | None = None
    memberships_w: FakeMembershipWriter | None = None
    templates: FakeTemplateReader = field(default_factory=FakeTemplateReader)
    templates_w: FakeTemplateWriter | None = None
    ai_content: FakeAiContentReader = field(default_factory=FakeAiContentReader)
    ai_content_w: FakeAiContentWriter | None = None
    _committed: bool = False

    def __post_init__(self) -> None:
        if self.arts_w is None:
            self.arts_w = FakeArtWriter(self.arts)
        if self.companies_w is None:
            self.companies_w = FakeCompanyWriter(self.companies)
        if self.memberships is None:
            self.memberships = FakeMembershipReader(self.companies)
        if self.memberships_w is None:
            self.memberships_w = FakeMembershipWriter(self.companies)
        if self.templates_w is None:
            self.templates_w = FakeTemplateWriter(self.templates)
        if self.ai_content_w is None:
            self.ai_content_w = FakeAiContentWriter(self.ai_content)

    def add_company(self, company: Company, *members: Membership) -> Company:
        self.companies._store[company.id] = company
        self.companies._memberships.extend(members)
        return company

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        pass


@dataclass
class FakeEventPublisher:
    """Records published events instead of touching sockets."""
    events: list[tuple[EventKind, int | None, Any]] = field(default_factory=list)

    async def publish(self, kind: EventKind, scope: int | None, data: Any) -> int:
        self.events.append((kind, scope, data))
        return 0

    def kinds(self) -> list[EventKind]:
        return [kind for kind, _scope, _data in self.events]


@dataclass
class FakeSocket:
    """Stand-in for a Starlette WebSocket as seen by the publisher."""
    client_state: WebSocketState = WebSocketState.CONNECTED
    application_state: WebSocketState = WebSocketState.CONNECTED
    fail: bool = False
    sent: list[str] = field(default_factory=list)

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("socket is broken")
        self.sent.append(data)


@dataclass
class FixedClock:
    current: datetime = field(default_factory=lambda: datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current = self.current + timedelta(seconds=seconds)
