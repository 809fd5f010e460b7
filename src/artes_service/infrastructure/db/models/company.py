from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import BigInteger, Boolean, ForeignKey, Identity, Index, String, Text, text
from sqlalchemy.dialects.postgresql import JSON, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from artes_service.infrastructure.db.base import Base

DEFAULT_COLORS: dict[str, Any] = {
    "arte_clara": {
        "cor-1": "#1A73E8",
        "cor-2": "#34A853",
        "cor-fundo": "#FFFFFF",
        "cor-texto": "#000000",
    },
    "arte_escura": {
        "cor-1": "#1A73E8",
        "cor-2": "#34A853",
        "cor-fundo": "#000000",
        "cor-texto": "#FFFFFF",
    },
}


class CompanyModel(Base):
    __tablename__ = "Empresas"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    nome: Mapped[str] = mapped_column(Text, nullable=False)
    admin: Mapped[str] = mapped_column(String, nullable=False)
    slug: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    cores: Mapped[dict[str, Any] | None] = mapped_column(
        JSON, nullable=True, default=lambda: dict(DEFAULT_COLORS),
    )
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    logo_formato: Mapped[str | None] = mapped_column(Text, nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(Text, nullable=True)
    telefone: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    endereco: Mapped[str | None] = mapped_column(Text, nullable=True)
    instagram: Mapped[str | None] = mapped_column(Text, nullable=True)
    facebook: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    empresa_segmento: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=text("true"))
    rodape: Mapped[str | None] = mapped_column(Text, nullable=True)
    hashtag: Mapped[str | None] = mapped_column(Text, nullable=True)


class MembershipModel(Base):
    __tablename__ = "UsuarioEmpresas"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    empresa_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("Empresas.id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(Text, nullable=False, default="member", server_default=text("'member'"))
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=text("true"))
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default="pendente", server_default=text("'pendente'"),
    )

    __table_args__ = (
        Index("ix_usuario_empresas_user_empresa", "user_id", "empresa_id"),
    )
