from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import ForeignKey, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from artes_service.infrastructure.db.base import Base


class AiContentGenerationModel(Base):
    __tablename__ = "AIContentGeneration"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    empresa_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Empresas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    tema: Mapped[str] = mapped_column(Text, nullable=False)
    tipo_postagem: Mapped[str] = mapped_column(String(20), nullable=False)
    quantidade_artes: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))
    quantidade_dias: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))
    tom_voz: Mapped[str] = mapped_column(String(20), nullable=False)
    webhook_response: Mapped[Any | None] = mapped_column(JSONB, nullable=True)
    headline: Mapped[str | None] = mapped_column(Text, nullable=True)
    conteudo: Mapped[str | None] = mapped_column(Text, nullable=True)
    cta: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", server_default=text("'pending'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
        onupdate=text("now()"),
    )
