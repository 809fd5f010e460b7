from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, ForeignKey, Identity, Index, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from artes_service.infrastructure.db.base import Base


class ArtModel(Base):
    __tablename__ = "Artes"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    link: Mapped[str | None] = mapped_column(Text, nullable=True)
    width: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    height: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    empresa: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("Empresas.id", ondelete="CASCADE"),
        nullable=False,
    )
    arquivada: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false"),
    )
    texto_apoio: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default=text("''"))

    __table_args__ = (
        Index("ix_artes_empresa_arquivada", "empresa", "arquivada", created_at.desc()),
    )
