from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, Identity, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from artes_service.infrastructure.db.base import Base


class TemplateModel(Base):
    __tablename__ = "Templates"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    template_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    width: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    height: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    empresa_segmento: Mapped[int | None] = mapped_column(BigInteger, nullable=True, index=True)
    logo_formato: Mapped[str | None] = mapped_column(Text, nullable=True)
    texto_apoio: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default=text("''"))
