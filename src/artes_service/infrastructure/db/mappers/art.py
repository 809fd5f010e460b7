from __future__ import annotations

from artes_service.domain.entities.art import Art
from artes_service.infrastructure.db.models.art import ArtModel


def model_to_entity(model: ArtModel) -> Art:
    return Art(
        id=model.id,
        empresa_id=model.empresa,
        link=model.link,
        width=model.width,
        height=model.height,
        arquivada=bool(model.arquivada),
        texto_apoio=model.texto_apoio or "",
        created_at=model.created_at,
    )
