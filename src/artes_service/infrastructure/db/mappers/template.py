from __future__ import annotations

from artes_service.domain.entities.template import Template
from artes_service.infrastructure.db.models.template import TemplateModel


def model_to_entity(model: TemplateModel) -> Template:
    return Template(
        id=model.id,
        name=model.name,
        template_id=model.template_id,
        width=model.width,
        height=model.height,
        image=model.image,
        empresa_segmento=model.empresa_segmento,
        logo_formato=model.logo_formato,
        texto_apoio=model.texto_apoio or "",
        created_at=model.created_at,
    )
