from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NewTemplateDTO:
    name: str
    template_id: str | None = None
    width: int | None = None
    height: int | None = None
    image: str | None = None
    empresa_segmento: int | None = None
    logo_formato: str | None = None
    texto_apoio: str = ""
