from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NewArtDTO:
    empresa_id: int
    link: str | None = None
    width: int | None = None
    height: int | None = None
    texto_apoio: str = ""
