from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Membership:
    user_id: str
    empresa_id: int
    role: str
    status: str
    ativo: bool = True
