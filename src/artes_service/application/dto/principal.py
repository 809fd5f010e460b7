from __future__ import annotations

from dataclasses import dataclass, field

from artes_service.domain.value_objects.enums import UserKind


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller identity extracted from JWT."""

    user_id: str
    kind: UserKind = UserKind.USER
    roles: list[str] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return self.kind == UserKind.ADMIN or "admin" in self.roles
