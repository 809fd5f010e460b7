from __future__ import annotations

from enum import StrEnum


class EventKind(StrEnum):
    """Every frame type that travels over the realtime channel."""

    REGISTER = "register"
    PING = "ping"
    PONG = "pong"
    ART_CREATED = "art-created"
    ART_ARCHIVED = "art-archived"
    ART_UNARCHIVED = "art-unarchived"
    COMPANY_UPDATED = "company-updated"
    TEMPLATE_CREATED = "template-created"
    AI_CONTENT_COMPLETED = "ai-content-completed"


# Entity events that the server pushes after a mutation.
ENTITY_EVENTS = frozenset(
    {
        EventKind.ART_CREATED,
        EventKind.ART_ARCHIVED,
        EventKind.ART_UNARCHIVED,
        EventKind.COMPANY_UPDATED,
        EventKind.TEMPLATE_CREATED,
        EventKind.AI_CONTENT_COMPLETED,
    }
)

# Catalog data shared by every tenant; never scoped to a company.
GLOBAL_EVENTS = frozenset({EventKind.TEMPLATE_CREATED})


class UserKind(StrEnum):
    USER = "usuario"
    ADMIN = "admin"


class MembershipRole(StrEnum):
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class MembershipStatus(StrEnum):
    PENDING = "pendente"
    ACCEPTED = "aceito"
    REJECTED = "rejeitado"


class PostType(StrEnum):
    FEED = "feed"
    STORY = "story"
    REELS = "reels"
    CAROUSEL = "carousel"
    CALENDAR = "calendar"


class VoiceTone(StrEnum):
    PROFESSIONAL = "profissional"
    CASUAL = "casual"
    FUN = "divertido"
    INSPIRING = "inspirador"
    EDUCATIONAL = "educativo"


class AiContentStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class SuggestionType(StrEnum):
    COLOR = "color"
    LAYOUT = "layout"
    CONTENT = "content"
    BRANDING = "branding"
