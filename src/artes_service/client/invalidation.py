"""Event kind → client cache keys that must be refetched."""
from __future__ import annotations

from artes_service.domain.value_objects.enums import EventKind

ARTS_ACTIVE = "/api/arts/by-company"
ARTS_ARCHIVED = "/api/arts/archived"
COMPANIES = "/api/companies"
TEMPLATES = "/api/templates"
AI_CONTENT = "/api/ai-content"

INVALIDATIONS: dict[EventKind, tuple[str, ...]] = {
    EventKind.ART_CREATED: (ARTS_ACTIVE,),
    EventKind.ART_ARCHIVED: (ARTS_ACTIVE, ARTS_ARCHIVED),
    EventKind.ART_UNARCHIVED: (ARTS_ACTIVE, ARTS_ARCHIVED),
    EventKind.COMPANY_UPDATED: (COMPANIES,),
    EventKind.TEMPLATE_CREATED: (TEMPLATES,),
    EventKind.AI_CONTENT_COMPLETED: (AI_CONTENT,),
}


def keys_for(event_type: str) -> tuple[str, ...]:
    """Cache keys for a frame type; empty for control frames and unknown types."""
    try:
        kind = EventKind(event_type)
    except ValueError:
        return ()
    return INVALIDATIONS.get(kind, ())
