"""Import all models so Base.metadata sees every table."""
from artes_service.infrastructure.db.models.ai_content import AiContentGenerationModel
from artes_service.infrastructure.db.models.art import ArtModel
from artes_service.infrastructure.db.models.company import CompanyModel, MembershipModel
from artes_service.infrastructure.db.models.template import TemplateModel

__all__ = [
    "AiContentGenerationModel",
    "ArtModel",
    "CompanyModel",
    "MembershipModel",
    "TemplateModel",
]
