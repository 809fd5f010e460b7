from __future__ import annotations

from artes_service.domain.entities.company import Company
from artes_service.domain.entities.membership import Membership
from artes_service.infrastructure.db.models.company import CompanyModel, MembershipModel


def model_to_entity(model: CompanyModel) -> Company:
    return Company(
        id=model.id,
        nome=model.nome,
        admin_user_id=model.admin,
        created_at=model.created_at,
        slug=model.slug,
        cores=dict(model.cores or {}),
        logo=model.logo,
        logo_formato=model.logo_formato,
        whatsapp=model.whatsapp,
        telefone=model.telefone,
        email=model.email,
        endereco=model.endereco,
        instagram=model.instagram,
        facebook=model.facebook,
        website=model.website,
        empresa_segmento=model.empresa_segmento,
        ativo=bool(model.ativo),
        rodape=model.rodape,
        hashtag=model.hashtag,
    )


def membership_to_entity(model: MembershipModel) -> Membership:
    return Membership(
        user_id=model.user_id,
        empresa_id=model.empresa_id,
        role=model.role,
        status=model.status,
        ativo=bool(model.ativo),
    )
