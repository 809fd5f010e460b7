"""Rule-based design suggestions for a company, optionally for a template.

Deterministic: the same company and template always produce the same
suggestions. Nothing is generated by a model; palettes and copy come from
per-segment tables below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from artes_service.application.dto.principal import Principal
from artes_service.application.exceptions import NotFoundError
from artes_service.application.policies.permissions import assert_company_access
from artes_service.application.uow import UnitOfWork
from artes_service.domain.entities.company import Company
from artes_service.domain.entities.template import Template
from artes_service.domain.value_objects.enums import SuggestionType

DEFAULT_SEGMENT = 12
DEFAULT_TEMPLATE_SIZE = 1080

SEGMENT_NAMES: dict[int, str] = {
    6: "Auto Escola",
    7: "Saúde",
    8: "Educação",
    9: "Tecnologia",
    10: "Alimentação",
    11: "Beleza",
    12: "Outros",
}

SEGMENT_PALETTES: dict[int, dict[str, str]] = {
    6: {
        "primary": "#1E40AF",
        "secondary": "#3B82F6",
        "accent": "#FCD34D",
        "background": "#F8FAFC",
    },
    12: {
        "primary": "#1A73E8",
        "secondary": "#34A853",
        "accent": "#FBBC05",
        "background": "#FFFFFF",
    },
}

SEGMENT_TRENDS: dict[int, list[str]] = {
    6: ["Cores confiáveis", "Tipografia limpa", "Ícones de segurança"],
    7: ["Cores suaves", "Espaçamento amplo", "Imagens profissionais"],
    8: ["Cores vibrantes", "Layouts dinâmicos", "Elementos interativos"],
    9: ["Gradientes modernos", "Minimalismo", "Tipografia sans-serif"],
    10: ["Cores apetitosas", "Imagens de alta qualidade", "Layouts atrativos"],
    11: ["Cores elegantes", "Tipografia refinada", "Layouts sofisticados"],
}
DEFAULT_TRENDS = ["Design profissional", "Cores equilibradas", "Layout limpo"]


@dataclass(frozen=True, slots=True)
class DesignSuggestion:
    type: SuggestionType
    title: str
    description: str
    data: dict[str, Any]
    confidence: int
    reasoning: str


def segment_name(segment_id: int | None) -> str:
    return SEGMENT_NAMES.get(segment_id or DEFAULT_SEGMENT, "Serviços")


def segment_palette(segment_id: int | None) -> dict[str, str]:
    return SEGMENT_PALETTES.get(segment_id or DEFAULT_SEGMENT, SEGMENT_PALETTES[DEFAULT_SEGMENT])


def segment_trends(segment_id: int | None) -> list[str]:
    return list(SEGMENT_TRENDS.get(segment_id or DEFAULT_SEGMENT, DEFAULT_TRENDS))


def color_suggestion(company: Company) -> DesignSuggestion:
    name = segment_name(company.empresa_segmento)
    palette = segment_palette(company.empresa_segmento)
    return DesignSuggestion(
        type=SuggestionType.COLOR,
        title="Paleta de Cores Otimizada",
        description=(
            "Sugestão de cores baseada na identidade da sua empresa "
            "e melhores práticas de design"
        ),
        data={
            **palette,
            "reasoning": (
                "Cores selecionadas para maximizar o impacto visual "
                f"e transmitir confiança no setor {name}"
            ),
        },
        confidence=88,
        reasoning=(
            "Baseado na análise do seu setor e nas tendências atuais de design, "
            f"essas cores irão melhorar o reconhecimento da marca em {name}"
        ),
    )


def content_suggestion(company: Company) -> DesignSuggestion:
    name = segment_name(company.empresa_segmento)
    nome = company.nome
    return DesignSuggestion(
        type=SuggestionType.CONTENT,
        title="Conteúdo Personalizado",
        description="Sugestões de textos otimizados para sua empresa e público-alvo",
        data={
            "headlines": [
                f"{nome} - Líder em {name}",
                f"Qualidade e Confiança em {name}",
                f"Sua melhor escolha em {name}",
                f"{nome}: Excelência que você merece",
            ],
            "callToActions": [
                "Agende sua consulta",
                "Fale conosco hoje",
                "Solicite um orçamento",
                "Entre em contato",
                "Saiba mais",
            ],
            "descriptions": [
                f"Com anos de experiência em {name}, oferecemos soluções "
                "personalizadas para suas necessidades.",
                f"{nome} é sinônimo de qualidade e confiança no mercado de {name}.",
                f"Descubra por que somos a escolha preferida em {name}.",
            ],
            "reasoning": (
                f"Textos criados especificamente para o setor de {name}, "
                "focando em conversão e engajamento"
            ),
        },
        confidence=85,
        reasoning=(
            f"Baseado na análise do seu setor {name} "
            "e nas melhores práticas de marketing digital"
        ),
    )


def branding_suggestion(company: Company) -> DesignSuggestion:
    name = segment_name(company.empresa_segmento)
    return DesignSuggestion(
        type=SuggestionType.BRANDING,
        title="Elementos de Marca",
        description="Sugestões para fortalecer a identidade visual da sua empresa",
        data={
            "logoPlacement": "Posicione o logo no canto superior esquerdo para máxima visibilidade",
            "brandElements": [
                "Use consistentemente as cores da marca em todos os elementos",
                "Mantenha um espaçamento adequado ao redor do logo",
                "Aplique a tipografia da marca nos títulos principais",
            ],
            "typography": (
                "Use fontes legíveis e profissionais que reflitam "
                "a seriedade do seu negócio"
            ),
            "mood": f"Transmita confiança e profissionalismo adequados ao setor de {name}",
            "trends": segment_trends(company.empresa_segmento),
            "reasoning": (
                f"Elementos selecionados para reforçar a credibilidade no mercado de {name}"
            ),
        },
        confidence=90,
        reasoning=f"Baseado nas melhores práticas de branding para empresas de {name}",
    )


def layout_suggestion(template: Template) -> DesignSuggestion:
    width = template.width or DEFAULT_TEMPLATE_SIZE
    height = template.height or DEFAULT_TEMPLATE_SIZE
    aspect_ratio = width / height

    if aspect_ratio > 1.5:
        composition = "Layout horizontal com divisão em seções"
        hierarchy = ["Logo à esquerda", "Conteúdo principal no centro", "CTA à direita"]
    elif aspect_ratio < 0.8:
        composition = "Layout vertical com hierarquia clara"
        hierarchy = ["Logo no topo", "Título principal", "Conteúdo", "CTA na base"]
    else:
        composition = "Composição equilibrada"
        hierarchy = ["Logo/Marca", "Título principal", "Descrição", "Call to Action"]

    return DesignSuggestion(
        type=SuggestionType.LAYOUT,
        title="Composição Otimizada",
        description="Sugestões de layout para maximizar o impacto visual",
        data={
            "composition": composition,
            "hierarchy": hierarchy,
            "spacing": "Use espaçamento generoso entre elementos para melhor legibilidade",
            "alignment": "Alinhe elementos importantes à esquerda para facilitar a leitura",
            "reasoning": f"Layout otimizado para formato {width}x{height} pixels",
        },
        confidence=87,
        reasoning="Baseado nas dimensões do template e princípios de design visual",
    )


def generate_suggestions(
    company: Company,
    template: Template | None = None,
) -> list[DesignSuggestion]:
    suggestions = [
        color_suggestion(company),
        content_suggestion(company),
        branding_suggestion(company),
    ]
    if template is not None:
        suggestions.append(layout_suggestion(template))
    return suggestions


async def suggest_for_company(
    empresa_id: int,
    template_id: int | None,
    principal: Principal,
    uow: UnitOfWork,
) -> list[DesignSuggestion]:
    company = await assert_company_access(principal, empresa_id, uow.companies, uow.memberships)
    template = None
    if template_id is not None:
        template = await uow.templates.get_by_id(template_id)
        if template is None:
            raise NotFoundError("Template not found")
    return generate_suggestions(company, template)
