"""
Template Selector & Composer.

Turns a classified ProjectDTO into a RenderPlanDTO:
- CTA pairing derived from category/status only
- Rich template: fixed section order, each optional section present only
  when its data is
- Fallback template: minimal hero, details card, fixed actions

Pure: no DB access, no side effects. Handlers are referenced by InquiryType;
the views bind them to the capture side-channel.
"""

from showroom.core.enums import (
    ContentShape,
    InquiryType,
    ProjectCategory,
    ProjectStatus,
)
from showroom.projects.dto import (
    CtaDTO,
    DetailsSectionDTO,
    FeatureGridSectionDTO,
    HeroSectionDTO,
    InvestmentMetricDTO,
    InvestmentSectionDTO,
    OverviewSectionDTO,
    PricingDTO,
    ProjectDTO,
    PurchaseSectionDTO,
    RenderPlanDTO,
    StatsSectionDTO,
    UseCaseGridSectionDTO,
)
from showroom.projects.formatting import format_amount
from showroom.projects.routing import route_for

from .classifier import has_key_features, has_overview, has_stats, has_use_cases


# =============================================================================
# CONSTANTS
# =============================================================================

SEEKING_FALLBACK = "Contact for details"
DEFAULT_LICENSE_PERIOD = "Full License"
DEFAULT_INCLUDES = ["Source code", "Documentation", "Support"]

# Badge colour per status, consumed by the templates as a CSS modifier
STATUS_TONES = {
    ProjectStatus.LIVE: "success",
    ProjectStatus.MVP: "info",
    ProjectStatus.BETA: "warning",
    ProjectStatus.PRIVATE: "muted",
    ProjectStatus.FOR_SALE: "accent",
    ProjectStatus.CONCEPT: "subtle",
}

FALLBACK_ACTIONS = [
    CtaDTO(text="Contact Us", icon="mail", action=InquiryType.CONTACT),
    CtaDTO(text="Request Demo", icon="play", action=InquiryType.DEMO),
]


# =============================================================================
# CTA DERIVATION
# =============================================================================


def is_for_sale(project: ProjectDTO) -> bool:
    return (
        project.category == ProjectCategory.FOR_SALE
        or project.status == ProjectStatus.FOR_SALE
    )


def derive_ctas(project: ProjectDTO) -> tuple[CtaDTO, CtaDTO]:
    """
    Derive the (primary, secondary) CTA pair for a project.

    For Sale (category or status) wins over Investment.
    """
    if is_for_sale(project):
        return (
            CtaDTO(text="Purchase License", icon="shopping-cart", action=InquiryType.PURCHASE),
            CtaDTO(text="Request Demo", icon="play", action=InquiryType.DEMO),
        )
    if project.category == ProjectCategory.INVESTMENT:
        return (
            CtaDTO(text="View Demo", icon="eye", action=InquiryType.DEMO),
            CtaDTO(text="Investment Info", icon="trending-up", action=InquiryType.INVESTMENT),
        )
    return (
        CtaDTO(text="Learn More", icon="arrow-right", action=InquiryType.CONTACT),
        CtaDTO(text="Contact Us", icon="mail", action=InquiryType.CONTACT),
    )


# =============================================================================
# SECTION BUILDERS
# =============================================================================


def _hero(project: ProjectDTO, primary: CtaDTO, secondary: CtaDTO) -> HeroSectionDTO:
    return HeroSectionDTO(
        title=project.name,
        description=project.description,
        status=project.status,
        category=project.category,
        status_tone=STATUS_TONES.get(project.status, "subtle"),
        image_url=project.hero_image_url,
        primary_cta=primary,
        secondary_cta=secondary,
    )


def _overview(project: ProjectDTO) -> OverviewSectionDTO:
    content = project.content
    return OverviewSectionDTO(
        title=content.title or f"About {project.name}",
        overview=content.overview,
        highlights=content.highlights,
    )


def _seeking(project: ProjectDTO) -> str:
    purchase_info = project.purchase_info
    if purchase_info is not None and purchase_info.investment_amount:
        return purchase_info.investment_amount
    if project.investment_amount:
        return format_amount(project.investment_amount)
    return SEEKING_FALLBACK


def _investment(project: ProjectDTO) -> InvestmentSectionDTO:
    investment_amount = project.investment_amount or 0
    investment_received = project.investment_received or 0

    funding_progress = None
    if investment_amount > 0 and investment_received > 0:
        funding_progress = round(min(investment_received / investment_amount, 1.0) * 100, 1)

    metrics = [
        InvestmentMetricDTO(label="Seeking", value=_seeking(project), icon="dollar-sign"),
        InvestmentMetricDTO(label="Stage", value=project.status.value, icon="target"),
    ]
    purchase_info = project.purchase_info
    if purchase_info is not None:
        if purchase_info.timeline:
            metrics.append(
                InvestmentMetricDTO(label="Timeline", value=purchase_info.timeline, icon="calendar")
            )
        if purchase_info.projected_roi:
            metrics.append(
                InvestmentMetricDTO(
                    label="Expected ROI", value=purchase_info.projected_roi, icon="trending-up"
                )
            )
        if purchase_info.market_size:
            metrics.append(
                InvestmentMetricDTO(label="Market Size", value=purchase_info.market_size, icon="target")
            )

    return InvestmentSectionDTO(
        seeking=_seeking(project),
        investment_amount=investment_amount,
        investment_received=investment_received,
        funding_progress=funding_progress,
        metrics=metrics,
        cta=CtaDTO(
            text="Request Investment Details",
            icon="trending-up",
            action=InquiryType.INVESTMENT,
        ),
    )


def _purchase(project: ProjectDTO) -> PurchaseSectionDTO:
    purchase_info = project.purchase_info
    period = DEFAULT_LICENSE_PERIOD
    includes = list(DEFAULT_INCLUDES)
    if purchase_info is not None:
        if purchase_info.license_type:
            period = purchase_info.license_type
        if purchase_info.includes:
            includes = purchase_info.includes

    features = []
    if has_key_features(project):
        features = [feature.title for feature in project.key_features if feature.title]

    return PurchaseSectionDTO(
        pricing=PricingDTO(amount=project.price, period=period),
        includes=includes,
        features=features,
        cta=CtaDTO(text="Purchase Now", icon="dollar-sign", action=InquiryType.PURCHASE),
    )


# =============================================================================
# COMPOSE
# =============================================================================


def _compose_rich(project: ProjectDTO, primary: CtaDTO, secondary: CtaDTO) -> list:
    sections = [_hero(project, primary, secondary)]

    if has_overview(project):
        sections.append(_overview(project))
    if has_key_features(project):
        sections.append(FeatureGridSectionDTO(features=project.key_features))
    if has_use_cases(project):
        sections.append(UseCaseGridSectionDTO(use_cases=project.use_cases))
    if project.category == ProjectCategory.INVESTMENT:
        sections.append(_investment(project))
    if is_for_sale(project) and project.price is not None:
        sections.append(_purchase(project))
    if has_stats(project):
        sections.append(StatsSectionDTO(title="By the Numbers", stats=project.stats))

    return sections


def _compose_fallback(project: ProjectDTO, primary: CtaDTO, secondary: CtaDTO) -> list:
    return [
        _hero(project, primary, secondary),
        DetailsSectionDTO(
            category=project.category,
            status=project.status,
            status_tone=STATUS_TONES.get(project.status, "subtle"),
            investment_amount=project.investment_amount,
            price=project.price,
        ),
    ]


def compose(project: ProjectDTO, shape: ContentShape) -> RenderPlanDTO:
    """
    Build the render plan for a project.

    Args:
        project: Resolved ProjectDTO
        shape: Result of classify(project)

    Returns:
        RenderPlanDTO with sections in display order
    """
    primary, secondary = derive_ctas(project)

    if shape == ContentShape.RICH:
        sections = _compose_rich(project, primary, secondary)
        actions = []
    else:
        sections = _compose_fallback(project, primary, secondary)
        actions = list(FALLBACK_ACTIONS)

    return RenderPlanDTO(
        template=shape,
        project_id=project.id,
        project_name=project.name,
        route=route_for(project),
        primary_cta=primary,
        secondary_cta=secondary,
        sections=sections,
        actions=actions,
    )
