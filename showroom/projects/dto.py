"""
Showroom project page DTOs.

These Pydantic v2 BaseModels define:
- the typed view of a Project's loosely-typed JSON content
- the render plan handed to templates and SPA clients
- lead capture request/response shapes
- admin API request bodies

They serve as contracts - once defined, fields cannot be renamed or removed
without coordinating with the frontend.
"""

import logging
from datetime import datetime
from typing import Annotated, Any, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

# =============================================================================
# ENUMS - Single Source of Truth: showroom/core/enums.py
# =============================================================================
# Django TextChoices inherit from both str and Enum, so Pydantic v2 accepts
# them directly. Enum values never drift between DB and API.

from showroom.core.enums import (
    ContentShape,
    InquiryType,
    LeadPriority,
    LeadStatus,
    PageState,
    ProjectCategory,
    ProjectStatus,
)


# =============================================================================
# PROJECT CONTENT (typed view of the JSON columns)
# =============================================================================
# Every member of a content item is optional: the admin console stores these
# columns as free-form JSON, and an item with a missing member is still shown.

logger = logging.getLogger(__name__)


def valid_items(adapter: TypeAdapter, value: Any, label: str) -> list | None:
    """
    Validate a stored JSON list item by item.

    Items that fail validation are logged and dropped; the others are kept.
    Returns None if value is not a list at all.
    """
    if not isinstance(value, list):
        return None
    items = []
    for index, item in enumerate(value):
        try:
            items.append(adapter.validate_python(item))
        except ValidationError as e:
            logger.warning("Dropping malformed %s item %d: %s", label, index, e.error_count())
    return items


class ContentModel(BaseModel):
    """Base for content records stored as free-form JSON by the admin console."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


_TEXT_ITEM = TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))


class HighlightDTO(ContentModel):
    title: str = ""
    value: str = ""


_HIGHLIGHT_ITEM = TypeAdapter(HighlightDTO)


class ContentDTO(ContentModel):
    """
    Project.content: optional title, overview text and highlight pairs.

    A bad highlights list never costs the overview; it is reduced to its
    valid items.
    """
    title: str | None = None
    overview: str | None = None
    highlights: list[HighlightDTO] = Field(default_factory=list)

    @field_validator("highlights", mode="before")
    @classmethod
    def _keep_valid_highlights(cls, value: Any) -> list:
        return valid_items(_HIGHLIGHT_ITEM, value, "highlights") or []


class FeatureDTO(ContentModel):
    icon: str | None = None
    title: str = ""
    description: str = ""


class StatDTO(ContentModel):
    label: str = ""
    value: str = ""
    icon: str | None = None


class UseCaseDTO(ContentModel):
    icon: str | None = None
    title: str = ""
    description: str = ""
    examples: list[str] = Field(default_factory=list)

    @field_validator("examples", mode="before")
    @classmethod
    def _keep_valid_examples(cls, value: Any) -> list:
        return valid_items(_TEXT_ITEM, value, "use case examples") or []


class PurchaseInfoDTO(ContentModel):
    """
    Project.purchase_info: commercial details shown on investment and
    purchase panels. Amounts are display strings ("$250K" or "250000").
    """
    investment_amount: str | None = None
    market_size: str | None = None
    timeline: str | None = None
    projected_roi: str | None = None
    license_type: str | None = None
    includes: list[str] | None = None

    @field_validator("includes", mode="before")
    @classmethod
    def _keep_valid_includes(cls, value: Any) -> list | None:
        return valid_items(_TEXT_ITEM, value, "purchase includes")# =============================================================================
# PROJECT DTO
# =============================================================================


class ProjectDTO(BaseModel):
    """
    Project as read by the page pipeline.

    Each rich content member is None when absent at rest or when the stored
    JSON did not match its shape.
    """
    id: UUID
    name: str
    description: str = ""
    category: ProjectCategory
    status: ProjectStatus
    hero_image_url: str | None = None
    demo_url: str | None = None
    route: str | None = None
    price: float | None = None
    investment_amount: float | None = None
    investment_received: float | None = None
    content: ContentDTO | None = None
    key_features: list[FeatureDTO] | None = None
    stats: list[StatDTO] | None = None
    use_cases: list[UseCaseDTO] | None = None
    purchase_info: PurchaseInfoDTO | None = None
    is_public: bool = True
    is_featured: bool = False
    priority_order: int = 0
    lead_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectStatsDTO(BaseModel):
    """Catalog counters for the admin dashboard."""
    total_projects: int
    public_projects: int
    featured_projects: int
    private_projects: int
    by_category: dict[str, int] = Field(default_factory=dict)
    recent_projects: int = 0


# =============================================================================
# RENDER PLAN
# =============================================================================


class CtaDTO(BaseModel):
    """
    A labelled, iconed call-to-action bound to an inquiry handler.
    """
    text: str
    icon: str
    action: InquiryType


class HeroSectionDTO(BaseModel):
    kind: Literal["hero"] = "hero"
    title: str
    description: str = ""
    status: ProjectStatus
    category: ProjectCategory
    status_tone: str
    image_url: str | None = None
    primary_cta: CtaDTO
    secondary_cta: CtaDTO


class OverviewSectionDTO(BaseModel):
    kind: Literal["overview"] = "overview"
    title: str
    overview: str
    highlights: list[HighlightDTO] = Field(default_factory=list)


class FeatureGridSectionDTO(BaseModel):
    kind: Literal["features"] = "features"
    title: str = "Key Features"
    features: list[FeatureDTO]


class UseCaseGridSectionDTO(BaseModel):
    kind: Literal["use_cases"] = "use_cases"
    title: str = "Use Cases"
    use_cases: list[UseCaseDTO]


class InvestmentMetricDTO(BaseModel):
    label: str
    value: str
    icon: str


class InvestmentSectionDTO(BaseModel):
    """
    Investment panel. Numbers are display-only; nothing is written back.
    """
    kind: Literal["investment"] = "investment"
    title: str = "Investment Opportunity"
    description: str = "Join us in revolutionizing the industry with strategic investment."
    seeking: str
    investment_amount: float = 0
    investment_received: float = 0
    funding_progress: float | None = None
    metrics: list[InvestmentMetricDTO] = Field(default_factory=list)
    cta: CtaDTO


class PricingDTO(BaseModel):
    amount: float
    currency: str = "$"
    period: str


class PurchaseSectionDTO(BaseModel):
    kind: Literal["purchase"] = "purchase"
    title: str = "Get Started Today"
    description: str = "Complete platform with everything you need to get started."
    pricing: PricingDTO
    includes: list[str]
    features: list[str] = Field(default_factory=list)
    cta: CtaDTO


class StatsSectionDTO(BaseModel):
    kind: Literal["stats"] = "stats"
    title: str | None = None
    stats: list[StatDTO]


class DetailsSectionDTO(BaseModel):
    """Fallback details card."""
    kind: Literal["details"] = "details"
    title: str = "Project Details"
    category: ProjectCategory
    status: ProjectStatus
    status_tone: str
    investment_amount: float | None = None
    price: float | None = None


SectionDTO = Annotated[
    Union[
        HeroSectionDTO,
        OverviewSectionDTO,
        FeatureGridSectionDTO,
        UseCaseGridSectionDTO,
        InvestmentSectionDTO,
        PurchaseSectionDTO,
        StatsSectionDTO,
        DetailsSectionDTO,
    ],
    Field(discriminator="kind"),
]


class RenderPlanDTO(BaseModel):
    """
    Everything a view needs to render one project page.

    sections are in display order. actions is only used by the fallback
    template (fixed Contact Us / Request Demo buttons).
    """
    template: ContentShape
    project_id: UUID
    project_name: str
    route: str
    primary_cta: CtaDTO
    secondary_cta: CtaDTO
    sections: list[SectionDTO] = Field(default_factory=list)
    actions: list[CtaDTO] = Field(default_factory=list)

    def section_kinds(self) -> list[str]:
        return [section.kind for section in self.sections]

    def get_section(self, kind: str):
        for section in self.sections:
            if section.kind == kind:
                return section
        return None


class ProjectPageResponseDTO(BaseModel):
    """
    Response for GET /api/pages/{path_segment}.
    """
    state: PageState
    reason: str | None = None
    project: ProjectDTO | None = None
    plan: RenderPlanDTO | None = None


# =============================================================================
# LEAD DTOs
# =============================================================================


class ProjectLeadCreateDTO(BaseModel):
    """
    Record handed to the lead store for a project inquiry.
    """
    project_id: UUID | None = None
    name: str
    email: str
    inquiry_type: InquiryType
    message: str | None = None
    company: str | None = None
    phone: str | None = None
    investment_amount: float | None = None
    form_data: dict[str, Any] = Field(default_factory=dict)


class ProjectLeadDTO(BaseModel):
    """
    Project lead as seen by the CRM.
    """
    id: UUID
    project_id: UUID | None = None
    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    inquiry_type: InquiryType | None = None
    message: str | None = None
    status: LeadStatus
    priority: LeadPriority
    investment_amount: float | None = None
    form_data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class LeadStatsDTO(BaseModel):
    total_leads: int
    by_status: dict[str, int] = Field(default_factory=dict)
    by_inquiry_type: dict[str, int] = Field(default_factory=dict)


class NotificationDTO(BaseModel):
    """User-facing notification (toast/banner)."""
    level: Literal["success", "error"]
    message: str


class CaptureRequestDTO(BaseModel):
    """
    Request body for POST /api/projects/{project_id}/inquiries.
    """
    inquiry_type: InquiryType


class CaptureResultDTO(BaseModel):
    """
    Outcome of one call-to-action capture.

    status:
    - captured: lead saved and lead_count incremented
    - partial: exactly one of the two effects succeeded
    - failed: neither effect succeeded
    """
    status: Literal["captured", "partial", "failed"]
    project_id: UUID
    inquiry_type: InquiryType
    lead_id: UUID | None = None
    lead_saved: bool = False
    lead_count_incremented: bool = False
    notifications: list[NotificationDTO] = Field(default_factory=list)


# =============================================================================
# ADMIN API DTOs
# =============================================================================


class ProjectWriteDTO(BaseModel):
    """
    Request body for POST /api/admin/projects and PATCH /api/admin/projects/{id}.

    PATCH applies only the fields present in the body.
    """
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    category: ProjectCategory | None = None
    status: ProjectStatus | None = None
    hero_image_url: str | None = None
    demo_url: str | None = None
    route: str | None = None
    price: float | None = Field(default=None, ge=0)
    investment_amount: float | None = Field(default=None, ge=0)
    investment_received: float | None = Field(default=None, ge=0)
    content: dict[str, Any] | None = None
    key_features: list[dict[str, Any]] | None = None
    stats: list[dict[str, Any]] | None = None
    use_cases: list[dict[str, Any]] | None = None
    purchase_info: dict[str, Any] | None = None
    is_public: bool | None = None
    is_featured: bool | None = None
    priority_order: int | None = None
