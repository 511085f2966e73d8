"""
Leads Service (Lead Store).

Persists project inquiries into the leads table and reads them back for the
CRM views. Project inquiries are stored with source=contact, status=new and
a form_data envelope of type "project_inquiry".

Priority is not stored; it is inferred on read from the inquiry type and the
investment amount.
"""

import logging

from django.db import DatabaseError, transaction

from showroom.core.enums import InquiryType, LeadPriority, LeadSource, LeadStatus
from showroom.core.models import Lead
from showroom.projects.dto import (
    LeadStatsDTO,
    ProjectLeadCreateDTO,
    ProjectLeadDTO,
)

logger = logging.getLogger(__name__)

PROJECT_INQUIRY_TYPE = "project_inquiry"
URGENT_INVESTMENT_THRESHOLD = 1_000_000


class LeadsServiceError(Exception):
    """Base exception for leads service errors."""

    pass


class LeadSaveError(LeadsServiceError):
    """Raised when a lead cannot be persisted."""

    pass


def infer_priority(
    inquiry_type: str | None, investment_amount: float | None = None
) -> LeadPriority:
    """
    Infer follow-up priority for a project lead.

    - investment above 1,000,000: urgent
    - any other investment: high
    - purchase: medium
    - everything else: low
    """
    if inquiry_type == InquiryType.INVESTMENT:
        if investment_amount and investment_amount > URGENT_INVESTMENT_THRESHOLD:
            return LeadPriority.URGENT
        return LeadPriority.HIGH
    if inquiry_type == InquiryType.PURCHASE:
        return LeadPriority.MEDIUM
    return LeadPriority.LOW


def lead_to_dto(lead: Lead) -> ProjectLeadDTO:
    form_data = lead.form_data or {}
    inquiry_type = lead.inquiry_type or form_data.get("inquiry_type")
    investment_amount = form_data.get("investment_amount")
    return ProjectLeadDTO(
        id=lead.id,
        project_id=lead.project_id,
        name=lead.name,
        email=lead.email,
        company=lead.company,
        phone=lead.phone,
        inquiry_type=inquiry_type,
        message=lead.message if lead.message is not None else form_data.get("message"),
        status=lead.status,
        priority=infer_priority(inquiry_type, investment_amount),
        investment_amount=investment_amount,
        form_data=form_data,
        created_at=lead.created_at,
    )


def save_project_lead(record: ProjectLeadCreateDTO) -> ProjectLeadDTO:
    """
    Persist a project inquiry.

    Args:
        record: ProjectLeadCreateDTO built by the capture side-channel or a form

    Returns:
        ProjectLeadDTO of the stored lead

    Raises:
        LeadSaveError: If the store rejects the insert
    """
    form_data = {
        **record.form_data,
        "type": PROJECT_INQUIRY_TYPE,
        "inquiry_type": record.inquiry_type.value,
        "message": record.message,
    }
    if record.investment_amount is not None:
        form_data["investment_amount"] = record.investment_amount

    try:
        with transaction.atomic():
            lead = Lead.objects.create(
                project_id=record.project_id,
                name=record.name,
                email=record.email,
                company=record.company,
                phone=record.phone,
                inquiry_type=record.inquiry_type,
                message=record.message,
                source=LeadSource.CONTACT,
                status=LeadStatus.NEW,
                form_data=form_data,
            )
    except DatabaseError as e:
        logger.error("Error saving project lead: %s", e)
        raise LeadSaveError("Failed to save project inquiry") from e

    logger.info(
        "Saved project lead",
        extra={
            "lead_id": str(lead.id),
            "project_id": str(record.project_id),
            "inquiry_type": record.inquiry_type.value,
        },
    )
    return lead_to_dto(lead)


def list_project_leads() -> list[ProjectLeadDTO]:
    """All project inquiries, newest first."""
    leads = Lead.objects.filter(form_data__type=PROJECT_INQUIRY_TYPE).order_by("-created_at")
    return [lead_to_dto(lead) for lead in leads]


def get_lead_stats() -> LeadStatsDTO:
    by_status: dict[str, int] = {}
    by_inquiry_type: dict[str, int] = {}
    total = 0
    for status, inquiry_type in Lead.objects.values_list("status", "inquiry_type"):
        total += 1
        by_status[status] = by_status.get(status, 0) + 1
        if inquiry_type:
            by_inquiry_type[inquiry_type] = by_inquiry_type.get(inquiry_type, 0) + 1

    return LeadStatsDTO(
        total_leads=total,
        by_status=by_status,
        by_inquiry_type=by_inquiry_type,
    )
