"""
Lead Capture Side-Channel.

Runs whenever a call-to-action on a project page is used. Two effects are
attempted in sequence, each independently:

1. Save an inquiry lead tagged with the project id, a fixed placeholder
   identity for the inquiry type and a fixed message.
2. Increment the project's lead_count.

Failures are caught, logged and reported through the injected Notifier.
Nothing is raised, retried, queued or deduplicated: two activations make two
leads and +2.

Both effects are keyed by project.id. Display names are not unique, so the
counter is never looked up by name.
"""

import logging

from django.db import DatabaseError

from showroom.core.enums import InquiryType
from showroom.projects.dto import CaptureResultDTO, ProjectDTO, ProjectLeadCreateDTO
from showroom.projects.observability import PageContext, create_page_context, log_page_event
from showroom.projects.routing import route_for

from . import leads_service, projects_service
from .notifications import Notifier

logger = logging.getLogger(__name__)


# Fixed identity recorded for each inquiry type: (name, email, message)
PLACEHOLDER_IDENTITIES: dict[InquiryType, tuple[str, str, str]] = {
    InquiryType.DEMO: (
        "Demo Request",
        "demo@placeholder.com",
        "Demo requested from the project page.",
    ),
    InquiryType.INVESTMENT: (
        "Investment Inquiry",
        "investment@placeholder.com",
        "Investment information requested from the project page.",
    ),
    InquiryType.PURCHASE: (
        "Purchase Inquiry",
        "purchase@placeholder.com",
        "License purchase requested from the project page.",
    ),
    InquiryType.CONTACT: (
        "Contact Request",
        "contact@placeholder.com",
        "Contact requested from the project page.",
    ),
    InquiryType.PARTNERSHIP: (
        "Partnership Inquiry",
        "partnership@placeholder.com",
        "Partnership discussion requested from the project page.",
    ),
}

SUCCESS_MESSAGES: dict[InquiryType, str] = {
    InquiryType.DEMO: (
        "Thank you for requesting a demo! "
        "We'll schedule a personalized demonstration for you."
    ),
    InquiryType.INVESTMENT: (
        "Thank you for your investment interest! "
        "We'll send you detailed financial information within 24 hours."
    ),
    InquiryType.PURCHASE: (
        "Thank you for your purchase inquiry! "
        "We'll provide pricing and licensing details soon."
    ),
    InquiryType.CONTACT: (
        "Thank you for reaching out! We'll get back to you shortly."
    ),
    InquiryType.PARTNERSHIP: (
        "Thank you for your partnership interest! "
        "We'll discuss collaboration opportunities with you."
    ),
}

SAVE_FAILED_MESSAGE = "Something went wrong. Please try again."
COUNT_FAILED_MESSAGE = "Your request was received, but we could not update the project."

_LOG_STATUS = {"captured": "success", "partial": "partial", "failed": "failure"}


def build_lead_record(project: ProjectDTO, inquiry_type: InquiryType) -> ProjectLeadCreateDTO:
    name, email, message = PLACEHOLDER_IDENTITIES[inquiry_type]
    return ProjectLeadCreateDTO(
        project_id=project.id,
        name=name,
        email=email,
        inquiry_type=inquiry_type,
        message=message,
        form_data={"project_name": project.name},
    )


def capture(
    project: ProjectDTO,
    inquiry_type: InquiryType,
    notifier: Notifier,
    ctx: PageContext | None = None,
) -> CaptureResultDTO:
    """
    Capture one call-to-action activation.

    Args:
        project: Project whose page the CTA was on
        inquiry_type: Handler bound to the CTA
        notifier: Channel for user-facing success/error messages
        ctx: Optional PageContext (created from the project route if omitted)

    Returns:
        CaptureResultDTO describing which effects succeeded
    """
    inquiry_type = InquiryType(inquiry_type)
    if ctx is None:
        ctx = create_page_context(route_for(project).lstrip("/"))

    log_fields = {"project_id": str(project.id), "inquiry_type": inquiry_type.value}
    log_page_event(ctx, "capture_lead", "start", extra=log_fields)

    lead_id = None
    lead_saved = False
    try:
        lead = leads_service.save_project_lead(build_lead_record(project, inquiry_type))
        lead_id = lead.id
        lead_saved = True
    except (leads_service.LeadsServiceError, DatabaseError) as e:
        logger.error("Lead capture failed for project %s: %s", project.id, e)

    count_incremented = False
    try:
        projects_service.increment_lead_count(project.id)
        count_incremented = True
    except (projects_service.ProjectsServiceError, DatabaseError) as e:
        logger.error("Lead count increment failed for project %s: %s", project.id, e)

    if lead_saved:
        notifier.success(SUCCESS_MESSAGES[inquiry_type])
    else:
        notifier.error(SAVE_FAILED_MESSAGE)
    if lead_saved and not count_incremented:
        notifier.error(COUNT_FAILED_MESSAGE)

    if lead_saved and count_incremented:
        status = "captured"
    elif lead_saved or count_incremented:
        status = "partial"
    else:
        status = "failed"

    log_page_event(
        ctx,
        "capture_lead",
        _LOG_STATUS[status],
        extra={
            **log_fields,
            "lead_saved": lead_saved,
            "lead_count_incremented": count_incremented,
        },
        error_summary=None if status == "captured" else f"capture_{status}",
    )

    return CaptureResultDTO(
        status=status,
        project_id=project.id,
        inquiry_type=inquiry_type,
        lead_id=lead_id,
        lead_saved=lead_saved,
        lead_count_incremented=count_incremented,
        notifications=list(notifier.notifications),
    )
