"""
Projects Service (Project Repository Accessor).

Fetches projects from the store and maps them to ProjectDTO. The JSON
content columns are parsed field by field. List columns keep their valid
items and drop the rest; a column whose stored shape is wrong altogether
(an object where a list belongs, or the reverse) is logged and treated as
absent. One malformed row never takes the page pipeline down.

Mutations here are limited to the lead counter.
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from django.db import DatabaseError
from django.db.models import F, Q
from django.utils import timezone
from pydantic import TypeAdapter, ValidationError

from showroom.core.models import Project
from showroom.projects.dto import (
    ContentDTO,
    FeatureDTO,
    ProjectDTO,
    ProjectStatsDTO,
    PurchaseInfoDTO,
    StatDTO,
    UseCaseDTO,
    valid_items,
)

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6
RECENT_WINDOW = timedelta(days=7)

_RECORD_ADAPTERS = {
    "content": TypeAdapter(ContentDTO),
    "purchase_info": TypeAdapter(PurchaseInfoDTO),
}

_ITEM_ADAPTERS = {
    "key_features": TypeAdapter(FeatureDTO),
    "stats": TypeAdapter(StatDTO),
    "use_cases": TypeAdapter(UseCaseDTO),
}


class ProjectsServiceError(Exception):
    """Base exception for projects service errors."""

    pass


class ProjectFetchError(ProjectsServiceError):
    """Raised when the project store cannot be read."""

    pass


class ProjectNotFoundError(ProjectsServiceError):
    """Raised when a project id does not exist."""

    pass


# =============================================================================
# MAPPING
# =============================================================================


def _as_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


def _parse_content_field(project: Project, field_name: str) -> Any:
    raw = getattr(project, field_name)
    if raw is None:
        return None

    if field_name in _ITEM_ADAPTERS:
        items = valid_items(
            _ITEM_ADAPTERS[field_name], raw, f"{field_name} on project {project.id}"
        )
        if items is None:
            logger.warning("Ignoring %s on project %s: not a list", field_name, project.id)
        return items

    try:
        return _RECORD_ADAPTERS[field_name].validate_python(raw)
    except ValidationError as e:
        logger.warning(
            "Ignoring malformed %s on project %s: %s",
            field_name,
            project.id,
            e.error_count(),
        )
        return None


def project_to_dto(project: Project) -> ProjectDTO:
    """
    Map a Project row to ProjectDTO.

    Raises:
        pydantic.ValidationError: If a scalar column (category, status) holds
            a value outside its enum
    """
    return ProjectDTO(
        id=project.id,
        name=project.name,
        description=project.description or "",
        category=project.category,
        status=project.status,
        hero_image_url=project.hero_image_url,
        demo_url=project.demo_url,
        route=project.route or None,
        price=_as_float(project.price),
        investment_amount=_as_float(project.investment_amount),
        investment_received=_as_float(project.investment_received),
        content=_parse_content_field(project, "content"),
        key_features=_parse_content_field(project, "key_features"),
        stats=_parse_content_field(project, "stats"),
        use_cases=_parse_content_field(project, "use_cases"),
        purchase_info=_parse_content_field(project, "purchase_info"),
        is_public=project.is_public,
        is_featured=project.is_featured,
        priority_order=project.priority_order,
        lead_count=project.lead_count,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def _to_dtos(queryset) -> list[ProjectDTO]:
    dtos = []
    for project in queryset:
        try:
            dtos.append(project_to_dto(project))
        except ValidationError as e:
            logger.warning(
                "Skipping project %s with invalid fields: %s",
                project.id,
                e.error_count(),
            )
    return dtos


# =============================================================================
# READS
# =============================================================================


def get_all_projects() -> list[ProjectDTO]:
    """
    Get every project, newest first.

    This is the resolver's candidate list; order decides route collisions.

    Raises:
        ProjectFetchError: If the store query fails
    """
    try:
        return _to_dtos(Project.objects.order_by("-created_at"))
    except DatabaseError as e:
        logger.error("Error fetching projects: %s", e)
        raise ProjectFetchError("Failed to fetch projects") from e


def get_project(project_id: UUID) -> ProjectDTO:
    """
    Get a project by ID.

    A row with an invalid category or status is unreadable, the same as in
    the list reads, and is reported as not found.

    Raises:
        ProjectNotFoundError: If project not found or unreadable
    """
    try:
        project = Project.objects.get(id=project_id)
    except Project.DoesNotExist:
        raise ProjectNotFoundError(f"Project {project_id} not found")

    try:
        return project_to_dto(project)
    except ValidationError as e:
        logger.warning(
            "Project %s has invalid fields: %s",
            project_id,
            e.error_count(),
        )
        raise ProjectNotFoundError(f"Project {project_id} not found") from e


def get_public_projects() -> list[ProjectDTO]:
    return _to_dtos(Project.objects.filter(is_public=True).order_by("-created_at"))


def get_featured_projects(limit: int = FEATURED_LIMIT) -> list[ProjectDTO]:
    queryset = Project.objects.filter(is_public=True, is_featured=True).order_by(
        "-created_at"
    )[:limit]
    return _to_dtos(queryset)


def get_projects_by_category(category: str) -> list[ProjectDTO]:
    queryset = Project.objects.filter(category=category, is_public=True).order_by(
        "-priority_order", "-created_at"
    )
    return _to_dtos(queryset)


def search_projects(query: str) -> list[ProjectDTO]:
    """Case-insensitive search over name and description of public projects."""
    queryset = Project.objects.filter(is_public=True).filter(
        Q(name__icontains=query) | Q(description__icontains=query)
    ).order_by("-created_at")
    return _to_dtos(queryset)


def get_project_stats() -> ProjectStatsDTO:
    """Catalog counters for the admin dashboard."""
    rows = list(Project.objects.values("category", "is_public", "is_featured", "created_at"))
    week_ago = timezone.now() - RECENT_WINDOW

    by_category: dict[str, int] = {}
    for row in rows:
        if row["category"]:
            by_category[row["category"]] = by_category.get(row["category"], 0) + 1

    return ProjectStatsDTO(
        total_projects=len(rows),
        public_projects=sum(1 for row in rows if row["is_public"]),
        featured_projects=sum(1 for row in rows if row["is_featured"]),
        private_projects=sum(1 for row in rows if not row["is_public"]),
        by_category=by_category,
        recent_projects=sum(1 for row in rows if row["created_at"] >= week_ago),
    )


# =============================================================================
# MUTATIONS
# =============================================================================


def increment_lead_count(project_id: UUID) -> None:
    """
    Add one to a project's lead_count.

    Keyed by id. The increment is applied in the store with an F()
    expression; there is no version check and nothing ever decrements.

    Raises:
        ProjectNotFoundError: If no project has this id
    """
    updated = Project.objects.filter(id=project_id).update(lead_count=F("lead_count") + 1)
    if not updated:
        raise ProjectNotFoundError(f"Project {project_id} not found")

    logger.info("Incremented lead count", extra={"project_id": str(project_id)})
