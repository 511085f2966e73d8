"""
Showroom Projects Services Layer.

Services sit between HTTP/API and engines/models. They:
- Own DB access
- Own transactions
- Orchestrate engines
- Return DTOs, not Django HttpResponses

Services must NOT:
- Render templates or build HTTP responses
- Contain page decisions that belong in engines (classification, CTAs)
"""

from .capture_service import capture
from .leads_service import (
    get_lead_stats,
    infer_priority,
    list_project_leads,
    save_project_lead,
)
from .page_service import ProjectPageLoader, ProjectPageResult, load_project_page
from .projects_service import (
    get_all_projects,
    get_featured_projects,
    get_project,
    get_project_stats,
    get_projects_by_category,
    get_public_projects,
    increment_lead_count,
    search_projects,
)

__all__ = [
    "capture",
    "save_project_lead",
    "infer_priority",
    "list_project_leads",
    "get_lead_stats",
    "ProjectPageLoader",
    "ProjectPageResult",
    "load_project_page",
    "get_all_projects",
    "get_project",
    "get_public_projects",
    "get_featured_projects",
    "get_projects_by_category",
    "search_projects",
    "get_project_stats",
    "increment_lead_count",
]
