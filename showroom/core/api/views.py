"""
Core API Views: catalog and admin console.

Implements:
- GET /api/projects - public catalog (?category=, ?featured=1, ?q=)
- GET/POST /api/admin/projects - list all and create projects
- GET/PATCH/DELETE /api/admin/projects/:project_id - project detail
- GET /api/admin/projects/stats - catalog counters
- GET /api/admin/leads - project inquiries
- GET /api/admin/leads/stats - lead counters

/api/admin/ is guarded by SupabaseAuthMiddleware.
"""

from __future__ import annotations

import json
from decimal import Decimal
from uuid import UUID

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from pydantic import ValidationError

from showroom.core.models import Project
from showroom.projects.dto import ProjectWriteDTO
from showroom.projects.routing import derive_route, is_reserved, normalize_route
from showroom.projects.services import leads_service, projects_service

DECIMAL_FIELDS = ("price", "investment_amount", "investment_received")

# Columns without NULL; an explicit null in the body leaves them untouched
NON_NULL_FIELDS = (
    "name",
    "description",
    "category",
    "status",
    "is_public",
    "is_featured",
    "priority_order",
)


# =============================================================================
# HELPERS
# =============================================================================


def _parse_uuid(value: str) -> UUID | None:
    """Parse a string to UUID, returning None on failure."""
    try:
        return UUID(value)
    except (ValueError, TypeError):
        return None


def _dump(dto) -> dict:
    return dto.model_dump(mode="json")


def _parse_write_body(request) -> ProjectWriteDTO | JsonResponse:
    """Parse and validate a project write body, or return the 400 response."""
    try:
        body = json.loads(request.body) if request.body else {}
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON body"}, status=400)

    if not isinstance(body, dict):
        return JsonResponse({"error": "Request body must be an object"}, status=400)

    try:
        return ProjectWriteDTO.model_validate(body)
    except ValidationError as e:
        return JsonResponse(
            {"error": "Invalid project fields", "details": e.errors(include_url=False)},
            status=400,
        )


def _apply_write(project: Project, data: ProjectWriteDTO) -> JsonResponse | None:
    """
    Copy the fields present in data onto project.

    The route is stored normalised; a blank route is derived from the name.
    Returns a 400 response if the resulting route is reserved.
    """
    fields = data.model_dump(exclude_unset=True)

    if "name" in fields and fields["name"] is not None:
        fields["name"] = fields["name"].strip()
        if not fields["name"]:
            return JsonResponse({"error": "name must be non-empty"}, status=400)

    for field in DECIMAL_FIELDS:
        if fields.get(field) is not None:
            fields[field] = Decimal(str(fields[field]))

    for field, value in fields.items():
        if field == "route":
            continue
        if value is None and field in NON_NULL_FIELDS:
            continue
        setattr(project, field, value)

    if "route" in fields or not project.route:
        explicit = (fields.get("route") or "").strip()
        project.route = normalize_route(explicit) if explicit else derive_route(project.name)

    if is_reserved(project.route):
        return JsonResponse(
            {"error": f"route {project.route} is reserved"},
            status=400,
        )
    return None


# =============================================================================
# PUBLIC CATALOG
# =============================================================================


@require_http_methods(["GET"])
def projects_list(request) -> JsonResponse:
    """
    GET /api/projects

    Query params (first one present wins):
    - q: search name/description
    - category: one of ProjectCategory
    - featured=1: featured projects only

    Response 200: [ProjectDTO, ...] (public projects only)
    """
    query = request.GET.get("q", "").strip()
    category = request.GET.get("category")

    if query:
        projects = projects_service.search_projects(query)
    elif category:
        projects = projects_service.get_projects_by_category(category)
    elif request.GET.get("featured") in ("1", "true"):
        projects = projects_service.get_featured_projects()
    else:
        projects = projects_service.get_public_projects()

    return JsonResponse([_dump(p) for p in projects], safe=False)


# =============================================================================
# ADMIN: PROJECTS
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def admin_projects_list_create(request) -> JsonResponse:
    """
    GET /api/admin/projects - List every project (public or not).
    POST /api/admin/projects - Create a project.
    """
    if request.method == "GET":
        projects = projects_service.get_all_projects()
        return JsonResponse([_dump(p) for p in projects], safe=False)
    return _create_project(request)


def _create_project(request) -> JsonResponse:
    """
    POST /api/admin/projects

    Request JSON: ProjectWriteDTO fields, name required.

    Response 201: ProjectDTO
    """
    data = _parse_write_body(request)
    if isinstance(data, JsonResponse):
        return data

    if not data.name:
        return JsonResponse({"error": "name is required"}, status=400)

    project = Project()
    error = _apply_write(project, data)
    if error is not None:
        return error

    project.save()
    return JsonResponse(_dump(projects_service.project_to_dto(project)), status=201)


@csrf_exempt
@require_http_methods(["GET", "PATCH", "DELETE"])
def admin_project_detail(request, project_id: str) -> HttpResponse:
    """
    GET/PATCH/DELETE /api/admin/projects/:project_id

    PATCH applies only the fields present in the body, and must leave the
    row readable: a stored category or status outside its enum has to be
    replaced in the same PATCH.
    GET on such a row is a 404, matching the public reads.
    DELETE returns 204; the project's leads are kept with project=NULL.
    """
    parsed_id = _parse_uuid(project_id)
    if not parsed_id:
        return JsonResponse({"error": "Invalid project_id"}, status=400)

    try:
        project = Project.objects.get(id=parsed_id)
    except Project.DoesNotExist:
        return JsonResponse({"error": "Project not found"}, status=404)

    if request.method == "GET":
        try:
            return JsonResponse(_dump(projects_service.project_to_dto(project)))
        except ValidationError:
            return JsonResponse({"error": "Project not found"}, status=404)

    if request.method == "DELETE":
        project.delete()
        return HttpResponse(status=204)

    data = _parse_write_body(request)
    if isinstance(data, JsonResponse):
        return data

    error = _apply_write(project, data)
    if error is not None:
        return error

    try:
        projects_service.project_to_dto(project)
    except ValidationError as e:
        return JsonResponse(
            {
                "error": "Project has invalid stored fields",
                "fields": sorted({str(err["loc"][0]) for err in e.errors()}),
            },
            status=400,
        )

    project.save()
    return JsonResponse(_dump(projects_service.project_to_dto(project)))


@require_http_methods(["GET"])
def admin_project_stats(request) -> JsonResponse:
    """GET /api/admin/projects/stats"""
    return JsonResponse(_dump(projects_service.get_project_stats()))


# =============================================================================
# ADMIN: LEADS
# =============================================================================


@require_http_methods(["GET"])
def admin_leads_list(request) -> JsonResponse:
    """
    GET /api/admin/leads

    Response 200: [ProjectLeadDTO, ...] newest first, priority inferred.
    """
    leads = leads_service.list_project_leads()
    return JsonResponse([_dump(lead) for lead in leads], safe=False)


@require_http_methods(["GET"])
def admin_lead_stats(request) -> JsonResponse:
    """GET /api/admin/leads/stats"""
    return JsonResponse(_dump(leads_service.get_lead_stats()))
