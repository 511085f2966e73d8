"""
Project page JSON API.

For SPA clients that render the page themselves:
- GET /api/pages/{path_segment}: the render plan for a path segment
- POST /api/projects/{project_id}/inquiries: capture a CTA activation

All responses validate against the appropriate DTO before returning.
"""

import json
from typing import Any
from uuid import UUID

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from .dto import CaptureRequestDTO
from .observability import create_page_context
from .routing import route_for
from .services import capture_service, page_service, projects_service
from .services.notifications import CollectingNotifier


# =============================================================================
# ERROR ENVELOPE HELPER
# =============================================================================


def error_response(
    code: str,
    message: str,
    status: int = 400,
    details: dict[str, Any] | None = None,
) -> JsonResponse:
    """
    Create a standardized error response envelope.

    All project API errors use this format:
    {
        "error": {
            "code": "validation_error",
            "message": "Human-readable summary",
            "details": { ...optional extra fields... }
        }
    }
    """
    envelope: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        envelope["error"]["details"] = details

    return JsonResponse(envelope, status=status)


# =============================================================================
# PAGE ENDPOINT
# =============================================================================


@require_GET
def get_project_page(request: HttpRequest, path_segment: str) -> JsonResponse:
    """
    GET /api/pages/{path_segment}

    Returns ProjectPageResponseDTO for a found project, or a not_found
    envelope (404). A failed fetch is reported as not_found too; the reason
    is only in the logs.
    """
    result = page_service.load_project_page(path_segment, trigger_source="api")
    if not result.found:
        return error_response(
            code="not_found",
            message="Project not found",
            status=404,
            details={"path_segment": path_segment},
        )

    return JsonResponse(result.to_dto().model_dump(mode="json"))


# =============================================================================
# INQUIRY ENDPOINT
# =============================================================================


@csrf_exempt
@require_http_methods(["POST"])
def create_project_inquiry(request: HttpRequest, project_id: str) -> JsonResponse:
    """
    POST /api/projects/{project_id}/inquiries

    Request JSON: {"inquiry_type": "demo" | "investment" | "purchase" | "contact" | "partnership"}

    Returns CaptureResultDTO (202). Capture failures are reported inside the
    result (status + error notifications), not as HTTP errors.
    """
    try:
        project_uuid = UUID(project_id)
    except ValueError:
        return error_response(
            code="invalid_uuid",
            message="Invalid project_id format",
            details={"field": "project_id", "value": project_id},
        )

    try:
        body_data = json.loads(request.body) if request.body else {}
        capture_request = CaptureRequestDTO.model_validate(body_data)
    except json.JSONDecodeError:
        return error_response(
            code="invalid_json",
            message="Request body is not valid JSON",
        )
    except Exception as e:
        return error_response(
            code="validation_error",
            message="Request body validation failed",
            details={"error": str(e)},
        )

    try:
        project = projects_service.get_project(project_uuid)
    except projects_service.ProjectNotFoundError:
        return error_response(
            code="not_found",
            message="Project not found",
            status=404,
            details={"project_id": project_id},
        )

    result = capture_service.capture(
        project,
        capture_request.inquiry_type,
        CollectingNotifier(),
        ctx=create_page_context(route_for(project).lstrip("/"), trigger_source="api"),
    )
    return JsonResponse(result.model_dump(mode="json"), status=202)
