"""
HTML views for the public site.

- healthcheck: JSON liveness probe
- home: featured projects
- contact: static contact page
- project_page: catch-all project page (rich / fallback / not found)
- project_inquiry: CTA form target, runs the lead capture then redirects back

project_page and project_inquiry are routed last; every concrete route is
matched before them.
"""

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from showroom.core.enums import ContentShape, InquiryType
from showroom.projects.observability import create_page_context
from showroom.projects.routing import route_for

from .services import capture_service, page_service, projects_service
from .services.notifications import MessagesNotifier

TEMPLATES_BY_SHAPE = {
    ContentShape.RICH: "projects/project_rich.html",
    ContentShape.FALLBACK: "projects/project_fallback.html",
}


def healthcheck(request):
    """
    Simple healthcheck endpoint.

    Returns 200 OK with status info.
    """
    return JsonResponse({
        "status": "ok",
        "service": "showroom",
    })


@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """Landing page with the featured project cards."""
    featured = projects_service.get_featured_projects()
    cards = [{"project": project, "route": route_for(project)} for project in featured]
    return render(request, "projects/home.html", {"cards": cards})


@require_GET
def contact(request: HttpRequest) -> HttpResponse:
    return render(request, "projects/contact.html")


def _not_found(request: HttpRequest, path_segment: str) -> HttpResponse:
    return render(
        request,
        "projects/project_not_found.html",
        {"path_segment": path_segment},
        status=404,
    )


@require_GET
def project_page(request: HttpRequest, path_segment: str) -> HttpResponse:
    """
    GET /{path_segment}/

    Resolves the segment to a project and renders its page.
    A miss or a failed fetch renders the not-found page (404).
    """
    result = page_service.load_project_page(path_segment)
    if not result.found:
        return _not_found(request, path_segment)

    return render(
        request,
        TEMPLATES_BY_SHAPE[result.shape],
        {
            "project": result.project,
            "plan": result.plan,
            "path_segment": path_segment,
        },
    )


@require_POST
def project_inquiry(request: HttpRequest, path_segment: str, inquiry_type: str) -> HttpResponse:
    """
    POST /{path_segment}/inquiries/{inquiry_type}/

    Target of every CTA form on a project page. Captures the inquiry, records
    the outcome as a flash message and redirects back to the page (303).
    Capture failures never change the page itself.
    """
    if inquiry_type not in InquiryType.values:
        return _not_found(request, path_segment)

    result = page_service.load_project_page(path_segment)
    if not result.found:
        return _not_found(request, path_segment)

    capture_service.capture(
        result.project,
        InquiryType(inquiry_type),
        MessagesNotifier(request),
        ctx=create_page_context(path_segment),
    )

    response = redirect("projects:project_page", path_segment=path_segment)
    response.status_code = 303
    return response
