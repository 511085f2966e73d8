"""
Core API URL routing.

URL patterns:
- GET /api/projects
- GET/POST /api/admin/projects
- GET /api/admin/projects/stats
- GET/PATCH/DELETE /api/admin/projects/:project_id
- GET /api/admin/leads
- GET /api/admin/leads/stats
"""

from django.urls import path

from showroom.core.api import views

app_name = "core_api"

urlpatterns = [
    # Public catalog
    path(
        "projects",
        views.projects_list,
        name="projects-list",
    ),
    # Admin: projects
    path(
        "admin/projects",
        views.admin_projects_list_create,
        name="admin-projects-list-create",
    ),
    # Before the detail route so "stats" is never parsed as an id
    path(
        "admin/projects/stats",
        views.admin_project_stats,
        name="admin-project-stats",
    ),
    path(
        "admin/projects/<str:project_id>",
        views.admin_project_detail,
        name="admin-project-detail",
    ),
    # Admin: leads
    path(
        "admin/leads",
        views.admin_leads_list,
        name="admin-leads-list",
    ),
    path(
        "admin/leads/stats",
        views.admin_lead_stats,
        name="admin-lead-stats",
    ),
]
