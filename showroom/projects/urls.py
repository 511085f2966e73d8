"""
URL routes for the public site.

The project catch-all is deliberately last: every concrete route (health,
contact, API, admin in the root URLconf) is matched before a segment can
reach the resolver.
"""

from django.urls import path

from . import api_views, views

app_name = "projects"

urlpatterns = [
    path("health/", views.healthcheck, name="healthcheck"),
    path("", views.home, name="home"),
    path("contact/", views.contact, name="contact"),

    # JSON API for SPA clients
    path(
        "api/pages/<str:path_segment>",
        api_views.get_project_page,
        name="api_project_page",
    ),
    path(
        "api/projects/<str:project_id>/inquiries",
        api_views.create_project_inquiry,
        name="api_project_inquiry",
    ),

    # Catch-all project pages (must stay last)
    path(
        "<str:path_segment>/inquiries/<str:inquiry_type>/",
        views.project_inquiry,
        name="project_inquiry",
    ),
    path("<str:path_segment>/", views.project_page, name="project_page"),
]
