"""
URL configuration for the Showroom site.

Order matters: the projects app ends in a catch-all path segment, so it is
included last.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    # Catalog + admin JSON API
    path(
        "api/",
        include("showroom.core.api.urls", namespace="core_api"),
    ),
    # Site pages, page API, project catch-all
    path("", include("showroom.projects.urls")),
]
