"""Django admin configuration for showroom models."""

from django.contrib import admin

from showroom.projects.routing import derive_route, normalize_route

from .models import Lead, Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin for Project model."""

    list_display = ["name", "category", "status", "route", "is_public", "is_featured", "lead_count", "created_at"]
    list_filter = ["category", "status", "is_public", "is_featured"]
    search_fields = ["name", "description", "route"]
    readonly_fields = ["lead_count", "created_at", "updated_at"]
    ordering = ["-created_at"]

    def save_model(self, request, obj, form, change):
        # Stored routes are always normalised so the resolver can compare verbatim
        if obj.route and obj.route.strip():
            obj.route = normalize_route(obj.route)
        else:
            obj.route = derive_route(obj.name)
        super().save_model(request, obj, form, change)


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    """Admin for Lead model."""

    list_display = ["__str__", "project", "inquiry_type", "source", "status", "created_at"]
    list_filter = ["inquiry_type", "source", "status"]
    search_fields = ["name", "email", "company", "message"]
    ordering = ["-created_at"]
