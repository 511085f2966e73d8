"""
Django app configuration for the public project pages.
"""

from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "showroom.projects"
    verbose_name = "Showroom Projects"
