"""
Django app configuration for Showroom core.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "showroom.core"
    verbose_name = "Showroom Core"
