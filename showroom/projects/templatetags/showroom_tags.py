"""Template helpers for the project pages."""

from django import template

from showroom.projects.formatting import format_amount

register = template.Library()


@register.filter
def money(value):
    """Render an amount as "$1,500"."""
    return format_amount(value)


@register.filter
def section_template(section) -> str:
    """Template path for a render plan section, keyed by its kind."""
    return f"projects/sections/{section.kind}.html"
