"""Template context shared by every page."""

from django.conf import settings


def site(request):
    return {"site_name": getattr(settings, "SHOWROOM_SITE_NAME", "Showroom")}
