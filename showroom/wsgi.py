"""WSGI entry point for Showroom."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "showroom.settings")

application = get_wsgi_application()
