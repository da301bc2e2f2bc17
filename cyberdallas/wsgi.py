"""WSGI config for the cyberdallas project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cyberdallas.settings")

application = get_wsgi_application()
