"""ASGI config for the cyberdallas project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cyberdallas.settings")

application = get_asgi_application()
