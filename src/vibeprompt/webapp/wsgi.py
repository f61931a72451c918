"""WSGI entry point for the relay."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vibeprompt.webapp.settings")

application = get_wsgi_application()
