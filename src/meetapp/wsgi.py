"""WSGI config for the meetapp project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "meetapp.settings")

application = get_wsgi_application()
