"""WSGI entry point for the catalog API.

The ``DJANGO_SETTINGS_MODULE`` is set before the application is built,
so ``gunicorn config.wsgi`` works without extra environment setup.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
