"""WSGI config for the blocksite project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blocksite.settings")

application = get_wsgi_application()
