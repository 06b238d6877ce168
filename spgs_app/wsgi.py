"""
WSGI config for the SPGS dashboard.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "spgs_app.settings")

application = get_wsgi_application()
