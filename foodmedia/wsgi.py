"""WSGI entry point for the foodmedia project."""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'foodmedia.settings')

application = get_wsgi_application()
