"""
WSGI config for the oumasite project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'oumasite.settings')

application = get_wsgi_application()
