"""
ASGI config for the oumasite project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'oumasite.settings')

application = get_asgi_application()
