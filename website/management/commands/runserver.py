from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunserverCommand


class Command(StaticfilesRunserverCommand):
    """runserver listening on settings.PORT (env PORT, default 3000) unless told otherwise."""
    default_port = str(settings.PORT)
