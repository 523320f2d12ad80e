from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunserverCommand


class Command(StaticfilesRunserverCommand):
    """`runserver` listening on the PORT environment variable (default 3000)."""

    help = 'Starts a lightweight development server on PORT (default 3000).'

    default_port = str(settings.PORT)
