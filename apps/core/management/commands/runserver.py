"""
`runserver` bound to all interfaces on the configured PORT.

    python manage.py runserver            # 0.0.0.0:$PORT (8000 if unset)
    python manage.py runserver 9000       # explicit port still wins
"""
import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = logging.getLogger(__name__)


class Command(RunserverCommand):
    default_addr = '0.0.0.0'
    default_port = settings.PORT

    def inner_run(self, *args, **options):
        logger.info(f"Listening on port {self.port}...")
        super().inner_run(*args, **options)
