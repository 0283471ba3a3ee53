"""
ASGI config for the task list API.

Serves any ASGI server (Uvicorn, Daphne).
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time (server startup, not request time)
application = get_asgi_application()
