"""
Django settings for the task list API.

All values come from the process environment. A ``.env`` file at the project
root is loaded first when present.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from .database import get_database_config


BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def _env_list(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-dev-only-key')
DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'
ALLOWED_HOSTS = _env_list('ALLOWED_HOSTS', 'localhost,127.0.0.1')

# Port used by `manage.py runserver` when none is given on the command line
PORT = os.getenv('PORT', '8000')


# =============================================================================
# Applications
# =============================================================================

INSTALLED_APPS = [
    # Must precede staticfiles so its runserver command wins
    'apps.core',
    'django.contrib.staticfiles',
    'corsheaders',
    'ninja',
    'apps.identity',
    'apps.tasks',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

ASGI_APPLICATION = 'config.asgi.application'

STATIC_URL = 'static/'

DATABASES = {
    'default': get_database_config(BASE_DIR),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'


# =============================================================================
# Authentication (bearer JWT issued by Auth0 or any OIDC provider)
# =============================================================================

AUTH0_DOMAIN = os.getenv('AUTH0_DOMAIN', '').strip().strip('/')
AUTH0_AUDIENCE = os.getenv('AUTH0_AUDIENCE', '')
AUTH0_ISSUER = os.getenv('AUTH0_ISSUER') or (f'https://{AUTH0_DOMAIN}/' if AUTH0_DOMAIN else '')
AUTH0_JWKS_URL = os.getenv('AUTH0_JWKS_URL') or (
    f'https://{AUTH0_DOMAIN}/.well-known/jwks.json' if AUTH0_DOMAIN else ''
)
JWT_ALGORITHMS = ['RS256']

# Name of the (namespaced) claim the identity provider puts the email in
AUTH_EMAIL_CLAIM = os.getenv('NAMESPACE_DOMAIN', '')


# =============================================================================
# CORS
# =============================================================================

# Only one origin is allowed; django-cors-headers rejects a trailing slash
CORS_ALLOWED_ORIGINS = [os.getenv('CORS_ALLOWED_ORIGIN', 'http://localhost:3000').rstrip('/')]
CORS_ALLOW_METHODS = ['GET', 'DELETE', 'POST', 'PUT', 'OPTIONS']
CORS_ALLOW_HEADERS = ['content-type', 'origin', 'accept', 'authorization']
CORS_ALLOW_CREDENTIALS = True


# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django.db.backends': {
            'level': 'WARNING',
        },
    },
}
