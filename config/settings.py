"""
Django settings for the Tasks API project.

All runtime configuration comes from environment variables with defaults
suitable for local development.
"""
import os
from pathlib import Path

from .database import get_store_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-local-development-key')

DEBUG = os.getenv('DJANGO_DEBUG', 'true').lower() == 'true'

ALLOWED_HOSTS = os.getenv('DJANGO_ALLOWED_HOSTS', '*').split(',')

INSTALLED_APPS = [
    # apps.core overrides runserver, so it must come before staticfiles
    'apps.core',
    'django.contrib.staticfiles',
    'corsheaders',
    'ninja',
    'apps.tasks',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

ASGI_APPLICATION = 'config.asgi.application'

# Tasks live in MongoDB; Django itself needs no SQL database
DATABASES = {}

DOCUMENT_STORE = get_store_config()

# Port used by `manage.py runserver` when none is given
PORT = int(os.getenv('PORT', '3000'))

# =============================================================================
# CORS
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = True

# =============================================================================
# Internationalization / static files
# =============================================================================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

STATIC_URL = 'static/'

APPEND_SLASH = False

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'pymongo': {
            'level': 'WARNING',
        },
    },
}
