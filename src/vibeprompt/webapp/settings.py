"""
Django settings for the vibeprompt relay.

The provider credential is read from the environment once, here, and never
leaves the server.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "vibeprompt-relay-local-only")
DEBUG = os.environ.get("DJANGO_DEBUG", "").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "vibeprompt.webapp.urls"
WSGI_APPLICATION = "vibeprompt.webapp.wsgi.application"

# Stateless relay
DATABASES = {}

USE_TZ = True

# REST Framework configuration
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "UNAUTHENTICATED_USER": None,
}

VIBEPROMPT_PROVIDER_URL = os.environ.get(
    "VIBEPROMPT_PROVIDER_URL", "https://api.openai.com/v1/chat/completions"
)
VIBEPROMPT_PROVIDER_API_KEY = os.environ.get("OPENAI_API_KEY")

# Request bodies carry whole project specifications
DATA_UPLOAD_MAX_MEMORY_SIZE = 10485760  # 10MB
