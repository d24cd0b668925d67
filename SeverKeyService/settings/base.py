"""
Base Django settings for SeverKeyService.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-7w!k2p#severkey-local-only-q9z^c4m8r$x1v6b3n0t"
)

# Application definition
INSTALLED_APPS = [
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "SeverKeyService.apps.SeverKeyServiceConfig",
    "core",
    "users",
    "chats",
    "products",
    "licenses",
    "apikeys",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
]

ROOT_URLCONF = "SeverKeyService.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "SeverKeyService.wsgi.application"
ASGI_APPLICATION = "SeverKeyService.asgi.application"

# Records live in in-process collection stores; no database is used.
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Collection stores
STORE_SETTINGS = {
    "DEFAULT_PAGE_SIZE": int(os.environ.get("STORE_DEFAULT_PAGE_SIZE", "20")),
    "MAX_PAGE_SIZE": int(os.environ.get("STORE_MAX_PAGE_SIZE", "100")),
    # Fraction of deleted slots that triggers an order index rebuild
    "COMPACTION_RATIO": 0.5,
}

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "SeverKey API",
    "DESCRIPTION": (
        "Admin API for products and licenses. "
        "Every collection supports cursor-paginated listing, creation, "
        "single and bulk deletion."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api",
    "TAGS": [
        {"name": "Users", "description": "Dashboard users"},
        {"name": "Chats", "description": "Chat boards and messages"},
        {"name": "Products", "description": "Product catalogue"},
        {"name": "Licenses", "description": "License issuing and revocation"},
        {"name": "API Keys", "description": "Programmatic access keys"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# Observability
OTEL_ENABLED = os.environ.get("OTEL_ENABLED", "false").lower() == "true"

LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
