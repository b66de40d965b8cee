"""
Django settings for dtrcalc project.
"""

import sys
from pathlib import Path

from decouple import config  # pip install python-decouple

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY SETTINGS
SECRET_KEY = config("SECRET_KEY", default="")
if not SECRET_KEY:
    raise ValueError("SECRET_KEY environment variable must be set")

DEBUG = config("DEBUG", default=False, cast=bool)

# The calculator runs on the user's own machine by default
ALLOWED_HOSTS = config(
    "ALLOWED_HOSTS",
    default="localhost,127.0.0.1" + (",*" if DEBUG else ""),
).split(",")

# Check if we're running tests
TESTING = "test" in sys.argv or "pytest" in sys.modules

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third party
    "rest_framework",
    "corsheaders",  # Add: pip install django-cors-headers
    # Local apps
    "core",
    "worktime",
    "holiday_registry",
    "payroll",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",  # Must be first
]

# Add security middleware only if not testing
if not TESTING:
    MIDDLEWARE.append("django.middleware.security.SecurityMiddleware")

MIDDLEWARE += [
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "dtrcalc.urls"

TEMPLATES = []

WSGI_APPLICATION = "dtrcalc.wsgi.application"

# No relational database: every record lives in the local timecard storage
DATABASES = {}

# Local timecard storage (entries, pay settings, holidays)
TIMECARD_STORAGE = {
    "BACKEND": config(
        "TIMECARD_STORAGE_BACKEND", default="core.storage.FileStorageBackend"
    ),
    "OPTIONS": {
        "location": config(
            "TIMECARD_STORAGE_DIR", default=str(BASE_DIR / "local_storage")
        ),
    },
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "dtrcalc-default",
    }
}

# CORS settings for the browser front end
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in config(
        "CORS_ALLOWED_ORIGINS",
        default="http://localhost:3000,http://127.0.0.1:3000,http://localhost:8080",
    ).split(",")
    if origin.strip()
]

CORS_ALLOW_HEADERS = [
    "accept",
    "accept-encoding",
    "content-type",
    "dnt",
    "origin",
    "user-agent",
    "x-requested-with",
]

if DEBUG:
    # In development, allow all origins for easier testing
    CORS_ALLOW_ALL_ORIGINS = True
else:
    CORS_ALLOW_ALL_ORIGINS = False
    SECURE_CONTENT_TYPE_NOSNIFF = True
    SECURE_REFERRER_POLICY = "same-origin"
    X_FRAME_OPTIONS = "DENY"

# REST Framework settings
REST_FRAMEWORK = {
    # Single local user: no accounts, no sessions
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
    "COERCE_DECIMAL_TO_STRING": True,
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": "1000/hour",
    },
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = config("TIME_ZONE", default="Asia/Manila")
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Create logs directory if it doesn't exist
(BASE_DIR / "logs").mkdir(exist_ok=True)

# Logging configuration with rotation
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,

    "filters": {
        "pay_redactor": {"()": "dtrcalc.logging_filters.PayDataRedactorFilter"},
    },

    "formatters": {
        "verbose": {"format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}", "style": "{"},
        "simple":  {"format": "{levelname} {asctime} {message}", "style": "{"},
        "minimal": {"format": "{levelname} {message}", "style": "{"},
    },

    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "minimal",
            "level": "DEBUG" if DEBUG else "INFO",
            "filters": ["pay_redactor"],
        },
        "django_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": BASE_DIR / "logs" / "django.log",
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": "simple",
            "level": "INFO",
            "encoding": "utf-8",
            "filters": ["pay_redactor"],
        },
    },

    "loggers": {
        "django":           {"handlers": ["django_file"] if not DEBUG else ["console"], "level": "INFO", "propagate": False},
        "core":             {"handlers": ["django_file"] if not DEBUG else ["console"], "level": "INFO", "propagate": False},
        "worktime":         {"handlers": ["django_file"] if not DEBUG else ["console"], "level": "INFO", "propagate": False},
        "holiday_registry": {"handlers": ["django_file"] if not DEBUG else ["console"], "level": "INFO", "propagate": False},
        "payroll":          {"handlers": ["django_file"] if not DEBUG else ["console"], "level": "INFO", "propagate": False},

        # root
        "": {"handlers": ["console"], "level": "WARNING"},
    },
}


# Testing settings
if "test" in sys.argv:
    import logging

    # Disable most logging during tests
    logging.disable(logging.CRITICAL)

    DEBUG = False  # Turn off DEBUG for cleaner test output
