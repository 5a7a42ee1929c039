from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "unsafe-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: List[str] = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",")
    if host.strip()
]

LOCAL_APPS = [
    "apps.core",
    "apps.payments",
]

INSTALLED_APPS = LOCAL_APPS

# No persistence: the payments integration is stateless.
DATABASES: Dict[str, Dict[str, Any]] = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("TZ", "Asia/Kathmandu")
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

FEATURE_FLAGS = {
    "payments": os.getenv("FEATURE_PAYMENTS", "true").lower() == "true",
}

PAYMENTS_PROVIDER_ENABLED_FONEPAY = os.getenv("PAYMENTS_PROVIDER_ENABLED_FONEPAY", "true").lower() == "true"

# --- Fonepay ---
FONEPAY_MERCHANT_CODE = os.getenv("FONEPAY_MERCHANT_CODE", "")
FONEPAY_SECRET_KEY = os.getenv("FONEPAY_SECRET_KEY", "")
FONEPAY_RETURN_URL = os.getenv("FONEPAY_RETURN_URL", "http://localhost:8000/payments/fonepay/return/")
FONEPAY_PRODUCTION = os.getenv("FONEPAY_PRODUCTION", "false").lower() == "true"

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "redact_secrets": {
            "()": "apps.core.logging_filters.RedactSecretsFilter",
        }
    },
    "formatters": {
        "console": {
            "format": "%(levelname)s %(name)s %(message)s",
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(levelname)s %(name)s %(message)s %(asctime)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "filters": ["redact_secrets"],
        },
        "json": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "filters": ["redact_secrets"],
        },
    },
    "root": {
        "handlers": ["json"],
        "level": os.getenv("DJANGO_LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "apps": {
            "handlers": ["json"],
            "level": os.getenv("APP_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
