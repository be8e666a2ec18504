"""
Salmon Supply Chain – Django Settings
=======================================
Django is the framework container: ORM for the ledger table, URL
routing for the HTTP adapter. Chaincode logic lives in core/ and
engines/ and does not depend on Django.

Environment overrides:
    SALMON_SECRET_KEY       Django secret key
    SALMON_DEBUG            "1" / "true" enables debug
    SALMON_ALLOWED_HOSTS    comma-separated host list
    SALMON_DB_PATH          SQLite file path
    SALMON_LEDGER_BACKEND   "django" (default) or "memory"
    SALMON_LOG_LEVEL        level for the salmon.* loggers
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root where manage.py lives
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "SALMON_SECRET_KEY", "salmon-dev-key-replace-before-deployment"
)

DEBUG = _env_flag("SALMON_DEBUG", True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("SALMON_ALLOWED_HOSTS", "").split(",")
    if host.strip()
]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "core.ledger_store",
    "core.bootstrap",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# ── Database ──────────────────────────────────────────────────
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("SALMON_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

# ── Ledger ────────────────────────────────────────────────────
SALMON_LEDGER_BACKEND = os.environ.get("SALMON_LEDGER_BACKEND", "django")

# ── Logging ───────────────────────────────────────────────────
SALMON_LOG_LEVEL = os.environ.get("SALMON_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
        "invocation": {
            "format": (
                "%(asctime)s %(levelname)s %(name)s "
                "[%(invocation_id)s %(function)s] %(message)s"
            ),
        },
    },
    "filters": {
        "invocation_defaults": {
            "()": "core.chaincode.context.InvocationDefaultsFilter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
        "chaincode_console": {
            "class": "logging.StreamHandler",
            "formatter": "invocation",
            "filters": ["invocation_defaults"],
        },
    },
    "loggers": {
        "salmon": {
            "handlers": ["console"],
            "level": SALMON_LOG_LEVEL,
            "propagate": False,
        },
        "salmon.chaincode": {
            "handlers": ["chaincode_console"],
            "level": SALMON_LOG_LEVEL,
            "propagate": False,
        },
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
