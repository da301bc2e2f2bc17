"""
Django settings for the CyberDallas 2069 campaign manager.

Every deployment-specific value is read from the environment so the same
module serves development, CI and production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if not value:
        return default
    return value.lower() == "true" or value == "1"


def env_positive_int(name: str):
    """Return a positive integer from the environment, or None."""
    value = os.environ.get(name)
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "dev-only-insecure-secret-key-change-me"  # nosec
)

DEBUG = env_bool("DJANGO_DEBUG", False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

# "production" turns on Secure cookies and strict Origin checks on mutations.
APP_ENV = os.environ.get("APP_ENV", "development")
IS_PRODUCTION = APP_ENV == "production"

APP_BASE_URL = os.environ.get("APP_BASE_URL", "http://localhost:3000")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "polymorphic",
    "core",
    "users",
    "campaigns",
    "gear",
    "characters",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "users.middleware.TokenAuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "cyberdallas.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "cyberdallas.wsgi.application"
ASGI_APPLICATION = "cyberdallas.asgi.application"

# Database
if os.environ.get("POSTGRES_DB"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ["POSTGRES_DB"],
            "USER": os.environ.get("POSTGRES_USER", "postgres"),
            "PASSWORD": os.environ.get("POSTGRES_PASSWORD", ""),
            "HOST": os.environ.get("POSTGRES_HOST", "localhost"),
            "PORT": os.environ.get("POSTGRES_PORT", "5432"),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

AUTH_USER_MODEL = "users.User"

PASSWORD_HASHERS = [
    "users.hashers.ScryptPasswordHasher",
]

# Unset means the legacy scrypt$<salt>$<hash> format with scrypt defaults.
_scrypt_n = env_positive_int("PASSWORD_SCRYPT_N")
_scrypt_r = env_positive_int("PASSWORD_SCRYPT_R")
_scrypt_p = env_positive_int("PASSWORD_SCRYPT_P")
if _scrypt_n is None and _scrypt_r is None and _scrypt_p is None:
    PASSWORD_SCRYPT_PARAMS = None
else:
    PASSWORD_SCRYPT_PARAMS = {
        "N": _scrypt_n or 16384,
        "r": _scrypt_r or 8,
        "p": _scrypt_p or 1,
    }

# Session tokens
AUTH_SECRET = os.environ.get("AUTH_SECRET", "")
AUTH_COOKIE_NAME = "cyberdallasSession"
AUTH_TOKEN_TTL_DAYS = 7

CAMPAIGN_INVITE_TTL_DAYS = 7

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
}

# Email
DISABLE_EMAIL = env_bool("DISABLE_EMAIL", False)
EMAIL_BACKEND = os.environ.get(
    "EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend"
)
EMAIL_HOST = os.environ.get("SMTP_HOST", "")
EMAIL_PORT = int(os.environ.get("SMTP_PORT", "587"))
EMAIL_USE_SSL = env_bool("SMTP_SECURE", False)
EMAIL_HOST_USER = os.environ.get("SMTP_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("SMTP_PASS", "")
DEFAULT_FROM_EMAIL = os.environ.get("SMTP_FROM", "")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "api": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "campaigns": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "characters": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "users": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
