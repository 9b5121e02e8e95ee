"""
Django settings for the TRE web backend.

Secrets come from the environment - never hardcode credentials.
Run with: python manage.py runserver
"""

from pathlib import Path

import environ  # type: ignore[import-untyped]

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    QUOTE_RECIPIENTS=(list, []),
    SHEETS_TIMEOUT=(float, 30.0),
)

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="insecure-dev-key-change-me")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    "django.contrib.staticfiles",
    # Local apps
    "apps.web.gloriafood",
    "apps.web.quotes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "apps.web.config.urls"

WSGI_APPLICATION = "apps.web.config.wsgi.application"

# Database
# The backend is stateless: bookings live in the Google Sheet.
DATABASES: dict[str, dict[str, str]] = {}

# Internationalization
LANGUAGE_CODE = "it-it"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR.parent.parent / "staticfiles"

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {
        "handlers": ["console"],
        "level": env("LOG_LEVEL", default="INFO"),
    },
}

# =============================================================================
# GloriaFood -> Google Sheets sync
# =============================================================================

# Static key GloriaFood sends in the Authorization header. Empty disables the check.
GLORIAFOOD_WEBHOOK_SECRET = env("GLORIAFOOD_WEBHOOK_SECRET", default="")

# "google" for the live spreadsheet, "memory" for local development
SHEETS_BACKEND = env("SHEETS_BACKEND", default="google")
SHEETS_TIMEOUT = env("SHEETS_TIMEOUT")

GOOGLE_SHEET_ID = env("GOOGLE_SHEET_ID", default="")
GOOGLE_SERVICE_ACCOUNT_EMAIL = env("GOOGLE_SERVICE_ACCOUNT_EMAIL", default="")
GOOGLE_PRIVATE_KEY = env("GOOGLE_PRIVATE_KEY", default="")

# Booking times are shown in the restaurant's local time
RESTAURANT_TIME_ZONE = env("RESTAURANT_TIME_ZONE", default="Europe/Rome")

# =============================================================================
# Quote requests (email via Resend)
# =============================================================================

RESEND_API_KEY = env("RESEND_API_KEY", default="")
QUOTE_FROM_EMAIL = env(
    "QUOTE_FROM_EMAIL", default="Sito Web TRE <info@ristorantepizzeriatre.it>"
)
QUOTE_RECIPIENTS = env("QUOTE_RECIPIENTS")
