"""Django app configuration for quote requests."""

from django.apps import AppConfig


class QuotesConfig(AppConfig):
    """Quote request app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.quotes"
    verbose_name = "Quote Requests"
