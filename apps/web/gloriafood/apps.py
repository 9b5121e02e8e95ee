"""Django app configuration for the GloriaFood integration."""

from django.apps import AppConfig


class GloriaFoodConfig(AppConfig):
    """GloriaFood webhook sync app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.gloriafood"
    verbose_name = "GloriaFood Integration"
