"""
URL configuration for the TRE web backend.
"""

from django.urls import include, path

urlpatterns = [
    # Public API endpoints
    path("api/gloriafood/", include("apps.web.gloriafood.urls")),
    path("api/preventivo/", include("apps.web.quotes.urls")),
]
