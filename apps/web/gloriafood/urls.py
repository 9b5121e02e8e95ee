"""
URL routing for GloriaFood endpoints.
"""

from django.urls import path

from apps.web.gloriafood import webhooks

app_name = "gloriafood"

urlpatterns = [
    path("webhook/", webhooks.gloriafood_webhook, name="webhook"),
]
