"""
URL routing for quote request endpoints.
"""

from django.urls import path

from apps.web.quotes import views

app_name = "quotes"

urlpatterns = [
    path("", views.quote_request, name="quote-request"),
]
