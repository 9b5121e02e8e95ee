"""Tests for request decorators."""

import json

from django.http import HttpRequest, JsonResponse

from apps.web.core.decorators import shared_secret_required


@shared_secret_required("TEST_WEBHOOK_SECRET")
def _protected_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})


class TestSharedSecretRequired:
    """Tests for the shared_secret_required decorator."""

    def test_matching_secret_passes(self, rf, settings):
        settings.TEST_WEBHOOK_SECRET = "s3cret"
        request = rf.post("/hook/", HTTP_AUTHORIZATION="s3cret")

        response = _protected_view(request)

        assert response.status_code == 200
        assert json.loads(response.content) == {"ok": True}

    def test_wrong_secret_rejected(self, rf, settings):
        settings.TEST_WEBHOOK_SECRET = "s3cret"
        request = rf.post("/hook/", HTTP_AUTHORIZATION="guess")

        response = _protected_view(request)

        assert response.status_code == 401
        assert json.loads(response.content) == {"error": "Unauthorized"}

    def test_missing_header_rejected(self, rf, settings):
        settings.TEST_WEBHOOK_SECRET = "s3cret"
        request = rf.post("/hook/")

        response = _protected_view(request)

        assert response.status_code == 401

    def test_check_disabled_without_secret(self, rf, settings):
        """An empty setting turns the check off (local development)."""
        settings.TEST_WEBHOOK_SECRET = ""
        request = rf.post("/hook/")

        response = _protected_view(request)

        assert response.status_code == 200

    def test_custom_header(self, rf, settings):
        settings.TEST_WEBHOOK_SECRET = "s3cret"

        @shared_secret_required("TEST_WEBHOOK_SECRET", header="X-Webhook-Key")
        def view(request: HttpRequest) -> JsonResponse:
            return JsonResponse({"ok": True})

        assert view(rf.post("/hook/", HTTP_X_WEBHOOK_KEY="s3cret")).status_code == 200
        assert view(rf.post("/hook/", HTTP_AUTHORIZATION="s3cret")).status_code == 401
