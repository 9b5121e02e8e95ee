"""
Quote request view - public endpoint for the website's "preventivo" form.
"""

import json
import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from pydantic import ValidationError as PydanticValidationError
from tre_schemas import QuoteRequestSubmission

from apps.web.quotes.serializers import (
    QuoteRequestResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from apps.web.quotes.services import QuoteRequestError, send_quote_request

logger = logging.getLogger(__name__)


def _cors_headers() -> dict[str, str]:
    """CORS headers for Astro site access."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def _json_response(data: dict[str, Any], status: int = 200) -> JsonResponse:
    """Create a JSON response with CORS headers."""
    response = JsonResponse(data, status=status)
    for key, value in _cors_headers().items():
        response[key] = value
    return response


@csrf_exempt
@require_http_methods(["POST", "OPTIONS"])
def quote_request(request: HttpRequest) -> JsonResponse:
    """
    POST /api/preventivo/

    Validates a quote request and emails it to the restaurant.
    OPTIONS answers the browser's CORS preflight.
    """
    if request.method == "OPTIONS":
        return _json_response({})

    try:
        body = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        return _json_response(
            {"success": False, "error": "Invalid JSON in request body"},
            status=400,
        )

    try:
        submission = QuoteRequestSubmission.model_validate(body)
    except PydanticValidationError as e:
        errors = [
            ValidationErrorDetail(
                field=".".join(str(loc) for loc in err["loc"]),
                message=err["msg"],
            )
            for err in e.errors()
        ]
        response = ValidationErrorResponse(details=errors)
        return _json_response(response.model_dump(), status=400)

    try:
        message_id = send_quote_request(submission)
    except QuoteRequestError as e:
        logger.error("Quote request not sent: %s", e)
        return _json_response(
            {"success": False, "error": "Errore nell'invio dell'email"},
            status=500,
        )

    result = QuoteRequestResponse(message_id=message_id, evento=submission.evento.value)
    return _json_response(result.model_dump())
