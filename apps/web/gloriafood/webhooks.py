"""
GloriaFood webhook handler.

GloriaFood pushes table reservations and pickup orders, new or updated,
to this endpoint. Each delivery is synced into the booking spreadsheet:
- table_reservation: "Dati" tab
- pickup: "Asporto" tab
- anything else: skipped
"""

import json
import logging

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from apps.web.core.decorators import shared_secret_required
from apps.web.gloriafood.exceptions import InvalidDeliveryError
from apps.web.gloriafood.services import (
    SyncConfig,
    SyncResult,
    normalize_delivery,
    sync_orders,
)
from apps.web.sheets.exceptions import SheetsError

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
@shared_secret_required("GLORIAFOOD_WEBHOOK_SECRET")
def gloriafood_webhook(request: HttpRequest) -> JsonResponse:
    """
    Handle GloriaFood order/reservation pushes.

    POST /api/gloriafood/webhook/

    Responses:
    - 200: delivery handled; counts in the body, even if some records failed
    - 400: body is not JSON, or not an order object/list
    - 401: Authorization header does not match the configured secret
    - 500: spreadsheet misconfigured or credentials rejected
    """
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("Invalid GloriaFood webhook payload: %s", e)
        return JsonResponse({"error": "Invalid payload"}, status=400)

    logger.info("Received GloriaFood delivery (%d bytes)", len(request.body))
    logger.debug("GloriaFood payload: %s", payload)

    try:
        orders = normalize_delivery(payload)
    except InvalidDeliveryError as e:
        logger.warning("Invalid GloriaFood webhook payload: %s", e)
        return JsonResponse({"error": "Invalid payload"}, status=400)

    if not orders:
        logger.info("GloriaFood delivery contained no orders")
        return JsonResponse(
            {
                "success": True,
                "message": "No orders to process",
                **SyncResult().as_dict(),
            }
        )

    try:
        config = SyncConfig.from_settings()
    except SheetsError as e:
        logger.exception("Booking sheet not configured: %s", e)
        return JsonResponse(
            {"error": "Internal server error", "message": e.message}, status=500
        )

    try:
        result = sync_orders(orders, config)
    except SheetsError as e:
        logger.exception("GloriaFood sync aborted: %s", e)
        return JsonResponse(
            {"error": "Internal server error", "message": e.message}, status=500
        )
    finally:
        config.close()

    return JsonResponse({"success": True, **result.as_dict()})
