"""
Decorators for request handling and validation.
"""

import hmac
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.conf import settings
from django.http import HttpRequest, JsonResponse

logger = logging.getLogger(__name__)


def shared_secret_required(
    setting_name: str, header: str = "Authorization"
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator that checks a shared-secret header against a setting.

    Webhook providers such as GloriaFood send a static key with every call.
    An empty setting disables the check. Mismatches are rejected with 401 before
    the view runs.

    Usage:
        @shared_secret_required("GLORIAFOOD_WEBHOOK_SECRET")
        def gloriafood_webhook(request):
            ...
    """

    def decorator(view_func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            expected = getattr(settings, setting_name, "")
            if expected:
                provided = request.headers.get(header, "")
                if not hmac.compare_digest(provided.encode(), expected.encode()):
                    logger.warning(
                        "Rejected request to %s: invalid %s header",
                        request.path,
                        header,
                    )
                    return JsonResponse({"error": "Unauthorized"}, status=401)

            return view_func(request, *args, **kwargs)

        return wrapper

    return decorator
