"""Quotes module - private event quote requests from the website."""

from apps.web.quotes.services import (
    QuoteRequestError,
    build_quote_body,
    build_quote_subject,
    send_quote_request,
)

__all__ = [
    "QuoteRequestError",
    "build_quote_body",
    "build_quote_subject",
    "send_quote_request",
]
