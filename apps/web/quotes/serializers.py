"""
Pydantic schemas for quote request API responses.
"""

from typing import Literal

from pydantic import BaseModel


class ValidationErrorDetail(BaseModel):
    """A single validation error."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    success: Literal[False] = False
    error: Literal["validation_error"] = "validation_error"
    details: list[ValidationErrorDetail]


class QuoteRequestResponse(BaseModel):
    """Response after a quote request was forwarded."""

    success: Literal[True] = True
    message_id: str
    evento: str
