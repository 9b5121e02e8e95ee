"""TRE Schemas - Pydantic models for data contracts."""

from tre_schemas.forms import EventType, QuoteRequestSubmission, ServiceType
from tre_schemas.gloriafood import (
    GloriaFoodItem,
    GloriaFoodOrder,
    GloriaFoodOrderType,
    GloriaFoodPayment,
    GloriaFoodStatus,
)

__all__ = [
    # Forms
    "EventType",
    "QuoteRequestSubmission",
    "ServiceType",
    # GloriaFood
    "GloriaFoodItem",
    "GloriaFoodOrder",
    "GloriaFoodOrderType",
    "GloriaFoodPayment",
    "GloriaFoodStatus",
]
