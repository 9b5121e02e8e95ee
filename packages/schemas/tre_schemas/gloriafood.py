"""GloriaFood schemas - orders and table reservations pushed by webhook."""

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class GloriaFoodOrderType(str, Enum):
    """Order type discriminator sent by GloriaFood."""

    TABLE_RESERVATION = "table_reservation"
    PICKUP = "pickup"
    DELIVERY = "delivery"
    DINE_IN = "dine_in"


class GloriaFoodStatus(str, Enum):
    """Order lifecycle status on GloriaFood."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELED = "canceled"
    TIMED_OUT = "timed_out"
    PENDING = "pending"


class GloriaFoodPayment(str, Enum):
    """Payment method codes used on pickup orders."""

    CASH = "CASH"
    CARD = "CARD"
    CARD_PHONE = "CARD_PHONE"
    ONLINE = "ONLINE"


# =============================================================================
# Orders
# =============================================================================


class GloriaFoodItem(BaseModel):
    """Line item of a pickup order."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    quantity: int = 1

    @field_validator("name", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class GloriaFoodOrder(BaseModel):
    """
    A single order or reservation as delivered by GloriaFood.

    Only the fields the restaurant syncs are declared; everything else in the
    payload is ignored. Timestamps stay as raw strings so that a malformed
    value degrades a single column instead of rejecting the whole record.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(min_length=1, description="GloriaFood order ID")
    type: str = ""
    status: str = ""

    # Timing
    fulfill_at: str | None = None
    accepted_at: str | None = None

    # Customer
    client_first_name: str = ""
    client_last_name: str = ""
    client_phone: str = ""
    client_email: str = ""

    # Reservation
    persons: int | None = None

    # Pickup
    total_price: Decimal | None = None
    payment: str = ""
    items: list[GloriaFoodItem] = Field(default_factory=list)

    instructions: str = ""

    @field_validator(
        "type",
        "status",
        "client_first_name",
        "client_last_name",
        "client_phone",
        "client_email",
        "payment",
        "instructions",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def full_name(self) -> str:
        """Customer first and last name joined."""
        return f"{self.client_first_name} {self.client_last_name}".strip()
