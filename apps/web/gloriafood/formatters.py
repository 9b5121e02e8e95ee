"""
Display formatting for GloriaFood records written to the booking sheet.

All date/time output is in the restaurant's time zone, never the server's.
Nothing in here raises on bad input: a value that cannot be formatted
becomes "" so the booking is still written.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from tre_schemas import GloriaFoodItem, GloriaFoodPayment, GloriaFoodStatus

from apps.web.core.formatting import WEEKDAYS_IT

logger = logging.getLogger(__name__)

SOURCE_ONLINE = "🌐 Online"

# Pickups requested less than this long after acceptance are flagged "ASAP".
# GloriaFood has no such flag; this is our own guess.
ASAP_THRESHOLD = timedelta(hours=2)
ASAP_MARKER = "⚡ ASAP"

RESERVATION_STATUS_LABELS = {
    GloriaFoodStatus.ACCEPTED.value: "✅ Confermata",
    GloriaFoodStatus.REJECTED.value: "❌ Cancellata",
    GloriaFoodStatus.CANCELED.value: "❌ Cancellata",
    GloriaFoodStatus.TIMED_OUT.value: "❌ Cancellata",
    GloriaFoodStatus.PENDING.value: "⏳ In attesa",
}

PICKUP_STATUS_LABELS = {
    GloriaFoodStatus.ACCEPTED.value: "✅ Accettato",
    GloriaFoodStatus.REJECTED.value: "❌ Rifiutato",
    GloriaFoodStatus.CANCELED.value: "❌ Annullato",
    GloriaFoodStatus.TIMED_OUT.value: "⌛ Scaduto",
    GloriaFoodStatus.PENDING.value: "⏳ In attesa",
}

PAYMENT_LABELS = {
    GloriaFoodPayment.CASH.value: "💵 Contanti",
    GloriaFoodPayment.CARD.value: "💳 Carta al ritiro",
    GloriaFoodPayment.CARD_PHONE.value: "📞 Carta (telefono)",
    GloriaFoodPayment.ONLINE.value: "🌐 Online",
}


@dataclass(frozen=True)
class DateParts:
    """Weekday, date and time of an instant, as shown in the sheet."""

    weekday: str
    date: str
    time: str


BLANK_DATE_PARTS = DateParts(weekday="", date="", time="")


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse a GloriaFood ISO-8601 timestamp.

    Naive timestamps are taken as UTC. Returns None for missing values and,
    with a warning, for values that do not parse.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (TypeError, ValueError):
        logger.warning("Unparsable GloriaFood timestamp: %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def local_date_parts(value: str | None, tz: ZoneInfo) -> DateParts:
    """Split a timestamp into weekday/date/time in the given time zone."""
    instant = parse_timestamp(value)
    if instant is None:
        return BLANK_DATE_PARTS

    try:
        local = instant.astimezone(tz)
    except (OverflowError, ValueError):
        logger.warning("GloriaFood timestamp out of range: %r", value)
        return BLANK_DATE_PARTS

    return DateParts(
        weekday=WEEKDAYS_IT[local.weekday()],
        date=local.strftime("%d/%m/%Y"),
        time=local.strftime("%H:%M"),
    )


def updated_stamp(now: datetime, tz: ZoneInfo) -> str:
    """Last-updated marker, e.g. "21/01 15:30"."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    try:
        return now.astimezone(tz).strftime("%d/%m %H:%M")
    except (OverflowError, ValueError):
        logger.warning("Clock value out of range: %r", now)
        return ""


def format_items(items: list[GloriaFoodItem]) -> str:
    """
    Summarize line items as "2x Margherita, 1x Coca Cola".

    Items without a name are left out, with a warning.
    """
    named = [item for item in items if item.name]
    if len(named) < len(items):
        logger.warning(
            "Skipped %d GloriaFood item(s) without a name", len(items) - len(named)
        )
    return ", ".join(f"{item.quantity}x {item.name}" for item in named)


def reservation_status_label(status: str) -> str:
    """Reservation status label; unknown codes read as pending."""
    return RESERVATION_STATUS_LABELS.get(
        status, RESERVATION_STATUS_LABELS[GloriaFoodStatus.PENDING.value]
    )


def pickup_status_label(status: str) -> str:
    """Pickup order status label; unknown codes read as pending."""
    return PICKUP_STATUS_LABELS.get(
        status, PICKUP_STATUS_LABELS[GloriaFoodStatus.PENDING.value]
    )


def payment_label(code: str) -> str:
    """Payment method label; unknown codes are shown as sent."""
    if not code:
        return ""
    return PAYMENT_LABELS.get(code.upper(), code)


def is_asap(fulfill_at: str | None, accepted_at: str | None) -> bool:
    """
    Whether a pickup looks like an "as soon as possible" order.

    True when the requested time is less than ASAP_THRESHOLD after acceptance,
    or when either timestamp is missing.
    """
    fulfill = parse_timestamp(fulfill_at)
    accepted = parse_timestamp(accepted_at)
    if fulfill is None or accepted is None:
        return True
    return fulfill - accepted < ASAP_THRESHOLD
