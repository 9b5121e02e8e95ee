"""
Record classification and row building for the booking sheet.

GloriaFood pushes table reservations and pickup orders through the same
webhook. Each kind goes to its own sheet tab with its own column layout;
the two layouts share nothing positionally.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from tre_schemas import GloriaFoodOrder, GloriaFoodOrderType

from apps.web.core.formatting import format_euro
from apps.web.gloriafood.formatters import (
    ASAP_MARKER,
    SOURCE_ONLINE,
    format_items,
    is_asap,
    local_date_parts,
    payment_label,
    pickup_status_label,
    reservation_status_label,
    updated_stamp,
)
from apps.web.gloriafood.regions import Region
from apps.web.sheets.base import CellValue


class RecordKind(str, Enum):
    """What a GloriaFood record is, as far as the booking sheet cares."""

    RESERVATION = "reservation"
    PICKUP = "pickup"
    UNRECOGNIZED = "unrecognized"


_KIND_BY_TYPE = {
    GloriaFoodOrderType.TABLE_RESERVATION.value: RecordKind.RESERVATION,
    GloriaFoodOrderType.PICKUP.value: RecordKind.PICKUP,
}


@dataclass(frozen=True)
class ClassifiedRecord:
    """A raw record tagged with its kind; `order` is None when unrecognized."""

    kind: RecordKind
    order: GloriaFoodOrder | None = None


@dataclass(frozen=True)
class ReconciledRow:
    """A full sheet row plus the region it belongs to."""

    region: Region
    external_id: str
    cells: tuple[CellValue, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.region.width:
            raise ValueError(
                f"Row for {self.region.sheet} has {len(self.cells)} cells, "
                f"expected {self.region.width}"
            )
        if str(self.cells[self.region.id_index]) != self.external_id:
            raise ValueError(
                f"Row for {self.region.sheet} does not carry ID {self.external_id} "
                f"in column {self.region.id_column}"
            )


def classify(raw: Any) -> ClassifiedRecord:
    """
    Classify one raw GloriaFood order object.

    Only the `type` field decides the kind. Unrecognized records are not
    validated further.

    Raises:
        pydantic.ValidationError: If a reservation or pickup cannot be
            parsed (for example, it has no ID).
    """
    if not isinstance(raw, dict):
        return ClassifiedRecord(kind=RecordKind.UNRECOGNIZED)

    order_type = raw.get("type")
    kind = _KIND_BY_TYPE.get(order_type) if isinstance(order_type, str) else None
    if kind is None:
        return ClassifiedRecord(kind=RecordKind.UNRECOGNIZED)

    return ClassifiedRecord(kind=kind, order=GloriaFoodOrder.model_validate(raw))


def build_reservation_row(
    order: GloriaFoodOrder, region: Region, tz: ZoneInfo, now: datetime
) -> ReconciledRow:
    """Build a table reservation row (A..L, ID in K)."""
    when = local_date_parts(order.fulfill_at, tz)
    cells: tuple[CellValue, ...] = (
        when.weekday,
        when.date,
        when.time,
        order.full_name,
        order.client_phone,
        order.client_email,
        order.persons if order.persons is not None else "",
        reservation_status_label(order.status),
        SOURCE_ONLINE,
        order.instructions,
        order.id,
        updated_stamp(now, tz),
    )
    return ReconciledRow(region=region, external_id=order.id, cells=cells)


def build_pickup_row(
    order: GloriaFoodOrder, region: Region, tz: ZoneInfo, now: datetime
) -> ReconciledRow:
    """Build a pickup order row (A..M, ID in L)."""
    when = local_date_parts(order.fulfill_at, tz)

    pickup_time = when.time
    if pickup_time and is_asap(order.fulfill_at, order.accepted_at):
        pickup_time = f"{pickup_time} {ASAP_MARKER}"

    cells: tuple[CellValue, ...] = (
        when.weekday,
        when.date,
        pickup_time,
        order.full_name,
        order.client_phone,
        order.client_email,
        format_euro(order.total_price),
        payment_label(order.payment),
        format_items(order.items),
        pickup_status_label(order.status),
        order.instructions,
        order.id,
        updated_stamp(now, tz),
    )
    return ReconciledRow(region=region, external_id=order.id, cells=cells)


def build_row(
    record: ClassifiedRecord, region: Region, tz: ZoneInfo, now: datetime
) -> ReconciledRow:
    """
    Build the sheet row for a classified record.

    Raises:
        ValueError: If the record is unrecognized or the region's layout does
            not match the record kind.
    """
    if record.order is None or record.kind == RecordKind.UNRECOGNIZED:
        raise ValueError("Cannot build a row for an unrecognized record")

    if record.kind == RecordKind.RESERVATION:
        return build_reservation_row(record.order, region, tz, now)
    return build_pickup_row(record.order, region, tz, now)
