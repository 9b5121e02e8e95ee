"""
GloriaFood batch sync - reconciles one webhook delivery into the booking sheet.

Processes a delivery:
1. Normalize the payload to a list of records
2. Classify each record (reservation, pickup, other)
3. Build its sheet row
4. Upsert it by GloriaFood ID

Records are handled one after the other, never in parallel. A failure on
one record is logged and counted; only store configuration or credential
problems stop the batch.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone

from apps.web.gloriafood.exceptions import InvalidDeliveryError
from apps.web.gloriafood.regions import PICKUPS, RESERVATIONS, Region
from apps.web.gloriafood.rows import RecordKind, build_row, classify
from apps.web.gloriafood.services.reconciler import UpsertOutcome, upsert_row
from apps.web.sheets import GOOGLE, MEMORY, SheetStore, get_store
from apps.web.sheets.exceptions import SheetsAuthError, SheetsConfigError

logger = logging.getLogger(__name__)


@dataclass
class SyncConfig:
    """Everything a sync run needs, built once per delivery."""

    store: SheetStore
    time_zone: ZoneInfo
    reservations: Region = RESERVATIONS
    pickups: Region = PICKUPS
    clock: Callable[[], datetime] = timezone.now

    @classmethod
    def from_settings(cls) -> "SyncConfig":
        """
        Build the config from Django settings.

        Raises:
            SheetsConfigError: If the Google store is missing configuration.
        """
        backend = settings.SHEETS_BACKEND
        kwargs: dict[str, Any] = {}
        if backend == GOOGLE:
            kwargs = {
                "spreadsheet_id": settings.GOOGLE_SHEET_ID,
                "service_account_email": settings.GOOGLE_SERVICE_ACCOUNT_EMAIL,
                "private_key": settings.GOOGLE_PRIVATE_KEY,
                "timeout": settings.SHEETS_TIMEOUT,
            }
        elif backend == MEMORY:
            # Same header rows as the live booking sheet
            kwargs = {
                "sheets": {
                    region.sheet: [list(region.headers)]
                    for region in (RESERVATIONS, PICKUPS)
                }
            }
        return cls(
            store=get_store(backend, **kwargs),
            time_zone=ZoneInfo(settings.RESTAURANT_TIME_ZONE),
        )

    def region_for(self, kind: RecordKind) -> Region:
        """Sheet region a record kind is written to."""
        if kind == RecordKind.RESERVATION:
            return self.reservations
        if kind == RecordKind.PICKUP:
            return self.pickups
        raise ValueError(f"No region for {kind.value} records")

    def close(self) -> None:
        """Release the store's resources, if it holds any."""
        close = getattr(self.store, "close", None)
        if callable(close):
            close()


@dataclass
class TypeCounts:
    """Inserted/updated counts for one record kind."""

    inserted: int = 0
    updated: int = 0

    def add(self, outcome: UpsertOutcome) -> None:
        if outcome == UpsertOutcome.INSERTED:
            self.inserted += 1
        else:
            self.updated += 1


@dataclass
class SyncResult:
    """Aggregate outcome of one delivery."""

    reservations: TypeCounts = field(default_factory=TypeCounts)
    pickups: TypeCounts = field(default_factory=TypeCounts)
    skipped: int = 0
    failed: int = 0
    failed_ids: list[str] = field(default_factory=list)

    @property
    def processed(self) -> int:
        """Records written, inserted or updated."""
        return (
            self.reservations.inserted
            + self.reservations.updated
            + self.pickups.inserted
            + self.pickups.updated
        )

    @property
    def updated(self) -> int:
        """Records that replaced an existing row."""
        return self.reservations.updated + self.pickups.updated

    def counts_for(self, kind: RecordKind) -> TypeCounts:
        return self.reservations if kind == RecordKind.RESERVATION else self.pickups

    def as_dict(self) -> dict[str, Any]:
        """Response body fields for the webhook caller."""
        return {
            "processed": self.processed,
            "updated": self.updated,
            "skipped": self.skipped,
            "failed": self.failed,
            "failed_ids": self.failed_ids,
            "reservations": {
                "inserted": self.reservations.inserted,
                "updated": self.reservations.updated,
            },
            "pickups": {
                "inserted": self.pickups.inserted,
                "updated": self.pickups.updated,
            },
        }


def normalize_delivery(payload: Any) -> list[Any]:
    """
    Turn a webhook body into a list of raw records.

    GloriaFood sends either {"orders": [...]} or a single order object; a
    bare JSON list is accepted too.

    Raises:
        InvalidDeliveryError: If the body is neither an object nor a list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        orders = payload.get("orders")
        if isinstance(orders, list):
            return orders
        return [payload]
    raise InvalidDeliveryError(
        f"Delivery must be a JSON object or list, got {type(payload).__name__}"
    )


def _raw_id(raw: Any) -> str:
    return str(raw.get("id", "")) if isinstance(raw, dict) else ""


def sync_orders(orders: list[Any], config: SyncConfig) -> SyncResult:
    """
    Reconcile a list of raw GloriaFood records into the booking sheet.

    Args:
        orders: Raw order objects, in delivery order.
        config: Store, time zone and regions to use.

    Returns:
        Aggregate counts. Per-record failures are counted, not raised.

    Raises:
        SheetsConfigError: If the store is not configured.
        SheetsAuthError: If the store rejects our credentials.
    """
    result = SyncResult()

    for raw in orders:
        try:
            record = classify(raw)
            if record.kind == RecordKind.UNRECOGNIZED:
                result.skipped += 1
                logger.info(
                    "Skipped GloriaFood record %s: type %r not synced",
                    _raw_id(raw) or "<no id>",
                    raw.get("type") if isinstance(raw, dict) else None,
                )
                continue

            region = config.region_for(record.kind)
            # Stamp is taken right before the write, not when the batch arrived
            row = build_row(record, region, config.time_zone, config.clock())
            outcome = upsert_row(config.store, row)
            result.counts_for(record.kind).add(outcome)

        except (SheetsConfigError, SheetsAuthError):
            raise
        except Exception as e:
            result.failed += 1
            result.failed_ids.append(_raw_id(raw))
            logger.exception(
                "Failed to sync GloriaFood record %s: %s", _raw_id(raw), e
            )

    logger.info(
        "GloriaFood sync done: %d processed (%d updated), %d skipped, %d failed",
        result.processed,
        result.updated,
        result.skipped,
        result.failed,
    )
    return result

