"""GloriaFood services - booking sheet reconciliation and batch sync."""

from apps.web.gloriafood.services.reconciler import (
    UpsertOutcome,
    find_row,
    upsert_row,
)
from apps.web.gloriafood.services.sync import (
    SyncConfig,
    SyncResult,
    TypeCounts,
    normalize_delivery,
    sync_orders,
)

__all__ = [
    "SyncConfig",
    "SyncResult",
    "TypeCounts",
    "UpsertOutcome",
    "find_row",
    "normalize_delivery",
    "sync_orders",
    "upsert_row",
]
