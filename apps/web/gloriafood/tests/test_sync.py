"""Tests for GloriaFood batch sync into the booking sheet."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from apps.web.gloriafood.exceptions import InvalidDeliveryError
from apps.web.gloriafood.regions import PICKUPS, RESERVATIONS
from apps.web.gloriafood.rows import RecordKind
from apps.web.gloriafood.services import (
    SyncConfig,
    SyncResult,
    normalize_delivery,
    sync_orders,
)
from apps.web.sheets import InMemorySheetStore
from apps.web.sheets.exceptions import SheetsAuthError, SheetsConfigError

ANNA_ROW = [
    "Sabato",
    "25/01/2025",
    "20:30",
    "Anna Bianchi",
    "",
    "",
    4,
    "✅ Confermata",
    "🌐 Online",
    "",
    "555",
    "21/01 15:30",
]


def _reservation(order_id: str, **extra) -> dict:
    return {
        "id": order_id,
        "type": "table_reservation",
        "fulfill_at": "2025-02-14T19:00:00Z",
        "client_first_name": "Cliente",
        "client_last_name": order_id,
        "persons": 4,
        "status": "accepted",
        **extra,
    }


def _deliver(payload, config: SyncConfig) -> SyncResult:
    return sync_orders(normalize_delivery(payload), config)


def _ids(store: InMemorySheetStore, region) -> list[str]:
    return [str(row[region.id_index]) for row in store.rows(region.sheet)[1:]]


# =============================================================================
# Payload shapes
# =============================================================================


class TestNormalizeDelivery:
    """Tests for normalize_delivery."""

    def test_orders_envelope(self):
        assert normalize_delivery({"orders": [{"id": 1}, {"id": 2}]}) == [
            {"id": 1},
            {"id": 2},
        ]

    def test_single_order(self):
        assert normalize_delivery({"id": 1, "type": "pickup"}) == [
            {"id": 1, "type": "pickup"}
        ]

    def test_bare_list(self):
        assert normalize_delivery([{"id": 1}]) == [{"id": 1}]

    def test_empty_envelope(self):
        assert normalize_delivery({"orders": []}) == []

    @pytest.mark.parametrize("payload", ["order", 42, None, True])
    def test_invalid(self, payload):
        with pytest.raises(InvalidDeliveryError):
            normalize_delivery(payload)


# =============================================================================
# Sync
# =============================================================================


class TestSyncOrders:
    """Tests for sync_orders."""

    def test_new_reservation(self, store, sync_config, reservation_payload):
        result = _deliver(reservation_payload, sync_config)

        assert result.reservations.inserted == 1
        assert result.processed == 1
        assert result.updated == 0
        assert store.rows("Dati") == [list(RESERVATIONS.headers), ANNA_ROW]

    def test_resubmission_updates_same_row(
        self, store, sync_config, reservation_payload
    ):
        _deliver(reservation_payload, sync_config)

        result = _deliver(reservation_payload, sync_config)

        assert result.reservations.updated == 1
        assert result.reservations.inserted == 0
        assert store.rows("Dati") == [list(RESERVATIONS.headers), ANNA_ROW]

    def test_status_change_rewrites_row(
        self, store, sync_config, reservation_payload
    ):
        _deliver(reservation_payload, sync_config)
        reservation_payload["status"] = "canceled"

        _deliver(reservation_payload, sync_config)

        rows = store.rows("Dati")
        assert len(rows) == 2
        assert rows[1][7] == "❌ Cancellata"

    def test_new_pickup(self, store, sync_config, pickup_payload):
        result = _deliver({"orders": [pickup_payload]}, sync_config)

        assert result.pickups.inserted == 1
        assert _ids(store, PICKUPS) == ["777"]
        assert store.rows("Dati") == [list(RESERVATIONS.headers)]

    def test_types_never_mix(self, store, sync_config, reservation_payload, pickup_payload):
        """The same ID can live in both tabs without collision."""
        pickup_payload["id"] = 555

        result = sync_orders([reservation_payload, pickup_payload], sync_config)

        assert result.reservations.inserted == 1
        assert result.pickups.inserted == 1
        assert _ids(store, RESERVATIONS) == ["555"]
        assert _ids(store, PICKUPS) == ["555"]

    def test_unrecognized_skipped(self, store, sync_config):
        result = sync_orders(
            [{"id": 900, "type": "delivery"}, {"id": 901, "type": "dine_in"}, "junk"],
            sync_config,
        )

        assert result.skipped == 3
        assert result.processed == 0
        assert result.failed == 0
        assert store.calls == []

    def test_partial_failure(self):
        store = InMemorySheetStore(
            sheets={"Dati": [list(RESERVATIONS.headers)]}, fail_writes_for={"1002"}
        )
        config = SyncConfig(store=store, time_zone=ZoneInfo("Europe/Rome"))
        orders = [_reservation("1001"), _reservation("1002"), _reservation("1003")]

        result = sync_orders(orders, config)

        assert result.reservations.inserted == 2
        assert result.failed == 1
        assert result.failed_ids == ["1002"]
        assert _ids(store, RESERVATIONS) == ["1001", "1003"]

    def test_invalid_record_counted_as_failed(self, store, sync_config):
        orders = [{"type": "pickup", "client_first_name": "Senza ID"}, _reservation("1001")]

        result = sync_orders(orders, sync_config)

        assert result.failed == 1
        assert result.failed_ids == [""]
        assert result.reservations.inserted == 1

    def test_bad_timestamp_still_written(self, store, sync_config):
        result = sync_orders([_reservation("1001", fulfill_at="presto")], sync_config)

        assert result.reservations.inserted == 1
        row = store.rows("Dati")[1]
        assert row[:3] == ["", "", ""]
        assert row[3] == "Cliente 1001"

    def test_out_of_range_timestamp_still_written(self, store, sync_config):
        result = sync_orders(
            [_reservation("1001", fulfill_at="9999-12-31T23:59:00Z", persons=2)],
            sync_config,
        )

        assert result.reservations.inserted == 1
        assert result.failed == 0
        row = store.rows("Dati")[1]
        assert row[:3] == ["", "", ""]
        assert row[6] == 2
        assert row[10] == "1001"

    def test_lookup_failure_appends(self, store, sync_config, reservation_payload):
        _deliver(reservation_payload, sync_config)
        store.set_fail_reads()

        result = _deliver(reservation_payload, sync_config)

        assert result.reservations.inserted == 1
        assert _ids(store, RESERVATIONS) == ["555", "555"]

    def test_auth_failure_aborts(self, reservation_payload):
        config = SyncConfig(
            store=InMemorySheetStore(fail_auth=True), time_zone=ZoneInfo("Europe/Rome")
        )

        with pytest.raises(SheetsAuthError):
            _deliver(reservation_payload, config)

    def test_stamp_taken_per_record(self, store):
        times = iter(
            [
                datetime(2025, 1, 21, 14, 30, tzinfo=UTC),
                datetime(2025, 1, 21, 14, 31, tzinfo=UTC),
            ]
        )
        config = SyncConfig(
            store=store, time_zone=ZoneInfo("Europe/Rome"), clock=lambda: next(times)
        )

        sync_orders([_reservation("1001"), _reservation("1002")], config)

        stamps = [row[-1] for row in store.rows("Dati")[1:]]
        assert stamps == ["21/01 15:30", "21/01 15:31"]

    def test_order_preserved(self, store, sync_config):
        sync_orders([_reservation(str(i)) for i in range(3001, 3006)], sync_config)

        assert _ids(store, RESERVATIONS) == ["3001", "3002", "3003", "3004", "3005"]


# =============================================================================
# Result and config
# =============================================================================


class TestSyncResult:
    """Tests for SyncResult."""

    def test_as_dict(self, sync_config, reservation_payload, pickup_payload):
        sync_orders([reservation_payload], sync_config)

        result = sync_orders(
            [reservation_payload, pickup_payload, {"id": 1, "type": "delivery"}],
            sync_config,
        )

        assert result.as_dict() == {
            "processed": 2,
            "updated": 1,
            "skipped": 1,
            "failed": 0,
            "failed_ids": [],
            "reservations": {"inserted": 0, "updated": 1},
            "pickups": {"inserted": 1, "updated": 0},
        }

    def test_empty(self):
        assert SyncResult().as_dict()["processed"] == 0


class TestSyncConfig:
    """Tests for SyncConfig."""

    def test_from_settings_memory(self, settings):
        settings.SHEETS_BACKEND = "memory"
        settings.RESTAURANT_TIME_ZONE = "Europe/Rome"

        config = SyncConfig.from_settings()

        assert isinstance(config.store, InMemorySheetStore)
        assert config.store.rows("Dati") == [list(RESERVATIONS.headers)]
        assert config.store.rows("Asporto") == [list(PICKUPS.headers)]
        assert config.time_zone == ZoneInfo("Europe/Rome")
        assert config.reservations == RESERVATIONS
        assert config.pickups == PICKUPS

    def test_from_settings_google_unconfigured(self, settings):
        settings.SHEETS_BACKEND = "google"
        settings.GOOGLE_SHEET_ID = ""

        with pytest.raises(SheetsConfigError):
            SyncConfig.from_settings()

    def test_region_for(self, sync_config):
        assert sync_config.region_for(RecordKind.RESERVATION) == RESERVATIONS
        assert sync_config.region_for(RecordKind.PICKUP) == PICKUPS
        with pytest.raises(ValueError):
            sync_config.region_for(RecordKind.UNRECOGNIZED)
