"""
Pytest configuration for Django app tests.
"""

from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from apps.web.gloriafood.regions import PICKUPS, RESERVATIONS
from apps.web.gloriafood.services import SyncConfig
from apps.web.sheets import InMemorySheetStore

ROME = ZoneInfo("Europe/Rome")

# 15:30 in Rome
FIXED_NOW = datetime(2025, 1, 21, 14, 30, tzinfo=UTC)
FIXED_STAMP = "21/01 15:30"


@pytest.fixture
def store() -> InMemorySheetStore:
    """Booking sheet with header rows and no bookings."""
    return InMemorySheetStore(
        sheets={
            RESERVATIONS.sheet: [list(RESERVATIONS.headers)],
            PICKUPS.sheet: [list(PICKUPS.headers)],
        }
    )


@pytest.fixture
def sync_config(store: InMemorySheetStore) -> SyncConfig:
    """Sync config on the in-memory store with a frozen clock."""
    return SyncConfig(store=store, time_zone=ROME, clock=lambda: FIXED_NOW)


@pytest.fixture
def reservation_payload() -> dict[str, Any]:
    """A confirmed table reservation as GloriaFood sends it."""
    return {
        "id": 555,
        "type": "table_reservation",
        "fulfill_at": "2025-01-25T19:30:00Z",
        "client_first_name": "Anna",
        "client_last_name": "Bianchi",
        "persons": 4,
        "status": "accepted",
    }


@pytest.fixture
def pickup_payload() -> dict[str, Any]:
    """An accepted pickup order, requested for three hours after acceptance."""
    return {
        "id": 777,
        "type": "pickup",
        "accepted_at": "2025-01-24T16:00:00.000Z",
        "fulfill_at": "2025-01-24T19:00:00.000Z",
        "client_first_name": "Marco",
        "client_last_name": "Rossi",
        "client_phone": "+39 333 1234567",
        "client_email": "marco.rossi@example.com",
        "total_price": 27.5,
        "payment": "CASH",
        "items": [
            {"name": "Margherita", "quantity": 2, "price": 7.5},
            {"name": "Coca Cola", "quantity": 1, "price": 2.5},
        ],
        "instructions": "Citofono Rossi",
        "status": "accepted",
    }
