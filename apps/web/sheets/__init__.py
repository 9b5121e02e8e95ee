"""Sheet stores - spreadsheet-as-database backends."""

from typing import Any

from apps.web.sheets.base import SheetStore, column_index, column_letter
from apps.web.sheets.google import GoogleSheetsStore
from apps.web.sheets.memory import InMemorySheetStore

GOOGLE = "google"
MEMORY = "memory"


def get_store(backend: str, **kwargs: Any) -> SheetStore:
    """
    Get a sheet store instance for the specified backend.

    This is the main entry point for obtaining stores. Use this factory
    function rather than instantiating stores directly.

    Args:
        backend: "google" for the live spreadsheet, "memory" for development.
        **kwargs: Additional arguments passed to the store constructor.
            For GoogleSheetsStore: spreadsheet_id, service_account_email,
            private_key, timeout.

    Returns:
        A store instance implementing the SheetStore protocol.

    Raises:
        ValueError: If the backend is not supported.
        SheetsConfigError: If the Google store is missing configuration.

    Example:
        store = get_store(
            "google",
            spreadsheet_id=settings.GOOGLE_SHEET_ID,
            service_account_email=settings.GOOGLE_SERVICE_ACCOUNT_EMAIL,
            private_key=settings.GOOGLE_PRIVATE_KEY,
        )
        store.read_column("Dati", "K")
    """
    if backend == GOOGLE:
        return GoogleSheetsStore(**kwargs)
    elif backend == MEMORY:
        return InMemorySheetStore(**kwargs)
    else:
        raise ValueError(
            f"Unsupported sheet store backend: {backend}. "
            f"Supported: {GOOGLE}, {MEMORY}"
        )


__all__ = [
    "GOOGLE",
    "MEMORY",
    "GoogleSheetsStore",
    "InMemorySheetStore",
    "SheetStore",
    "column_index",
    "column_letter",
    "get_store",
]
