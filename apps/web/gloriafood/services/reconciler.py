"""
Booking sheet reconciler - upsert rows keyed by GloriaFood ID.

Algorithm per row:
1. Scan the region's ID column, top to bottom
2. First row whose cell equals the ID wins
3. Match: rewrite that whole row; no match: append

The scan and the write are two separate calls with no lock in between, so
two deliveries for the same ID arriving together can both append. The
sheet has no compare-and-swap; downstream readers must tolerate the odd
duplicate row.
"""

import logging
from enum import Enum

from apps.web.gloriafood.regions import Region
from apps.web.gloriafood.rows import ReconciledRow
from apps.web.sheets.base import SheetStore
from apps.web.sheets.exceptions import SheetsAPIError

logger = logging.getLogger(__name__)


class UpsertOutcome(str, Enum):
    """What an upsert did to the sheet."""

    INSERTED = "inserted"
    UPDATED = "updated"


def find_row(store: SheetStore, region: Region, external_id: str) -> int | None:
    """
    Find the 1-indexed row holding `external_id` in the region's ID column.

    If several rows match (a past race), only the first is returned.
    A failed lookup is reported as "not found": appending a possible
    duplicate is better than dropping a booking.

    Raises:
        SheetsAuthError: If the store rejects our credentials.
        SheetsConfigError: If the store is not configured.
    """
    try:
        cells = store.read_column(region.sheet, region.id_column)
    except SheetsAPIError as e:
        logger.warning(
            "Lookup of %s in %s failed, treating as new: %s",
            external_id,
            region.sheet,
            e,
        )
        return None

    for index, cell in enumerate(cells):
        if cell == external_id:
            return index + 1
    return None


def upsert_row(store: SheetStore, row: ReconciledRow) -> UpsertOutcome:
    """
    Insert or fully overwrite the row for `row.external_id`.

    Returns:
        Whether the row was appended or updated in place.

    Raises:
        SheetsAPIError: If the write fails.
        SheetsAuthError: If the store rejects our credentials.
        SheetsConfigError: If the store is not configured.
    """
    region = row.region
    existing = find_row(store, region, row.external_id)

    if existing is not None:
        store.overwrite_row(region.sheet, existing, row.cells)
        logger.info(
            "Updated %s row %d for GloriaFood ID %s",
            region.sheet,
            existing,
            row.external_id,
        )
        return UpsertOutcome.UPDATED

    store.append_row(region.sheet, row.cells)
    logger.info("Appended %s row for GloriaFood ID %s", region.sheet, row.external_id)
    return UpsertOutcome.INSERTED
