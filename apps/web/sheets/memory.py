"""In-memory sheet store for development and testing."""

from collections.abc import Sequence

from apps.web.sheets.base import CellValue, column_index
from apps.web.sheets.exceptions import SheetsAPIError, SheetsAuthError


class InMemorySheetStore:
    """
    In-memory sheet store for development and testing.

    Provides configurable behavior for simulating:
    - Pre-populated sheets (header rows, existing bookings)
    - Unreachable store on reads
    - Failing writes for specific rows
    - Rejected credentials

    Usage:
        store = InMemorySheetStore(
            sheets={"Dati": [["Giorno", "Data", ...]]},
            fail_writes_for={"555"},
        )
    """

    def __init__(
        self,
        sheets: dict[str, list[list[CellValue]]] | None = None,
        fail_reads: bool = False,
        fail_writes_for: set[str] | None = None,
        fail_auth: bool = False,
    ) -> None:
        """
        Initialize the in-memory store.

        Args:
            sheets: Initial contents, sheet name -> rows. Copied.
            fail_reads: If True, read_column raises SheetsAPIError.
            fail_writes_for: Writes of any row containing one of these cell
                values raise SheetsAPIError.
            fail_auth: If True, every call raises SheetsAuthError.
        """
        self._sheets: dict[str, list[list[CellValue]]] = {
            name: [list(row) for row in rows] for name, rows in (sheets or {}).items()
        }
        self._fail_reads = fail_reads
        self._fail_writes_for = fail_writes_for or set()
        self._fail_auth = fail_auth

        # Call log for assertions: (operation, sheet, row_number)
        self.calls: list[tuple[str, str, int | None]] = []

    # =========================================================================
    # Inspection helpers (for tests)
    # =========================================================================

    def rows(self, sheet: str) -> list[list[CellValue]]:
        """Return a copy of all rows of a sheet."""
        return [list(row) for row in self._sheets.get(sheet, [])]

    def set_fail_reads(self, fail: bool = True) -> None:
        """Make subsequent reads fail (or succeed again)."""
        self._fail_reads = fail

    # =========================================================================
    # SheetStore protocol
    # =========================================================================

    def read_column(self, sheet: str, column: str) -> list[str]:
        """Read a whole column, header included."""
        self._check_auth(sheet)
        self.calls.append(("read_column", sheet, None))
        if self._fail_reads:
            raise SheetsAPIError("Mock read failure", sheet=sheet, status_code=503)

        index = column_index(column) - 1
        return [
            str(row[index]) if index < len(row) else ""
            for row in self._sheets.get(sheet, [])
        ]

    def append_row(self, sheet: str, row: Sequence[CellValue]) -> None:
        """Append a row at the end of the sheet."""
        self._check_auth(sheet)
        self._check_write(sheet, row)
        rows = self._sheets.setdefault(sheet, [])
        rows.append(list(row))
        self.calls.append(("append_row", sheet, len(rows)))

    def overwrite_row(
        self, sheet: str, row_number: int, row: Sequence[CellValue]
    ) -> None:
        """Replace an existing row, padding the sheet if needed."""
        self._check_auth(sheet)
        self._check_write(sheet, row)
        if row_number < 1:
            raise SheetsAPIError(f"Invalid row number: {row_number}", sheet=sheet)

        rows = self._sheets.setdefault(sheet, [])
        while len(rows) < row_number:
            rows.append([])
        rows[row_number - 1] = list(row)
        self.calls.append(("overwrite_row", sheet, row_number))

    # =========================================================================
    # Failure injection
    # =========================================================================

    def _check_auth(self, sheet: str) -> None:
        if self._fail_auth:
            raise SheetsAuthError("Mock authentication failure", sheet=sheet)

    def _check_write(self, sheet: str, row: Sequence[CellValue]) -> None:
        if any(str(cell) in self._fail_writes_for for cell in row):
            raise SheetsAPIError("Mock write failure", sheet=sheet, status_code=500)
