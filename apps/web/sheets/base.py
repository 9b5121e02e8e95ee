"""Base sheet store protocol - interface for spreadsheet-as-database access."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

CellValue = str | int | float

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def column_letter(index: int) -> str:
    """Convert a 1-based column index to its A1 letter (1 -> A, 27 -> AA)."""
    if index < 1:
        raise ValueError(f"Column index must be >= 1, got {index}")
    letters = ""
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = _ALPHABET[remainder] + letters
    return letters


def column_index(letter: str) -> int:
    """Convert an A1 column letter to its 1-based index (A -> 1, AA -> 27)."""
    letter = letter.strip().upper()
    if not letter or any(ch not in _ALPHABET for ch in letter):
        raise ValueError(f"Invalid column letter: {letter!r}")
    index = 0
    for ch in letter:
        index = index * 26 + _ALPHABET.index(ch) + 1
    return index


@runtime_checkable
class SheetStore(Protocol):
    """
    Protocol defining the interface for the tabular store.

    A store is a grid split into named sheets (tabs). Rows are 1-indexed and
    columns are addressed by letter, as in A1 notation. Rows written through
    this interface always start at column A.
    """

    def read_column(self, sheet: str, column: str) -> list[str]:
        """
        Read a whole column of a sheet, top to bottom, header included.

        Args:
            sheet: Sheet (tab) name.
            column: Column letter, e.g. "K".

        Returns:
            Cell values as strings, one per row. Empty cells are "".

        Raises:
            SheetsAPIError: If the read fails or the response is malformed.
            SheetsAuthError: If the store rejects our credentials.
            SheetsConfigError: If the store is not configured.
        """
        ...

    def append_row(self, sheet: str, row: Sequence[CellValue]) -> None:
        """
        Append a row after the last non-empty row of a sheet.

        Raises:
            SheetsAPIError: If the write fails.
        """
        ...

    def overwrite_row(
        self, sheet: str, row_number: int, row: Sequence[CellValue]
    ) -> None:
        """
        Replace the cells of an existing row, from column A to len(row).

        Args:
            sheet: Sheet (tab) name.
            row_number: 1-indexed row number.
            row: Full row contents.

        Raises:
            SheetsAPIError: If the write fails.
        """
        ...
