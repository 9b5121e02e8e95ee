"""Google Sheets store - spreadsheet access through the Sheets REST API v4."""

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from apps.web.sheets.base import CellValue, column_letter
from apps.web.sheets.exceptions import (
    SheetsAPIError,
    SheetsAuthError,
    SheetsConfigError,
    SheetsRateLimitError,
)

logger = logging.getLogger(__name__)


class GoogleSheetsStore:
    """
    Google Sheets store implementing the SheetStore protocol.

    Authenticates as a service account (the spreadsheet must be shared with
    the service account email) and talks to the values endpoints:
    - values.get for column scans
    - values.append for new rows
    - values.update for in-place row rewrites

    API Reference: https://developers.google.com/sheets/api/reference/rest
    """

    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
    TOKEN_URI = "https://oauth2.googleapis.com/token"

    # Values are parsed as if typed in the UI (numbers stay numbers)
    VALUE_INPUT_OPTION = "USER_ENTERED"

    # Text starting with these would be parsed as a formula; a leading
    # apostrophe keeps it literal and is not shown in the cell
    FORMULA_PREFIXES = ("=", "+", "-", "@")

    # Retry configuration
    MAX_RETRIES = 3
    RETRY_BACKOFF_BASE = 2.0  # Exponential backoff base

    def __init__(
        self,
        spreadsheet_id: str,
        service_account_email: str = "",
        private_key: str = "",
        credentials: Any = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the Google Sheets store.

        Args:
            spreadsheet_id: ID of the target spreadsheet (from its URL).
            service_account_email: Service account client email.
            private_key: Service account PEM key. Literal "\\n" sequences, as
                stored in most env files, are turned into newlines.
            credentials: Pre-built google-auth credentials (testing).
            http_client: Optional HTTP client for dependency injection (testing).
            timeout: Request timeout in seconds.

        Raises:
            SheetsConfigError: If the spreadsheet ID or credentials are missing.
        """
        if not spreadsheet_id:
            raise SheetsConfigError("GOOGLE_SHEET_ID is not configured")

        if credentials is None:
            credentials = self._build_credentials(service_account_email, private_key)

        self.spreadsheet_id = spreadsheet_id
        self._credentials = credentials
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    @classmethod
    def _build_credentials(
        cls, service_account_email: str, private_key: str
    ) -> service_account.Credentials:
        """Build service account credentials from the configured key pair."""
        if not service_account_email or not private_key:
            raise SheetsConfigError(
                "Google service account credentials are not configured"
            )
        try:
            return service_account.Credentials.from_service_account_info(
                {
                    "client_email": service_account_email,
                    "private_key": private_key.replace("\\n", "\n"),
                    "token_uri": cls.TOKEN_URI,
                },
                scopes=cls.SCOPES,
            )
        except ValueError as e:
            raise SheetsConfigError(f"Invalid service account key: {e}") from e

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    def _access_token(self) -> str:
        """Return a valid bearer token, refreshing it when expired."""
        if not self._credentials.valid:
            try:
                self._credentials.refresh(GoogleAuthRequest())
            except RefreshError as e:
                raise SheetsAuthError(f"Google token refresh failed: {e}") from e
        return str(self._credentials.token)

    @classmethod
    def _literal_row(cls, row: Sequence[CellValue]) -> list[CellValue]:
        """Quote text cells the sheet would otherwise evaluate."""
        return [
            f"'{cell}"
            if isinstance(cell, str) and cell.startswith(cls.FORMULA_PREFIXES)
            else cell
            for cell in row
        ]

    def _values_url(self, range_: str) -> str:
        return f"{self.BASE_URL}/{self.spreadsheet_id}/values/{range_}"

    def _request_with_retry(
        self,
        method: str,
        url: str,
        sheet: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request with retry logic.

        Transport errors and 5xx responses are retried with exponential
        backoff. Other 4xx responses fail immediately.

        Raises:
            SheetsAPIError: If request fails after retries
            SheetsAuthError: If the token is rejected
            SheetsRateLimitError: If rate limit exceeded
        """
        headers = {
            "Authorization": f"Bearer {self._access_token()}",
            **kwargs.pop("headers", {}),
        }

        last_error: Exception | None = None

        for attempt in range(self.MAX_RETRIES):
            try:
                response = self._client.request(method, url, headers=headers, **kwargs)
            except httpx.RequestError as e:
                last_error = e
            else:
                if response.status_code == 429:
                    retry_after = int(response.headers.get("Retry-After", "60"))
                    raise SheetsRateLimitError(
                        "Google Sheets rate limit exceeded",
                        sheet=sheet,
                        retry_after=retry_after,
                    )

                if response.status_code in (401, 403):
                    raise SheetsAuthError(
                        f"Google Sheets rejected credentials: {response.status_code}",
                        sheet=sheet,
                    )

                if response.status_code < 400:
                    return response

                if response.status_code < 500:
                    raise SheetsAPIError(
                        f"Google Sheets request failed: {response.status_code}",
                        sheet=sheet,
                        status_code=response.status_code,
                        response_body=response.text,
                    )

                last_error = SheetsAPIError(
                    f"Google Sheets server error: {response.status_code}",
                    sheet=sheet,
                    status_code=response.status_code,
                    response_body=response.text,
                )

            if attempt < self.MAX_RETRIES - 1:
                backoff = self.RETRY_BACKOFF_BASE**attempt
                logger.warning(
                    "Sheets API failed (attempt %d/%d), retry in %.1fs: %s",
                    attempt + 1,
                    self.MAX_RETRIES,
                    backoff,
                    str(last_error),
                )
                time.sleep(backoff)

        # All retries exhausted
        raise SheetsAPIError(
            f"Google Sheets request failed after {self.MAX_RETRIES} attempts: "
            f"{last_error}",
            sheet=sheet,
        )

    # =========================================================================
    # SheetStore protocol
    # =========================================================================

    def read_column(self, sheet: str, column: str) -> list[str]:
        """
        Read a whole column, header included.

        Rows that are empty in that column come back as "". Trailing empty
        rows are not returned by the API and are not padded.
        """
        range_ = f"'{sheet}'!{column}:{column}"
        response = self._request_with_retry(
            "GET",
            self._values_url(range_),
            sheet,
            params={"majorDimension": "ROWS"},
        )

        try:
            data = response.json()
        except ValueError as e:
            raise SheetsAPIError(
                "Malformed Google Sheets response (not JSON)",
                sheet=sheet,
                response_body=response.text,
            ) from e

        rows = data.get("values", []) if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise SheetsAPIError(
                "Malformed Google Sheets response (no values list)",
                sheet=sheet,
                response_body=response.text,
            )

        return [str(row[0]) if isinstance(row, list) and row else "" for row in rows]

    def append_row(self, sheet: str, row: Sequence[CellValue]) -> None:
        """Append a row after the last row of the sheet's table."""
        range_ = f"'{sheet}'!A:{column_letter(len(row))}"
        self._request_with_retry(
            "POST",
            f"{self._values_url(range_)}:append",
            sheet,
            params={
                "valueInputOption": self.VALUE_INPUT_OPTION,
                "insertDataOption": "INSERT_ROWS",
            },
            json={"values": [self._literal_row(row)]},
        )

    def overwrite_row(
        self, sheet: str, row_number: int, row: Sequence[CellValue]
    ) -> None:
        """Rewrite row `row_number` from column A to the row's last column."""
        last = column_letter(len(row))
        range_ = f"'{sheet}'!A{row_number}:{last}{row_number}"
        self._request_with_retry(
            "PUT",
            self._values_url(range_),
            sheet,
            params={"valueInputOption": self.VALUE_INPUT_OPTION},
            json={
                "range": range_,
                "majorDimension": "ROWS",
                "values": [self._literal_row(row)],
            },
        )
