"""Spreadsheet store exceptions."""


class SheetsError(Exception):
    """Base exception for spreadsheet store errors."""

    def __init__(self, message: str, sheet: str | None = None) -> None:
        self.message = message
        self.sheet = sheet
        super().__init__(message)


class SheetsConfigError(SheetsError):
    """The store is not configured (missing spreadsheet ID or credentials)."""


class SheetsAuthError(SheetsError):
    """Authentication with the spreadsheet provider failed."""


class SheetsAPIError(SheetsError):
    """A read or write request to the spreadsheet provider failed."""

    def __init__(
        self,
        message: str,
        sheet: str | None = None,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message, sheet)
        self.status_code = status_code
        self.response_body = response_body


class SheetsRateLimitError(SheetsAPIError):
    """Rate limit exceeded with the spreadsheet provider."""

    def __init__(
        self,
        message: str,
        sheet: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, sheet, status_code=429)
        self.retry_after = retry_after
