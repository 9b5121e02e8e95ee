"""GloriaFood integration exceptions."""


class GloriaFoodError(Exception):
    """Base exception for GloriaFood integration errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidDeliveryError(GloriaFoodError):
    """Webhook body is neither an order object nor a list of orders."""
