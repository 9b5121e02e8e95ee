"""
Italian display formatting shared by the booking sheet and email flows.

Output is fixed to Italian and never depends on the server locale.
"""

from decimal import ROUND_HALF_UP, Decimal

WEEKDAYS_IT = [
    "Lunedì",
    "Martedì",
    "Mercoledì",
    "Giovedì",
    "Venerdì",
    "Sabato",
    "Domenica",
]  # datetime.weekday() order

MONTHS_IT = [
    "gennaio",
    "febbraio",
    "marzo",
    "aprile",
    "maggio",
    "giugno",
    "luglio",
    "agosto",
    "settembre",
    "ottobre",
    "novembre",
    "dicembre",
]

CENT = Decimal("0.01")


def format_euro(amount: Decimal | int | float | str | None) -> str:
    """
    Format an amount in euros, Italian style: "€ 1.234,50".

    Returns "" for None or values that are not numbers.
    """
    if amount is None or amount == "":
        return ""
    try:
        value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        return ""
    if not value.is_finite():
        return ""

    # Format with US separators, then swap them
    us_style = f"{value:,.2f}"
    return "€ " + us_style.replace(",", "_").replace(".", ",").replace("_", ".")
