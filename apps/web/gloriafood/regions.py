"""Booking sheet regions - one tab per record type, each with its own layout."""

from dataclasses import dataclass

from apps.web.sheets import column_index


@dataclass(frozen=True)
class Region:
    """
    A sheet tab the sync writes to.

    The identifier column holds the GloriaFood ID and is the only key used to
    find an existing row. Rows always span A..last_column.
    """

    sheet: str
    id_column: str
    last_column: str
    headers: tuple[str, ...] = ()

    @property
    def width(self) -> int:
        """Number of columns in a full row."""
        return column_index(self.last_column)

    @property
    def id_index(self) -> int:
        """0-based position of the identifier inside a row."""
        return column_index(self.id_column) - 1


RESERVATIONS = Region(
    sheet="Dati",
    id_column="K",
    last_column="L",
    headers=(
        "Giorno",
        "Data",
        "Ora",
        "Nome",
        "Telefono",
        "Email",
        "Persone",
        "Stato",
        "Fonte",
        "Note",
        "ID GloriaFood",
        "Aggiornato",
    ),
)

PICKUPS = Region(
    sheet="Asporto",
    id_column="L",
    last_column="M",
    headers=(
        "Giorno",
        "Data",
        "Ora ritiro",
        "Nome",
        "Telefono",
        "Email",
        "Totale",
        "Pagamento",
        "Prodotti",
        "Stato",
        "Note",
        "ID GloriaFood",
        "Aggiornato",
    ),
)
