"""Form submission schemas."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class EventType(str, Enum):
    """Private event types offered on the website."""

    COMPLEANNO = "compleanno"
    BATTESIMO = "battesimo"
    COMUNIONE = "comunione"
    CRESIMA = "cresima"
    LAUREA = "laurea"
    ANNIVERSARIO = "anniversario"
    MEETING = "meeting"
    ALTRO = "altro"


class ServiceType(str, Enum):
    """Lunch or dinner service."""

    PRANZO = "pranzo"
    CENA = "cena"


class QuoteRequestSubmission(BaseModel):
    """Quote request ("preventivo") form for private events."""

    model_config = ConfigDict(populate_by_name=True)

    # Event details
    evento: EventType
    servizio: ServiceType
    data: date | None = Field(default=None, description="Requested event date")
    data_da_definire: bool = Field(default=False, alias="dataDaDefinire")
    partecipanti: int | None = Field(default=None, ge=1, le=1000)
    numero_da_definire: bool = Field(default=False, alias="numeroDaDefinire")

    # Contact info
    nome: str = Field(min_length=1, max_length=100)
    cognome: str = Field(min_length=1, max_length=100)
    email: EmailStr
    telefono: str = Field(default="", max_length=30)

    # Message
    messaggio: str = Field(default="", max_length=5000)

    @property
    def full_name(self) -> str:
        """Requester first and last name joined."""
        return f"{self.nome} {self.cognome}".strip()
