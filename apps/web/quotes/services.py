"""
Quote request services - forward website quote requests by email via Resend.
"""

import logging

from django.conf import settings

import resend
from tre_schemas import EventType, QuoteRequestSubmission, ServiceType

from apps.web.core.formatting import MONTHS_IT, WEEKDAYS_IT

logger = logging.getLogger(__name__)

TO_BE_DEFINED = "Da definire"
NOT_SPECIFIED = "Non specificato"

EVENT_LABELS = {
    EventType.COMPLEANNO: "Compleanno",
    EventType.BATTESIMO: "Battesimo",
    EventType.COMUNIONE: "Comunione",
    EventType.CRESIMA: "Cresima",
    EventType.LAUREA: "Laurea",
    EventType.ANNIVERSARIO: "Anniversario",
    EventType.MEETING: "Meeting / Cena Aziendale",
    EventType.ALTRO: "Altro",
}

SERVICE_LABELS = {
    ServiceType.PRANZO: "Pranzo",
    ServiceType.CENA: "Cena",
}


class QuoteRequestError(Exception):
    """Raised when a quote request cannot be forwarded."""

    pass


def _event_date(submission: QuoteRequestSubmission) -> str:
    """Long Italian date, e.g. "sabato 25 gennaio 2025"."""
    if submission.data is None or submission.data_da_definire:
        return TO_BE_DEFINED
    day = submission.data
    weekday = WEEKDAYS_IT[day.weekday()].lower()
    return f"{weekday} {day.day:02d} {MONTHS_IT[day.month - 1]} {day.year}"


def _guests(submission: QuoteRequestSubmission) -> str:
    if submission.numero_da_definire:
        return TO_BE_DEFINED
    if submission.partecipanti is None:
        return NOT_SPECIFIED
    return str(submission.partecipanti)


def build_quote_subject(submission: QuoteRequestSubmission) -> str:
    """Subject line staff can scan in the inbox."""
    return (
        f"Richiesta Preventivo: {EVENT_LABELS[submission.evento]} - "
        f"{_event_date(submission)} - {SERVICE_LABELS[submission.servizio]} - "
        f"{_guests(submission)} persone"
    )


def build_quote_body(submission: QuoteRequestSubmission) -> str:
    """Plain-text email body."""
    lines = [
        "RICHIESTA PREVENTIVO - RISTORANTE PIZZERIA TRE",
        "",
        "DETTAGLI EVENTO:",
        f"- Tipo Evento: {EVENT_LABELS[submission.evento]}",
        f"- Data: {_event_date(submission)}",
        f"- Servizio: {SERVICE_LABELS[submission.servizio]}",
        f"- N° Partecipanti: {_guests(submission)}",
        "",
        "DATI DI CONTATTO:",
        f"- Nome: {submission.full_name}",
        f"- Email: {submission.email}",
        f"- Telefono: {submission.telefono or NOT_SPECIFIED}",
    ]
    if submission.messaggio:
        lines += ["", "MESSAGGIO DEL CLIENTE:", submission.messaggio]
    lines += ["", "Richiesta inviata dal sito web ristorantepizzeriatre.it"]
    return "\n".join(lines)


def send_quote_request(submission: QuoteRequestSubmission) -> str:
    """
    Email a quote request to the restaurant via Resend.

    Replies from the restaurant go straight to the requester.

    Args:
        submission: Validated quote request

    Returns:
        Resend email ID

    Raises:
        QuoteRequestError: If Resend is not configured or sending fails
    """
    api_key = getattr(settings, "RESEND_API_KEY", None)
    if not api_key:
        raise QuoteRequestError("Resend API key not configured")

    recipients = list(getattr(settings, "QUOTE_RECIPIENTS", []))
    if not recipients:
        raise QuoteRequestError("No quote request recipients configured")

    resend.api_key = api_key

    try:
        email_params: dict[str, str | list[str]] = {
            "from": settings.QUOTE_FROM_EMAIL,
            "to": recipients,
            "reply_to": f"{submission.full_name} <{submission.email}>",
            "subject": build_quote_subject(submission),
            "text": build_quote_body(submission),
        }

        response = resend.Emails.send(email_params)  # type: ignore[arg-type]

        email_id = response.get("id", "") if isinstance(response, dict) else ""

        logger.info(
            "Sent quote request for %s from %s (ID: %s)",
            submission.evento.value,
            submission.email,
            email_id,
        )

        return str(email_id)

    except Exception as e:
        logger.exception("Failed to send quote request from %s: %s", submission.email, e)
        raise QuoteRequestError(f"Failed to send quote request: {e}") from e
