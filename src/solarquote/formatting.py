"""French display formatting for amounts, quantities, and dates."""

import datetime

from pytz import timezone, utc

_NNBSP = "\u202f"  # Narrow no-break space: thousands separator
_NBSP = "\u00a0"  # No-break space: before the currency symbol

_MONTHS_FR = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)


def format_number(value: float, decimals: int = 0) -> str:
    """Format with French grouping and decimal comma: 12 345,6."""
    text = f"{abs(value):,.{decimals}f}"
    text = text.replace(",", _NNBSP).replace(".", ",")
    # Avoid "-0" once rounding has erased the magnitude
    if value < 0 and any(c in "123456789" for c in text):
        return "-" + text
    return text


def format_currency(amount: float) -> str:
    """Euro amount the way fr-FR renders it: 1 931,85 €."""
    return f"{format_number(amount, 2)}{_NBSP}€"


def format_date(
    value: datetime.date | datetime.datetime | str | None, tz: str = "Europe/Paris"
) -> str:
    """Long French date, e.g. '19 octobre 2026'.

    Timestamps with a UTC offset are shown in `tz`; naive ones are taken as-is.
    """
    if value is None or value == "":
        return "Date non disponible"
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value)
        except ValueError:
            return "Date invalide"
    if isinstance(value, datetime.datetime) and value.tzinfo is not None:
        value = value.astimezone(utc).astimezone(timezone(tz))
    return f"{value.day} {_MONTHS_FR[value.month - 1]} {value.year}"
