"""Field predicates and form validators.

Predicates never raise: any input that is not a matching string is rejected.
Form validators return a mapping of field name to a French error message;
an empty mapping means the form can be submitted.
"""

import re
from collections.abc import Mapping
from typing import Any

from solarquote.models import PROJECT_STATUSES, QUOTE_STATUSES, QuoteItem

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# +33 / 0033 / 0, then a non-zero digit and four pairs (9-digit subscriber number)
_PHONE_RE = re.compile(r"^(?:(?:\+|00)33|0)\s*[1-9](?:[\s.-]*[0-9]{2}){4}$")
_PDL_RE = re.compile(r"^[0-9]{14}$")
_POSTAL_CODE_RE = re.compile(r"^[0-9]{5}$")

MIN_PASSWORD_LENGTH = 6


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_email(value: str) -> bool:
    return _matches(_EMAIL_RE, value)


def validate_phone(value: str) -> bool:
    """French landline or mobile, national or international form."""
    return _matches(_PHONE_RE, value)


def validate_pdl(value: str) -> bool:
    """Delivery point identifier: exactly 14 digits, no separators."""
    return _matches(_PDL_RE, value)


def validate_postal_code(value: str) -> bool:
    return _matches(_POSTAL_CODE_RE, value)


def _text(form: Mapping[str, Any], key: str) -> str:
    return str(form.get(key) or "").strip()


def _number(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_client_form(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    required = {
        "first_name": "Le prénom est requis",
        "last_name": "Le nom est requis",
        "email": "L'email est requis",
        "phone": "Le téléphone est requis",
        "address": "L'adresse est requise",
        "city": "La ville est requise",
        "postal_code": "Le code postal est requis",
    }
    for key, message in required.items():
        if not _text(form, key):
            errors[key] = message

    email = _text(form, "email")
    if email and not validate_email(email):
        errors["email"] = "Format d'email invalide"
    phone = _text(form, "phone")
    if phone and not validate_phone(phone):
        errors["phone"] = "Format de téléphone invalide"
    postal_code = _text(form, "postal_code")
    if postal_code and not validate_postal_code(postal_code):
        errors["postal_code"] = "Le code postal doit contenir 5 chiffres"
    # Optional field: only checked when filled in
    pdl = _text(form, "pdl")
    if pdl and not validate_pdl(pdl):
        errors["pdl"] = "Le PDL doit contenir exactement 14 chiffres"
    return errors


def validate_project_form(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not _text(form, "name"):
        errors["name"] = "Le nom du projet est requis"
    if not _text(form, "client_id"):
        errors["client_id"] = "Veuillez sélectionner un client"
    status = _text(form, "status")
    if not status:
        errors["status"] = "Le statut est requis"
    elif status not in PROJECT_STATUSES:
        errors["status"] = "Statut inconnu"

    for key, message in (
        ("estimated_production", "La production doit être positive"),
        ("estimated_savings", "Les économies doivent être positives"),
    ):
        raw = form.get(key)
        if raw is None or raw == "":
            continue
        value = _number(raw)
        if value is None or value < 0:
            errors[key] = message
    return errors


def validate_quote_form(
    form: Mapping[str, Any], items: tuple[QuoteItem, ...] = ()
) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not _text(form, "project_id"):
        errors["project_id"] = "Veuillez sélectionner un projet"
    if not _text(form, "name"):
        errors["name"] = "Le nom du devis est requis"
    status = _text(form, "status")
    if not status:
        errors["status"] = "Le statut est requis"
    elif status not in QUOTE_STATUSES:
        errors["status"] = "Statut inconnu"

    raw_total = form.get("total_amount")
    if (raw_total is None or raw_total == "") and not items:
        errors["total_amount"] = "Le montant total est requis"
    elif raw_total not in (None, ""):
        total = _number(raw_total)
        if total is None or total < 0:
            errors["total_amount"] = "Le montant doit être positif"

    for i, item in enumerate(items):
        if not item.description.strip():
            errors[f"items.{i}.description"] = "La description est requise"
        if item.quantity <= 0:
            errors[f"items.{i}.quantity"] = "La quantité doit être supérieure à 0"
        if item.unit_price < 0:
            errors[f"items.{i}.unit_price"] = "Le prix unitaire doit être positif"
    return errors


def validate_login_form(form: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    email = _text(form, "email")
    if not email:
        errors["email"] = "L'email est requis"
    elif not validate_email(email):
        errors["email"] = "Format d'email invalide"
    password = str(form.get("password") or "")
    if not password:
        errors["password"] = "Le mot de passe est requis"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = (
            f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères"
        )
    return errors
