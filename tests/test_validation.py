"""Tests for the field predicates and the form validators."""

import pytest

from solarquote.models import QuoteItem
from solarquote.validation import (
    validate_client_form,
    validate_email,
    validate_login_form,
    validate_pdl,
    validate_phone,
    validate_postal_code,
    validate_project_form,
    validate_quote_form,
)


class TestEmail:
    @pytest.mark.parametrize(
        "value", ["jean.dupont@email.com", "a@b.co", "prenom+tag@sous.domaine.fr"]
    )
    def test_accepts(self, value):
        assert validate_email(value)

    @pytest.mark.parametrize(
        "value", ["not-an-email", "", "jean@dupont", "jean dupont@mail.fr", "@mail.fr"]
    )
    def test_rejects(self, value):
        assert not validate_email(value)


class TestPhone:
    @pytest.mark.parametrize(
        "value",
        [
            "06 12 34 56 78",
            "+33 6 12 34 56 78",
            "0612345678",
            "01.23.45.67.89",
            "0033 1 23 45 67 89",
            "+33612345678",
        ],
    )
    def test_accepts_french_numbers(self, value):
        assert validate_phone(value)

    @pytest.mark.parametrize(
        "value", ["123", "", "00 12 34 56 78", "+44 7911 123456", "06 12 34 56", "06 12 34 56 78 90"]
    )
    def test_rejects(self, value):
        assert not validate_phone(value)

    def test_country_or_trunk_prefix_is_required(self):
        assert not validate_phone("6 12 34 56 78")
        assert not validate_phone("612345678")


class TestPdl:
    def test_fourteen_digits(self):
        assert validate_pdl("12345678901234")

    @pytest.mark.parametrize(
        "value", ["1234567890123", "1234567890123a", "123456789012345", "", "1234 5678 9012 34"]
    )
    def test_rejects(self, value):
        assert not validate_pdl(value)


def test_postal_code():
    assert validate_postal_code("69002")
    assert not validate_postal_code("6900")
    assert not validate_postal_code("69 002")


@pytest.mark.parametrize("value", [None, 12345678901234, b"0612345678"])
def test_predicates_never_raise_on_non_strings(value):
    assert not validate_email(value)
    assert not validate_phone(value)
    assert not validate_pdl(value)


VALID_CLIENT = {
    "first_name": "Marie",
    "last_name": "Dupont",
    "email": "marie.dupont@example.fr",
    "phone": "06 12 34 56 78",
    "address": "12 rue de la Paix",
    "city": "Lyon",
    "postal_code": "69002",
    "pdl": "",
}


class TestClientForm:
    def test_valid(self):
        assert validate_client_form(VALID_CLIENT) == {}

    def test_empty_form_lists_every_required_field(self):
        errors = validate_client_form({})
        assert set(errors) == {
            "first_name",
            "last_name",
            "email",
            "phone",
            "address",
            "city",
            "postal_code",
        }
        assert errors["first_name"] == "Le prénom est requis"

    def test_blank_pdl_is_skipped(self):
        assert "pdl" not in validate_client_form({**VALID_CLIENT, "pdl": "   "})

    def test_bad_formats(self):
        errors = validate_client_form(
            {
                **VALID_CLIENT,
                "email": "marie",
                "phone": "123",
                "postal_code": "690",
                "pdl": "123",
            }
        )
        assert errors == {
            "email": "Format d'email invalide",
            "phone": "Format de téléphone invalide",
            "postal_code": "Le code postal doit contenir 5 chiffres",
            "pdl": "Le PDL doit contenir exactement 14 chiffres",
        }


class TestProjectForm:
    def test_valid(self):
        form = {"name": "Toiture", "client_id": "c1", "status": "draft"}
        assert validate_project_form(form) == {}

    def test_missing_fields(self):
        errors = validate_project_form({})
        assert errors == {
            "name": "Le nom du projet est requis",
            "client_id": "Veuillez sélectionner un client",
            "status": "Le statut est requis",
        }

    def test_unknown_status_and_negative_estimates(self):
        errors = validate_project_form(
            {
                "name": "Toiture",
                "client_id": "c1",
                "status": "archived",
                "estimated_production": -10,
                "estimated_savings": "abc",
            }
        )
        assert errors["status"] == "Statut inconnu"
        assert errors["estimated_production"] == "La production doit être positive"
        assert errors["estimated_savings"] == "Les économies doivent être positives"


class TestQuoteForm:
    BASE = {"project_id": "p1", "name": "Devis toiture", "status": "draft"}

    def test_total_required_without_items(self):
        errors = validate_quote_form(self.BASE)
        assert errors == {"total_amount": "Le montant total est requis"}

    def test_items_stand_in_for_total(self):
        items = (QuoteItem("Panneau", 20, 180.0),)
        assert validate_quote_form(self.BASE, items) == {}

    def test_negative_total(self):
        errors = validate_quote_form({**self.BASE, "total_amount": -1})
        assert errors == {"total_amount": "Le montant doit être positif"}

    def test_zero_total_is_allowed(self):
        assert validate_quote_form({**self.BASE, "total_amount": 0}) == {}

    def test_item_errors_are_keyed_by_row(self):
        items = (QuoteItem("Panneau", 1, 100.0), QuoteItem(" ", 0, -5.0))
        errors = validate_quote_form(self.BASE, items)
        assert errors == {
            "items.1.description": "La description est requise",
            "items.1.quantity": "La quantité doit être supérieure à 0",
            "items.1.unit_price": "Le prix unitaire doit être positif",
        }

    def test_missing_project(self):
        errors = validate_quote_form({"name": "x", "status": "sent", "total_amount": 10})
        assert errors == {"project_id": "Veuillez sélectionner un projet"}


class TestLoginForm:
    def test_valid(self):
        assert validate_login_form({"email": "a@b.fr", "password": "secret"}) == {}

    def test_short_password(self):
        errors = validate_login_form({"email": "a@b.fr", "password": "12345"})
        assert errors == {
            "password": "Le mot de passe doit contenir au moins 6 caractères"
        }

    def test_empty(self):
        errors = validate_login_form({})
        assert errors == {
            "email": "L'email est requis",
            "password": "Le mot de passe est requis",
        }
