from solarquote.i18n import status_label, t
from solarquote.models import PROJECT_STATUSES, QUOTE_STATUSES


def test_french_and_english():
    assert t("nav_clients", "fr") == "Prospects"
    assert t("btn_sign_out", "en") == "Sign out"


def test_unknown_language_falls_back_to_french():
    assert t("nav_dashboard", "de") == "Tableau de bord"


def test_unknown_key_returned_as_is():
    assert t("no_such_key", "en") == "no_such_key"


def test_every_status_has_a_label():
    for status in PROJECT_STATUSES + QUOTE_STATUSES:
        assert status_label(status, "fr") != status
        assert status_label(status, "en") != status


def test_unknown_status_passes_through():
    assert status_label("archived", "fr") == "archived"


def test_delete_confirmation_names_the_row():
    text = t("confirm_delete_client", "fr").format(name="Marie Dupont")
    assert "Marie Dupont" in text
