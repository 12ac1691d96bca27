"""Tests for French number, currency, and date formatting."""

import datetime

from solarquote.formatting import format_currency, format_date, format_number

NNBSP = "\u202f"
NBSP = "\u00a0"


class TestNumbers:
    def test_grouping_and_decimal_comma(self):
        assert format_number(12345.678, 1) == f"12{NNBSP}345,7"

    def test_integers(self):
        assert format_number(9659.26) == f"9{NNBSP}659"
        assert format_number(42) == "42"

    def test_millions(self):
        assert format_number(1234567) == f"1{NNBSP}234{NNBSP}567"

    def test_negative(self):
        assert format_number(-1500) == f"-1{NNBSP}500"

    def test_no_negative_zero(self):
        assert format_number(-0.4) == "0"
        assert format_number(-0.001, 2) == "0,00"


class TestCurrency:
    def test_euro_amount(self):
        assert format_currency(1931.85) == f"1{NNBSP}931,85{NBSP}€"

    def test_small_amount(self):
        assert format_currency(5) == f"5,00{NBSP}€"


class TestDates:
    def test_missing(self):
        assert format_date(None) == "Date non disponible"
        assert format_date("") == "Date non disponible"

    def test_unparseable(self):
        assert format_date("not a date") == "Date invalide"

    def test_plain_date(self):
        assert format_date(datetime.date(2026, 1, 1)) == "1 janvier 2026"
        assert format_date("2026-08-15") == "15 août 2026"

    def test_utc_timestamp_shown_in_paris(self):
        # 23:30 UTC on the 18th is already the 19th in Paris (CEST)
        assert format_date("2026-10-18T23:30:00+00:00") == "19 octobre 2026"

    def test_other_timezone(self):
        assert format_date("2026-10-19T02:00:00+00:00", tz="America/New_York") == (
            "18 octobre 2026"
        )

    def test_naive_timestamp_taken_as_is(self):
        assert format_date(datetime.datetime(2026, 12, 31, 23, 59)) == "31 décembre 2026"
