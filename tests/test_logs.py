import logging

from solarquote.logs import setup_logging


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("SOLARQUOTE_LOG_LEVEL", "debug")
    setup_logging()
    assert logging.getLogger("solarquote").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_handler_added_once():
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(logging.getLogger("solarquote").handlers) == 1
    assert logging.getLogger("solarquote.store").getEffectiveLevel() == logging.INFO
