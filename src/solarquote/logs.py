"""Logging configuration. Call setup_logging() once at app or CLI startup."""

import logging
import os

_FORMAT = "%(asctime)s [%(levelname).1s] %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the "solarquote" logger tree.

    Args:
        level: Override log level (default: SOLARQUOTE_LOG_LEVEL env or INFO).
    """
    level = (level or os.environ.get("SOLARQUOTE_LOG_LEVEL") or "INFO").upper()
    root = logging.getLogger("solarquote")
    root.setLevel(getattr(logging, level, logging.INFO))
    # Streamlit re-executes the script on every interaction
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
