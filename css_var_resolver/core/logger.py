from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "css_var_resolver"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging() -> None:
    """Attach a stderr handler to the package logger (command-line use).

    The level comes from ``CSS_VAR_RESOLVER_LOG_LEVEL`` (default INFO).
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    level_name = os.environ.get("CSS_VAR_RESOLVER_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))


def set_silent(silent: bool) -> None:
    """Only let errors through the package logger when ``silent`` is set."""
    if silent:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.ERROR)
