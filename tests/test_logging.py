"""Tests for the process-wide log setup."""

import logging

from shop_api.logging import configure_logging


def test_sets_root_level_and_quiets_access_log():
    configure_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_repeated_calls_keep_one_handler():
    configure_logging("INFO")
    configure_logging("INFO")

    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger().level == logging.INFO
