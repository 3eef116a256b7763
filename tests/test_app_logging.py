"""Tests for logging configuration."""

import logging

from cat_shelter.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("cat_shelter")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_applies_level_and_quiets_clients() -> None:
    logger = logging.getLogger("cat_shelter")

    configure_logging("debug")

    assert logger.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    configure_logging()
    assert logger.level == logging.INFO
