"""Tests for logging configuration."""

import logging

from activity_burn.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("activity_burn")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_sets_level() -> None:
    configure_logging("debug")

    assert logging.getLogger("activity_burn").level == logging.DEBUG

    configure_logging("INFO")
