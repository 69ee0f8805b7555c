"""Tests for process logging setup."""

import logging

import pytest

from app.setup.logging import configure_logging


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_configure_logging_sets_root_level(root_logger) -> None:
    configure_logging("WARNING")

    assert root_logger.level == logging.WARNING


def test_configure_logging_defaults_to_info(root_logger) -> None:
    configure_logging()

    assert root_logger.level == logging.INFO
