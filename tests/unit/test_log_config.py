"""Unit tests for per-category logging levels."""

import logging

import pytest

from portfolio.config import Settings
from portfolio.infrastructure.logging.log_config import LOGGER_GROUPS, level_from_name, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = ["", *(name for group in LOGGER_GROUPS.values() for name in group)]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_level_names_are_case_insensitive():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Warning ") == logging.WARNING


def test_unknown_level_falls_back():
    assert level_from_name("chatty") == logging.INFO
    assert level_from_name("chatty", fallback=logging.ERROR) == logging.ERROR


def test_categories_get_their_own_levels():
    settings = Settings(_env_file=None, log_level="ERROR", log_level_sql="DEBUG", log_level_site="warning")

    applied = setup_logging(settings)

    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG
    assert logging.getLogger("portfolio.presentation.site").level == logging.WARNING
    assert applied["httpx"] == logging.WARNING
    assert set(applied) == {name for group in LOGGER_GROUPS.values() for name in group}
