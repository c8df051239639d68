"""Tests for sqlselect.config: default dialect."""

import logging

import pytest

from sqlselect import config
from sqlselect.dialects import PostgresDialect, SqliteDialect


def test_default_dialect_is_postgres():
    assert isinstance(config.get_default_dialect(), PostgresDialect)


def test_configure_with_scheme():
    config.configure("sqlite")
    assert isinstance(config.get_default_dialect(), SqliteDialect)


def test_configure_with_instance():
    dialect = SqliteDialect()
    config.configure(dialect)
    assert config.get_default_dialect() is dialect


def test_configure_unsupported_scheme_raises_and_keeps_previous():
    config.configure("sqlite")
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        config.configure("oracle")
    assert isinstance(config.get_default_dialect(), SqliteDialect)


def test_reset_restores_postgres():
    config.configure("sqlite")
    config.reset()
    assert isinstance(config.get_default_dialect(), PostgresDialect)


def test_configure_logs(debug_logs):
    config.configure("mysql")
    assert any(
        r.levelno == logging.DEBUG and "MysqlDialect" in r.getMessage()
        for r in debug_logs.records
    )
