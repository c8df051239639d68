"""Tests for sqlselect.dialects: get_dialect_for_scheme and supported schemes."""

import pytest

from sqlselect.dialects import (
    get_dialect_for_scheme,
    SqliteDialect,
    MysqlDialect,
    PostgresDialect,
    SqlserverDialect,
)


def test_get_dialect_for_scheme_sqlite():
    d = get_dialect_for_scheme("sqlite")
    assert isinstance(d, SqliteDialect)


def test_get_dialect_for_scheme_normalizes_and_lowercases():
    d = get_dialect_for_scheme("SQLITE")
    assert isinstance(d, SqliteDialect)
    d = get_dialect_for_scheme("postgresql+psycopg2")
    assert isinstance(d, PostgresDialect)


def test_get_dialect_for_scheme_postgres_aliases():
    assert isinstance(get_dialect_for_scheme("postgresql"), PostgresDialect)
    assert isinstance(get_dialect_for_scheme("postgres"), PostgresDialect)


def test_get_dialect_for_scheme_mysql():
    d = get_dialect_for_scheme("mysql+pymysql")
    assert isinstance(d, MysqlDialect)


@pytest.mark.parametrize("scheme", ["mssql", "sqlserver"])
def test_get_dialect_for_scheme_sqlserver(scheme):
    assert isinstance(get_dialect_for_scheme(scheme), SqlserverDialect)


@pytest.mark.parametrize("scheme", ["nosuch", "oracle", "", None])
def test_get_dialect_for_scheme_unsupported_raises(scheme):
    with pytest.raises(ValueError, match="Unsupported database scheme"):
        get_dialect_for_scheme(scheme)
