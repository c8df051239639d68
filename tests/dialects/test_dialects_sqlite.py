"""Tests for sqlselect.dialects.sqlite: qmark placeholders."""

from sqlselect.dialects import SqliteDialect


def test_sqlite_keeps_qmarks():
    d = SqliteDialect()
    assert d.placeholder(3) == "?"
    assert d.format_placeholders("(a = ?) AND (b = ?)") == "(a = ?) AND (b = ?)"
