"""Tests for sqlselect.dialects.postgres: numbered placeholders."""

from sqlselect.dialects import PostgresDialect


def test_postgres_placeholder():
    d = PostgresDialect()
    assert d.placeholder(1) == "$1"
    assert d.placeholder(12) == "$12"


def test_postgres_format_placeholders():
    d = PostgresDialect()
    assert d.format_placeholders("(age > ?)\nAND (name = ?)") == "(age > $1)\nAND (name = $2)"
