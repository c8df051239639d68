"""Tests for sqlselect.expressions.ColumnExpression and ColumnOrder."""

import pytest
from pydantic import ValidationError

from sqlselect.expressions import ColumnExpression, ColumnOrder, asc, desc


def test_column_expression_sql_and_values():
    col = ColumnExpression(name="name")
    assert col.sql == "name"
    assert col.values == ()


def test_column_expression_desc():
    col = ColumnExpression(name="name")
    order = col.desc
    assert isinstance(order, ColumnOrder)
    assert order.desc is True
    assert order.column == "name"


def test_column_expression_asc():
    order = ColumnExpression(name="name").asc
    assert order.desc is False
    assert order.sql == "name ASC"


def test_asc_and_desc_render():
    assert asc("created_at").sql == "created_at ASC"
    assert desc("created_at").sql == "created_at DESC"


def test_column_order_defaults_to_ascending():
    assert ColumnOrder(column="id").sql == "id ASC"


def test_column_order_does_not_validate_column_name():
    assert asc("no such column!").sql == "no such column! ASC"


def test_column_order_is_immutable():
    order = desc("id")
    with pytest.raises(ValidationError):
        order.desc = False
    assert desc("id") == order
