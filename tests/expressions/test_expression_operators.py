"""Tests for sqlselect.expressions operator overloads (comparison, IN, IS NULL, and/or/not, arithmetic)."""

from sqlselect.expressions import (
    ColumnExpression,
    NaryOperatorExpression,
    UnaryOperatorExpression,
    FunctionExpression,
)


def test_expression_eq():
    col = ColumnExpression(name="id")
    expr = col == 42
    assert isinstance(expr, NaryOperatorExpression)
    assert expr.symbol == "="
    assert expr.sql == "(id = ?)"
    assert expr.values == (42,)


def test_expression_ne():
    expr = ColumnExpression(name="id") != 42
    assert expr.symbol == "!="
    assert expr.sql == "(id != ?)"
    assert expr.values == (42,)


def test_expression_comparisons():
    age = ColumnExpression(name="age")
    assert (age < 1).sql == "(age < ?)"
    assert (age <= 1).sql == "(age <= ?)"
    assert (age > 1).sql == "(age > ?)"
    assert (age >= 1).sql == "(age >= ?)"


def test_expression_in():
    col = ColumnExpression(name="id")
    expr = col.in_([1, 2, 3])
    assert isinstance(expr, NaryOperatorExpression)
    assert expr.symbol == "IN"
    assert expr.arguments[0] is col
    assert expr.arguments[1] == [1, 2, 3]
    assert expr.sql == "(id IN (?, ?, ?))"
    assert expr.values == (1, 2, 3)


def test_expression_not_in():
    expr = ColumnExpression(name="id").not_in((7, 8))
    assert expr.sql == "(id NOT IN (?, ?))"
    assert expr.values == (7, 8)


def test_expression_is_null():
    col = ColumnExpression(name="name")
    expr = col.is_null()
    assert isinstance(expr, UnaryOperatorExpression)
    assert expr.symbol == "IS NULL"
    assert expr.postfix is True
    assert expr.sql == "name IS NULL"
    assert expr.values == ()


def test_expression_is_not_null():
    expr = ColumnExpression(name="name").is_not_null()
    assert expr.sql == "name IS NOT NULL"


def test_expression_and_or():
    age = ColumnExpression(name="age")
    name = ColumnExpression(name="name")
    expr = (age > 18) & (name == "bob")
    assert expr.sql == "((age > ?) AND (name = ?))"
    assert expr.values == (18, "bob")
    expr = (age > 18) | (name == "bob")
    assert expr.sql == "((age > ?) OR (name = ?))"


def test_expression_invert():
    expr = ~(ColumnExpression(name="age") > 18)
    assert isinstance(expr, UnaryOperatorExpression)
    assert expr.sql == "NOT (age > ?)"
    assert expr.values == (18,)


def test_expression_arithmetic():
    a = ColumnExpression(name="a")
    assert ((a + 1) * 2).sql == "((a + ?) * ?)"
    assert ((a + 1) * 2).values == (1, 2)
    assert (a - 1).sql == "(a - ?)"
    assert (a / 2).sql == "(a / ?)"
    assert (a % 2).sql == "(a % ?)"
    assert (-a).sql == "- a"


def test_expression_between():
    expr = ColumnExpression(name="age").between(18, 65)
    assert expr.sql == "((age >= ?) AND (age <= ?))"
    assert expr.values == (18, 65)


def test_expression_lower_upper():
    col = ColumnExpression(name="name")
    assert isinstance(col.lower(), FunctionExpression)
    assert col.lower().sql == "LOWER(name)"
    assert col.upper().sql == "UPPER(name)"
    assert (col.lower() == "bob").sql == "(LOWER(name) = ?)"


def test_expression_column_to_column():
    expr = ColumnExpression(name="updated_at") > ColumnExpression(name="created_at")
    assert expr.sql == "(updated_at > created_at)"
    assert expr.values == ()
