"""Condition helpers taking column names, for use with ``BaseQuery.where``.

    q.where(eq("name", "foo"))
    q.where(gt("age", 18))
    # ... WHERE (name = $1) AND (age > $2)

The same trees can be built with operators on ``col(name)``:
``(col("age") > 18) & col("name").startswith("Jo")``.
"""

from functools import reduce
from typing import Any, Iterable

from .expressions import ColumnExpression, Expression, UnaryOperatorExpression


def col(name: str) -> ColumnExpression:
    """Return a column reference usable on either side of an operator."""
    return ColumnExpression(name=name)


def _column(column: str | Expression) -> Expression:
    if isinstance(column, Expression):
        return column
    return col(column)


def eq(column: str | Expression, value: Any) -> Expression:
    """``column = value``"""
    return _column(column) == value


def neq(column: str | Expression, value: Any) -> Expression:
    """``column != value``"""
    return _column(column) != value


def lt(column: str | Expression, value: Any) -> Expression:
    """``column < value``"""
    return _column(column) < value


def lte(column: str | Expression, value: Any) -> Expression:
    """``column <= value``"""
    return _column(column) <= value


def gt(column: str | Expression, value: Any) -> Expression:
    """``column > value``"""
    return _column(column) > value


def gte(column: str | Expression, value: Any) -> Expression:
    """``column >= value``"""
    return _column(column) >= value


def in_(column: str | Expression, values: Iterable[Any]) -> Expression:
    """``column IN (v1, v2, ...)``, one placeholder per value."""
    return _column(column).in_(tuple(values))


def not_in(column: str | Expression, values: Iterable[Any]) -> Expression:
    """``column NOT IN (v1, v2, ...)``"""
    return _column(column).not_in(tuple(values))


def is_null(column: str | Expression) -> Expression:
    return _column(column).is_null()


def is_not_null(column: str | Expression) -> Expression:
    return _column(column).is_not_null()


def like(column: str | Expression, pattern: str) -> Expression:
    """``column LIKE pattern``, pattern used verbatim."""
    return _column(column).like(pattern)


def ilike(column: str | Expression, pattern: str) -> Expression:
    """Case-insensitive ``like``."""
    return _column(column).ilike(pattern)


def and_(*conditions: Expression) -> Expression:
    """Conjunction of the given conditions, in order."""
    return reduce(lambda a, b: a & b, conditions)


def or_(*conditions: Expression) -> Expression:
    """Disjunction of the given conditions, in order."""
    return reduce(lambda a, b: a | b, conditions)


def not_(condition: Expression) -> Expression:
    return UnaryOperatorExpression(symbol="NOT", arguments=(condition,))


__all__ = [
    "and_",
    "col",
    "eq",
    "gt",
    "gte",
    "ilike",
    "in_",
    "is_not_null",
    "is_null",
    "like",
    "lt",
    "lte",
    "neq",
    "not_",
    "not_in",
    "or_",
]
