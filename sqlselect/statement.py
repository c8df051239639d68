"""SELECT statement accumulator: table, columns, conditions, ordering, pagination.

A SelectStatement is an immutable value. Every builder-style method returns a
new statement, so the same statement can be shared by several queries.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .dialects import Dialect, PostgresDialect
from .expressions import ColumnOrder, Expression


class SelectStatement(BaseModel):
    """A compiled (or compiling) SELECT on a single table.

    Conditions are ANDed in the order they were added; ORDER BY entries are
    emitted in the order they were added. ``sql`` uses the dialect's
    placeholders; ``values`` holds the bound parameters in the same order.
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    table: str
    selected_columns: tuple[str, ...] = ()
    where_expressions: tuple[Expression, ...] = ()
    order_by_expressions: tuple[ColumnOrder, ...] = ()
    limit_value: Optional[NonNegativeInt] = None
    """Optional LIMIT (stored to avoid shadowing the limit() method)."""
    offset_value: Optional[NonNegativeInt] = None
    """Optional OFFSET (stored to avoid shadowing the offset() method)."""
    dialect: Dialect = Field(default_factory=PostgresDialect)

    def clone_with(self, **changes) -> SelectStatement:
        """Return a new statement with the same state except for the given overrides."""
        return self.model_copy(update=changes)

    def columns(self, *columns: str) -> SelectStatement:
        """Return a statement whose SELECT list is columns, replacing any previous one."""
        return self.clone_with(selected_columns=tuple(columns))

    def where(self, condition: Expression) -> SelectStatement:
        """Return a statement with condition ANDed after the existing ones."""
        return self.clone_with(where_expressions=self.where_expressions + (condition,))

    def order_by(self, *orders: ColumnOrder) -> SelectStatement:
        """Return a statement with orders appended to the ORDER BY list."""
        return self.clone_with(order_by_expressions=self.order_by_expressions + tuple(orders))

    def paginate(self, limit: int = 0, offset: int = 0) -> SelectStatement:
        """Return a statement with LIMIT/OFFSET; 0 (or less) leaves the clause out."""
        return self.clone_with(limit_value=max(limit, 0) or None, offset_value=max(offset, 0) or None)

    @property
    def sql_where(self) -> str:
        """Return WHERE clause (including leading newline) or empty string if no conditions.

        Only this clause carries bound parameters, so only its ``?`` markers are
        turned into the dialect's placeholders.
        """
        if not self.where_expressions:
            return ""
        conditions = "\nAND ".join(expression.sql for expression in self.where_expressions)
        return "\nWHERE " + self.dialect.format_placeholders(conditions)

    @property
    def sql_order(self) -> str:
        """Return ORDER BY clause (including leading newline) or empty string."""
        if not self.order_by_expressions:
            return ""
        return "\nORDER BY " + ", ".join(order.sql for order in self.order_by_expressions)

    @property
    def sql(self) -> str:
        """Return the statement text with the dialect's placeholders."""
        sql = "SELECT"
        if self.selected_columns:
            sql += " " + ", ".join(self.selected_columns)
        sql += "\nFROM " + self.table
        sql += self.sql_where
        sql += self.sql_order
        if self.limit_value is not None:
            sql += "\nLIMIT " + str(self.limit_value)
        if self.offset_value is not None:
            sql += "\nOFFSET " + str(self.offset_value)
        return sql

    @property
    def values(self) -> tuple[Any, ...]:
        """Return the bound values for this statement's placeholders, in order."""
        values = []
        for expression in self.where_expressions:
            values.extend(expression.values)
        return tuple(values)

    def to_sql(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, values)``, ready for a DB-API ``cursor.execute``."""
        return self.sql, self.values

    def __eq__(self, other: object) -> bool:
        """Statements are equal when they render the same SQL with the same values.

        Field-wise comparison would not work: ``Expression.__eq__`` builds a
        condition instead of comparing.
        """
        if not isinstance(other, SelectStatement):
            return NotImplemented
        return self.to_sql() == other.to_sql()

    def __hash__(self) -> int:
        return hash(self.sql)


__all__ = ["SelectStatement"]
