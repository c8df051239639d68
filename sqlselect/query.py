"""Query builder for SELECT statements on a single table.

``BaseQuery`` collects the columns to fetch (and those to leave out), WHERE
conditions, ORDER BY entries, pagination and a batch size, then compiles all
of it into the resolved column list plus a ``SelectStatement``. Execution and
row hydration are not done here: they consume the ``Query`` contract below.

Nothing in this module validates column names against a schema; an invalid
statement surfaces as a database error when it is executed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field, NonNegativeInt

from .column_set import ColumnSet
from .config import get_default_dialect
from .dialects import Dialect
from .expressions import ColumnExpression, ColumnOrder, Expression
from .statement import SelectStatement

logger = logging.getLogger("sqlselect")

DEFAULT_BATCH_SIZE = 50


class Query(ABC):
    """What executors and relationship loaders need from a query."""

    @abstractmethod
    def compile(self) -> tuple[list[str], SelectStatement]:
        """Return the resolved column names and the statement selecting them."""

    @abstractmethod
    def is_read_only(self) -> bool:
        """True when results may be partial rows that must not be persisted back."""

    @abstractmethod
    def get_offset(self) -> int:
        """Return the number of skipped rows in the query."""

    @abstractmethod
    def get_limit(self) -> int:
        """Return the max number of rows retrieved by the query (0 for no limit)."""

    @abstractmethod
    def get_batch_size(self) -> int:
        """Return the number of rows retrieved per batch.

        Only used for queries with 1:N relationships.
        """


class BaseQuery(BaseModel, Query):
    """Mutable SELECT builder for one table.

    Setters change the query in place (and return it, so calls can be chained).
    Use ``copy()`` before deriving several queries from a common base.

        q = BaseQuery("users", "id", "name", "age")
        q.select_not("age")
        q.where(gt("age", 18)).order(desc("created_at")).limit(10)
        columns, statement = q.compile()
    """

    model_config = {"arbitrary_types_allowed": True}

    columns: ColumnSet = Field(default_factory=ColumnSet)
    """Columns to select, in SELECT order."""
    excluded_columns: ColumnSet = Field(default_factory=ColumnSet)
    """Columns left out even when present in ``columns``."""
    statement: SelectStatement
    """Table, conditions and ordering accumulated so far."""
    select_changed: bool = False
    """True once ``select()`` replaced the default columns."""
    batch_size_value: NonNegativeInt = DEFAULT_BATCH_SIZE
    limit_value: NonNegativeInt = 0
    offset_value: NonNegativeInt = 0

    def __init__(self, table: Optional[str] = None, *selected_columns: str, dialect: Optional[Dialect] = None, **data):
        """Create a query on table selecting selected_columns.

        No columns means every column the caller's mapping knows about; that
        list is resolved by the caller, not here.
        """
        if "statement" not in data:
            data["statement"] = SelectStatement(table=table, dialect=dialect or get_default_dialect())
        if "columns" not in data:
            data["columns"] = ColumnSet(selected_columns)
        super().__init__(**data)

    def is_read_only(self) -> bool:
        """True once ``select()`` was called, even if it reselects every column."""
        return self.select_changed

    def select(self, *columns: str) -> BaseQuery:
        """Add columns to the selected columns.

        The first call drops the default columns given at construction; later
        calls only add. Selecting a previously excluded column un-excludes it.
        """
        if not self.select_changed:
            self.columns = ColumnSet()
            self.select_changed = True
        self.excluded_columns.remove(*columns)
        self.columns.add(*columns)
        return self

    def select_not(self, *columns: str) -> BaseQuery:
        """Exclude columns from the result, whenever they were or will be selected."""
        self.excluded_columns.add(*columns)
        return self

    def copy(self) -> BaseQuery:  # pylint: disable=arguments-differ
        """Return an identical, independent copy of the query."""
        return type(self)(
            columns=self.columns.copy(),
            excluded_columns=self.excluded_columns.copy(),
            statement=self.statement,
            select_changed=self.select_changed,
            batch_size_value=self.get_batch_size(),
            limit_value=self.get_limit(),
            offset_value=self.get_offset(),
        )

    def selected_columns(self) -> list[str]:
        """Return ``columns`` without the excluded ones, in selection order."""
        return [column for column in self.columns if column not in self.excluded_columns]

    def order(self, *orders: ColumnOrder | ColumnExpression | str) -> BaseQuery:
        """Append orders to the ORDER BY list.

        Columns given as names or ColumnExpression are ordered ascending.
        """
        normalized = []
        for order in orders:
            if isinstance(order, str):
                order = ColumnOrder(column=order)
            elif isinstance(order, ColumnExpression):
                order = order.asc
            if not isinstance(order, ColumnOrder):
                raise TypeError(f"order requires ColumnOrder, ColumnExpression, or str; got {type(order)}")
            normalized.append(order)
        self.statement = self.statement.order_by(*normalized)
        return self

    def batch_size(self, size: int) -> BaseQuery:
        """Set the number of rows fetched per round trip for 1:N relationships."""
        self.batch_size_value = max(size, 0)
        return self

    def get_batch_size(self) -> int:
        return self.batch_size_value

    def limit(self, limit: int) -> BaseQuery:
        """Set the max number of rows to retrieve (0 for no limit; negative counts are taken as 0)."""
        self.limit_value = max(limit, 0)
        return self

    def get_limit(self) -> int:
        return self.limit_value

    def offset(self, offset: int) -> BaseQuery:
        """Set the number of rows to skip. Negative counts are taken as 0."""
        self.offset_value = max(offset, 0)
        return self

    def get_offset(self) -> int:
        return self.offset_value

    def where(self, condition: Expression) -> BaseQuery:
        """Add a condition to filter the query. All conditions are ANDed.

        Examples:
            q.where(eq("name", "foo"))
            q.where(col("age") > 18)
            # ... WHERE (name = $1)
            # AND (age > $2)
        """
        if not isinstance(condition, Expression):
            raise TypeError(f"where requires an Expression; got {type(condition)}")
        self.statement = self.statement.where(condition)
        return self

    def compile(self) -> tuple[list[str], SelectStatement]:
        """Return the resolved column names and the statement selecting them.

        LIMIT and OFFSET are not part of the statement; executors read them
        through ``get_limit()``/``get_offset()`` and apply them per batch.
        """
        columns = self.selected_columns()
        logger.debug("Compiling query on %s with %d column(s)", self.statement.table, len(columns))
        return columns, self.statement.columns(*columns)

    def __str__(self) -> str:
        """Return the SQL generated by the query."""
        _, statement = self.compile()
        return statement.sql


__all__ = ["BaseQuery", "DEFAULT_BATCH_SIZE", "Query"]
