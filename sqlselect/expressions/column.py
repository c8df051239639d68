"""Column expression for referencing a single column by name."""

from functools import cached_property

from ._bases import Expression


class ColumnExpression(Expression):
    """Reference to a single column of the queried table.

    Has no placeholders, so ``values`` is ``()``. The name is emitted verbatim;
    whether the column exists is left to the database.
    """

    name: str
    """Column name (e.g. ``id``, ``created_at``)."""

    @property
    def sql(self) -> str:
        return self.name

    @cached_property
    def asc(self):
        """Order by this column ascending (for use in ``order(...)``)."""
        from .order import ColumnOrder
        return ColumnOrder(column=self.name, desc=False)

    @cached_property
    def desc(self):
        """Order by this column descending (for use in ``order(...)``)."""
        from .order import ColumnOrder
        return ColumnOrder(column=self.name, desc=True)
