"""ORDER BY entries."""

from pydantic import BaseModel


class ColumnOrder(BaseModel):
    """ORDER BY spec: one column name and ascending or descending."""

    model_config = {"frozen": True}

    column: str
    desc: bool = False

    @property
    def sql(self) -> str:
        """Column with ``DESC`` or ``ASC`` suffix."""
        return f"{self.column} {'DESC' if self.desc else 'ASC'}"


def asc(column: str) -> ColumnOrder:
    """Return an ascending order on column."""
    return ColumnOrder(column=column, desc=False)


def desc(column: str) -> ColumnOrder:
    """Return a descending order on column."""
    return ColumnOrder(column=column, desc=True)
