"""Ordered set of column names, used for included and excluded columns."""

from typing import Iterator

from pydantic import BaseModel, Field


class ColumnSet(BaseModel):
    """Column names in first-insertion order, without duplicates.

    Order matters: it is the order of the SELECT list. Membership is a linear
    scan, which is fine for table widths of a few dozen columns.
    """

    names: list[str] = Field(default_factory=list)

    def __init__(self, names=(), **data):
        super().__init__(names=[], **data)
        self.add(*names)

    def contains(self, name: str) -> bool:
        return name in self.names

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def add(self, *names: str) -> None:
        """Append each name not already present, keeping first-seen order."""
        for name in names:
            if name not in self.names:
                self.names.append(name)

    def remove(self, *names: str) -> None:
        """Drop the given names; kept names keep their relative order."""
        self.names = [name for name in self.names if name not in names]

    def copy(self) -> "ColumnSet":  # pylint: disable=arguments-differ
        """Return an independent set with the same names in the same order."""
        return ColumnSet(self.names)
