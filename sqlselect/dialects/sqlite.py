"""SQLite dialect."""

from typing import ClassVar

from .base import Dialect


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite): qmark placeholders."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def placeholder(self, index: int) -> str:
        return "?"
