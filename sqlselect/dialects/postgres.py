"""PostgreSQL dialect."""

from typing import ClassVar

from .base import Dialect


class PostgresDialect(Dialect):
    """Dialect for PostgreSQL (scheme postgresql): numbered ``$1, $2, ...`` placeholders."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")

    def placeholder(self, index: int) -> str:
        return f"${index}"
