"""MySQL dialect."""

from typing import ClassVar

from .base import Dialect


class MysqlDialect(Dialect):
    """Dialect for MySQL (scheme mysql): format-style ``%s`` placeholders, as pymysql expects."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql",)

    def placeholder(self, index: int) -> str:
        return "%s"
