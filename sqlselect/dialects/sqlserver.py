"""SQL Server dialect."""

from typing import ClassVar

from .base import Dialect


class SqlserverDialect(Dialect):
    """Dialect for SQL Server (schemes mssql, sqlserver): qmark placeholders, as pyodbc expects."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mssql", "sqlserver")

    def placeholder(self, index: int) -> str:
        return "?"
