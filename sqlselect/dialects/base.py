"""Base Dialect type: subclasses choose how bound parameters are written."""

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel


class Dialect(BaseModel, ABC):
    """Base for database dialects; subclasses implement placeholder() for their paramstyle."""

    model_config = {"frozen": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',), ('mssql', 'sqlserver'))."""

    @abstractmethod
    def placeholder(self, index: int) -> str:
        """Return the marker for the bound parameter at 1-based position index."""
        ...  # pylint: disable=unnecessary-ellipsis

    def format_placeholders(self, sql: str) -> str:
        """Rewrite every ``?`` marker in sql into this dialect's placeholder, numbering from 1."""
        parts = sql.split("?")
        result = [parts[0]]
        for index, part in enumerate(parts[1:], start=1):
            result.append(self.placeholder(index))
            result.append(part)
        return "".join(result)
