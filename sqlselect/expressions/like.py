"""LIKE expression."""

from typing import Any

from pydantic import model_validator

from ._bases import ArgumentedExpression, Expression
from .function import FunctionExpression
from .operators import NaryOperatorExpression

LIKE_ESCAPE_CHARACTER = "!"
"""Escape character for LIKE patterns; it needs no quoting in any supported dialect."""


def escape_for_like(needle: str) -> str:
    """Escape LIKE wildcards (``%``, ``_``) and the escape character itself."""
    return (
        needle.replace(LIKE_ESCAPE_CHARACTER, LIKE_ESCAPE_CHARACTER * 2)
        .replace("%", LIKE_ESCAPE_CHARACTER + "%")
        .replace("_", LIKE_ESCAPE_CHARACTER + "_")
    )


class LikeExpression(ArgumentedExpression):
    """LIKE expression (e.g. ``name LIKE ?`` bound to ``'%John%'``).

    The pattern is composed here and bound as a single value, so the fragment
    does not depend on the dialect's string concatenation operator. For the
    same reason, wildcards and escaping need a ``str`` needle; an expression
    needle is only accepted as a verbatim pattern (``like``/``ilike``).
    """

    symbol: str = "LIKE"
    case_insensitive: bool = False
    fuzzy_start: bool = True
    fuzzy_end: bool = True
    escape_needle: bool = True
    """When True (default), ``%``, ``_`` and ``!`` in the needle match literally."""

    @model_validator(mode="after")
    def _check_needle(self):
        if len(self.arguments) != 2:
            raise ValueError("LikeExpression must have two arguments")
        needle = self.arguments[1]
        if not isinstance(needle, str) and (self.fuzzy_start or self.fuzzy_end or self.escape_needle):
            raise TypeError(
                f"wildcard and escaped LIKE patterns require a str needle; got {type(needle)}"
            )
        return self

    @property
    def _haystack(self):
        haystack = self.arguments[0]
        if self.case_insensitive:
            return FunctionExpression(symbol="LOWER", arguments=(haystack,))
        return haystack

    @property
    def _pattern(self) -> Any:
        needle = self.arguments[1]
        if not isinstance(needle, str):
            if self.case_insensitive and isinstance(needle, Expression):
                return FunctionExpression(symbol="LOWER", arguments=(needle,))
            return needle
        if self.escape_needle:
            needle = escape_for_like(needle)
        if self.case_insensitive:
            needle = needle.lower()
        if self.fuzzy_start:
            needle = "%" + needle
        if self.fuzzy_end:
            needle = needle + "%"
        return needle

    @property
    def sql(self) -> str:
        sql = NaryOperatorExpression(symbol=self.symbol, arguments=(self._haystack, self._pattern)).sql
        if self.escape_needle:
            sql = sql[:-1] + f" ESCAPE '{LIKE_ESCAPE_CHARACTER}')"
        return sql

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values: the haystack's, then the composed pattern."""
        return self._argument_to_values(self._haystack) + self._argument_to_values(self._pattern)
