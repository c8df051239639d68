"""Base expression types for SQL condition trees."""

from __future__ import annotations
from typing import Any, Tuple

from pydantic import BaseModel, Field as PydanticField


class Expression(BaseModel):
    """Base type for all SQL expression nodes.

    Subclasses must implement the ``sql`` property. The default ``values``
    is an empty tuple; expression types that contain literals override it
    to return the bound values in the same order as ``?`` placeholders in ``sql``.
    """

    model_config = {"arbitrary_types_allowed": True}

    @property
    def sql(self) -> str:
        """SQL fragment for this expression, with ``?`` for bound parameters."""
        raise NotImplementedError("Subclasses must implement `sql` property")

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values for placeholders in ``sql``, in order."""
        return ()

    def in_(self, other: Any):
        """Build an IN expression (e.g. ``col("id").in_([1, 2, 3])``)."""
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="IN", arguments=(self, other))

    def not_in(self, other: Any):
        """Build a NOT IN expression."""
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="NOT IN", arguments=(self, other))

    def is_null(self):
        """Build an IS NULL expression."""
        from .operators import UnaryOperatorExpression
        return UnaryOperatorExpression(symbol="IS NULL", arguments=(self,), postfix=True)

    def is_not_null(self):
        """Build an IS NOT NULL expression."""
        from .operators import UnaryOperatorExpression
        return UnaryOperatorExpression(symbol="IS NOT NULL", arguments=(self,), postfix=True)

    def between(self, low: Any, high: Any):
        """Inclusive range: (expr >= low) & (expr <= high)."""
        return (self >= low) & (self <= high)

    def __invert__(self):
        """Build a NOT expression (``~expr``)."""
        from .operators import UnaryOperatorExpression
        return UnaryOperatorExpression(symbol="NOT", arguments=(self,))

    def __and__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="AND", arguments=(self, other))

    def __or__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="OR", arguments=(self, other))

    def __add__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="+", arguments=(self, other))

    def __sub__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="-", arguments=(self, other))

    def __neg__(self):
        from .operators import UnaryOperatorExpression
        return UnaryOperatorExpression(symbol="-", arguments=(self,))

    def __mul__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="*", arguments=(self, other))

    def __truediv__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="/", arguments=(self, other))

    def __mod__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="%", arguments=(self, other))

    def __eq__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="=", arguments=(self, other))

    def __ne__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="!=", arguments=(self, other))

    def __lt__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="<", arguments=(self, other))

    def __le__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol="<=", arguments=(self, other))

    def __gt__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol=">", arguments=(self, other))

    def __ge__(self, other: Any):
        from .operators import NaryOperatorExpression
        return NaryOperatorExpression(symbol=">=", arguments=(self, other))

    def like(self, pattern: str):
        """Build a LIKE expression (exact pattern, e.g. ``col("name").like("J%n")``)."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, pattern), fuzzy_start=False, fuzzy_end=False, escape_needle=False)

    def ilike(self, pattern: str):
        """Build a case-insensitive LIKE expression."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, pattern), fuzzy_start=False, fuzzy_end=False, case_insensitive=True, escape_needle=False)

    def startswith(self, prefix: str):
        """Build a LIKE expression for prefix match."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, prefix), fuzzy_start=False)

    def istartswith(self, prefix: str):
        """Build a case-insensitive prefix LIKE expression."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, prefix), fuzzy_start=False, case_insensitive=True)

    def endswith(self, suffix: str):
        """Build a LIKE expression for suffix match."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, suffix), fuzzy_end=False)

    def iendswith(self, suffix: str):
        """Build a case-insensitive suffix LIKE expression."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, suffix), fuzzy_end=False, case_insensitive=True)

    def contains(self, substring: str):
        """Build a LIKE expression for substring match."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, substring))

    def icontains(self, substring: str):
        """Build a case-insensitive substring LIKE expression."""
        from .like import LikeExpression
        return LikeExpression(arguments=(self, substring), case_insensitive=True)

    def lower(self):
        """Build a LOWER function call."""
        from .function import FunctionExpression
        return FunctionExpression(symbol="LOWER", arguments=(self,))

    def upper(self):
        """Build an UPPER function call."""
        from .function import FunctionExpression
        return FunctionExpression(symbol="UPPER", arguments=(self,))


class ArgumentedExpression(Expression):
    """Base for expressions that have a symbol and a tuple of arguments.

    Used by function calls (e.g. ``LOWER(x)``) and operators (e.g. ``=``, ``AND``).
    ``values`` is the concatenation of literal argument values; nested expressions
    are recursed into. A list or tuple argument is a value list: one ``?`` per item.
    """

    symbol: str
    arguments: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @staticmethod
    def _argument_to_sql(argument: Any) -> str:
        """Render one argument as SQL: expression's ``sql``, ``(?, ?)`` for value lists, ``?`` otherwise."""
        if isinstance(argument, Expression):
            return argument.sql
        if isinstance(argument, (list, tuple)):
            return "(" + ", ".join("?" for _ in argument) + ")"
        return "?"

    @staticmethod
    def _argument_to_values(argument: Any) -> tuple[Any, ...]:
        """Collect values for one argument: recurse into expressions, flatten value lists."""
        if isinstance(argument, Expression):
            return argument.values
        if isinstance(argument, (list, tuple)):
            return tuple(argument)
        return (argument,)

    @property
    def values(self) -> tuple[Any, ...]:
        """All literal values from arguments, in order (recursing into nested expressions)."""
        return sum(map(self._argument_to_values, self.arguments), ())
