"""SQL expression types for WHERE conditions and ORDER BY entries.

Conditions are trees of expressions. Start from a column (``col("age")``) and
combine with operators (``==``, ``<``, ``.in_(...)``) and logic (``&``, ``|``,
``~``). Each expression has a ``.sql`` property (SQL fragment with ``?``
placeholders) and ``.values`` (tuple of bound values in the same order).
"""

from ._bases import ArgumentedExpression, Expression
from .column import ColumnExpression
from .function import FunctionExpression
from .like import LikeExpression, escape_for_like
from .operators import NaryOperatorExpression, UnaryOperatorExpression
from .order import ColumnOrder, asc, desc

# A Condition is any expression usable in a WHERE clause.
Condition = Expression

__all__ = [
    "ArgumentedExpression",
    "ColumnExpression",
    "ColumnOrder",
    "Condition",
    "Expression",
    "FunctionExpression",
    "LikeExpression",
    "NaryOperatorExpression",
    "UnaryOperatorExpression",
    "asc",
    "desc",
    "escape_for_like",
]
