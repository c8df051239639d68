"""Operator expressions: n-ary infix (``a = b``, ``a AND b``) and unary (``NOT a``, ``a IS NULL``)."""

from ._bases import ArgumentedExpression


class NaryOperatorExpression(ArgumentedExpression):
    """Infix operator between two or more arguments, always parenthesized.

    ``NaryOperatorExpression(symbol="AND", arguments=(a, b, c)).sql == "(a AND b AND c)"``
    """

    @property
    def sql(self) -> str:
        if not self.symbol:
            raise ValueError("NaryOperatorExpression must have a symbol")
        if not self.arguments:
            raise ValueError("NaryOperatorExpression must have at least one argument")
        separator = f" {self.symbol} "
        return "(" + separator.join(map(self._argument_to_sql, self.arguments)) + ")"


class UnaryOperatorExpression(ArgumentedExpression):
    """Operator on one argument, written before it (``NOT``, ``-``) or after it (``IS NULL``)."""

    postfix: bool = False

    @property
    def sql(self) -> str:
        operand = self._argument_to_sql(self.arguments[0])
        return f"{operand} {self.symbol}" if self.postfix else f"{self.symbol} {operand}"
