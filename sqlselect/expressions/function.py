"""SQL function call expression."""

from ._bases import ArgumentedExpression


class FunctionExpression(ArgumentedExpression):
    """Call of a SQL function by name: ``LOWER(name)``, ``COALESCE(nickname, ?)``."""

    @property
    def sql(self) -> str:
        if not self.symbol:
            raise ValueError("FunctionExpression must have a symbol")
        arguments = ", ".join(self._argument_to_sql(argument) for argument in self.arguments)
        return f"{self.symbol}({arguments})"
