"""sqlselect: a mutable, copyable SELECT builder compiling to parameterized SQL."""

from .column_set import ColumnSet
from .config import configure, get_default_dialect
from .expressions import ColumnOrder, Condition, asc, desc
from .conditions import col
from .query import BaseQuery, Query
from .statement import SelectStatement
