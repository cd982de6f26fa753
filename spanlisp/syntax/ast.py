"""Abstract syntax tree.

An Expr is a Spanned[Node]. Compound nodes hold their children as a tuple of
Expr, and every child span lies inside its parent's span.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from spanlisp.syntax.codemap import Spanned


class Operator(Enum):
    DEF = "def"
    IF = "if"
    LET = "let"


class ExprKind(Enum):
    BOOL = "bool"
    INTEGER = "integer"
    KEYWORD = "keyword"
    NIL = "nil"
    # `"..."`; the contents are read back from the source by span
    STRING = "string"
    SYMBOL = "symbol"
    OPERATOR = "operator"
    LIST = "list"
    VECTOR = "vector"


@dataclass(frozen=True)
class Node:
    kind: ExprKind
    # bool, int, Name, Operator, tuple[Expr, ...] or None depending on kind
    value: Any = None

    @property
    def children(self) -> tuple[Expr, ...]:
        if self.kind in (ExprKind.LIST, ExprKind.VECTOR):
            return self.value
        return ()


Expr = Spanned[Node]


def walk(expr: Expr):
    """Yield `expr` and all of its descendants, parents first."""
    yield expr
    for child in expr.node.children:
        yield from walk(child)
