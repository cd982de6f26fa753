"""Pretty-printer: renders an Expr back to canonical source text."""

from __future__ import annotations

from io import StringIO

from spanlisp.syntax.ast import Expr, ExprKind
from spanlisp.syntax.codemap import Source

BRACKETS = {
    ExprKind.LIST: ("(", ")"),
    ExprKind.VECTOR: ("[", "]"),
}


def expr(e: Expr, source: Source) -> str:
    """Atoms keep their original lexeme; sequences are single-space separated."""
    with StringIO() as buffer:
        _write(e, source, buffer)
        return buffer.getvalue()


def _write(e: Expr, source: Source, buffer: StringIO) -> None:
    brackets = BRACKETS.get(e.node.kind)
    if brackets is None:
        buffer.write(source[e.span])
        return
    open_, close = brackets
    buffer.write(open_)
    for i, child in enumerate(e.node.children):
        if i:
            buffer.write(" ")
        _write(child, source, buffer)
    buffer.write(close)
