"""Core tree-walking evaluator for spanlisp.

Dispatches special forms by their reserved operator, applies functions bound
to head symbols, and raises span-carrying EvalErrors.
"""

from __future__ import annotations

from spanlisp import LispValue
from spanlisp.errors import (
    EmptyList,
    ExpectedFunction,
    ExpectedSymbol,
    UndefinedSymbol,
)
from spanlisp.evaluation.apply import apply
from spanlisp.evaluation.special_forms import SPECIAL_FORMS
from spanlisp.syntax.ast import Expr, ExprKind
from spanlisp.syntax.codemap import Source, Span
from spanlisp.types.environment import Stack
from spanlisp.types.nil import Nil
from spanlisp.types.value import Function, Keyword


def evaluate(expr: Expr, source: Source, stack: Stack) -> LispValue:
    """
    Evaluate `expr` against `stack`. `source` is the line `expr` was parsed
    from; string literals are read back out of it.
    """
    node = expr.node
    match node.kind:
        case ExprKind.BOOL | ExprKind.INTEGER:
            return node.value
        case ExprKind.KEYWORD:
            return Keyword(node.value)
        case ExprKind.NIL:
            return Nil
        case ExprKind.STRING:
            # Contents between the quotes, verbatim
            return source[Span(expr.span.lo + 1, expr.span.hi - 1)]
        case ExprKind.SYMBOL:
            value = stack.get(node.value)
            if value is None:
                raise UndefinedSymbol(expr.span, f"undefined symbol '{source[expr.span]}'")
            return value
        case ExprKind.VECTOR:
            return [evaluate(elem, source, stack) for elem in node.value]
        case ExprKind.LIST:
            return evaluate_list(expr, source, stack)
        case ExprKind.OPERATOR:
            # The parser only emits operators at the head of a list
            raise RuntimeError(f"bare operator {node.value} reached the evaluator")
    raise RuntimeError(f"unknown expression kind {node.kind}")


def evaluate_list(expr: Expr, source: Source, stack: Stack) -> LispValue:
    if not expr.node.value:
        raise EmptyList(expr.span)

    head, *tail = expr.node.value
    match head.node.kind:
        case ExprKind.OPERATOR:
            form = SPECIAL_FORMS[head.node.value]
            return form(expr, tail, source, stack, evaluate)
        case ExprKind.SYMBOL:
            fn = stack.get(head.node.value)
            if fn is None:
                raise UndefinedSymbol(head.span, f"undefined symbol '{source[head.span]}'")
            if not isinstance(fn, Function):
                raise ExpectedFunction(head.span)
            return apply(fn, expr, tuple(tail), source, stack, evaluate)
        case _:
            raise ExpectedSymbol(head.span)
