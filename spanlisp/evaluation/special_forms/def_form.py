import logging

from spanlisp import LispValue
from spanlisp.errors import ExpectedSymbol, UnsupportedOperation
from spanlisp.syntax.ast import Expr, ExprKind
from spanlisp.syntax.codemap import Source
from spanlisp.types.environment import Stack

logger = logging.getLogger(__name__)


def def_form(
    expr: Expr,
    tail: list[Expr],
    source: Source,
    stack: Stack,
    evaluate_fn,
) -> LispValue:
    """
    (def name value)
    Binds `name` in the topmost frame and yields the value. Nothing is bound
    if evaluating `value` fails.
    """
    if len(tail) != 2:
        raise UnsupportedOperation(expr.span, "def requires a symbol and a value")

    name, val_expr = tail
    if name.node.kind != ExprKind.SYMBOL:
        raise ExpectedSymbol(name.span)

    value = evaluate_fn(val_expr, source, stack)
    stack.insert(name.node.value, value)
    logger.debug("def %s at depth %d", source[name.span], stack.depth)
    return value
