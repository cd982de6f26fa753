from spanlisp import LispValue
from spanlisp.errors import ExpectedSymbol, UnsupportedOperation
from spanlisp.syntax.ast import Expr, ExprKind
from spanlisp.syntax.codemap import Source
from spanlisp.types.environment import Env, Stack


def let_form(
    expr: Expr,
    tail: list[Expr],
    source: Source,
    stack: Stack,
    evaluate_fn,
) -> LispValue:
    """
    (let [name value ...] body)
    Bindings are evaluated in order in a fresh frame, so later values see
    earlier names. The frame is discarded once the body has been evaluated or
    an error escapes.
    """
    if len(tail) != 2:
        raise UnsupportedOperation(expr.span, "let requires a binding form and a body")

    bindings, body = tail
    if bindings.node.kind not in (ExprKind.LIST, ExprKind.VECTOR):
        raise UnsupportedOperation(expr.span, "let bindings must be a list or vector")
    pairs = bindings.node.value
    if len(pairs) % 2 != 0:
        raise UnsupportedOperation(expr.span, "let bindings must come in pairs")

    with stack.push(Env()) as scope:
        for name, val_expr in zip(pairs[::2], pairs[1::2]):
            if name.node.kind != ExprKind.SYMBOL:
                raise ExpectedSymbol(name.span)
            scope.insert(name.node.value, evaluate_fn(val_expr, source, scope))
        return evaluate_fn(body, source, scope)
