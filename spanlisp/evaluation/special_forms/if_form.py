from spanlisp import LispValue
from spanlisp.errors import UnsupportedOperation
from spanlisp.syntax.ast import Expr
from spanlisp.syntax.codemap import Source
from spanlisp.types.environment import Stack
from spanlisp.types.value import is_truthy


def if_form(
    expr: Expr,
    tail: list[Expr],
    source: Source,
    stack: Stack,
    evaluate_fn,
) -> LispValue:
    if len(tail) != 3:
        raise UnsupportedOperation(expr.span, "if requires a condition, a then-branch and an else-branch")

    cond, then, otherwise = tail
    # Only the chosen branch is evaluated
    if is_truthy(evaluate_fn(cond, source, stack)):
        return evaluate_fn(then, source, stack)
    return evaluate_fn(otherwise, source, stack)
