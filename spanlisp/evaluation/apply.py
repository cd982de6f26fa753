"""Function application.

Arguments are evaluated left to right before the call; the first failure
propagates and later arguments are never evaluated. A built-in that returns
None has rejected its arguments, which is reported as UnsupportedOperation
over the whole call.
"""

from __future__ import annotations

from spanlisp import LispValue
from spanlisp.errors import UnsupportedOperation
from spanlisp.syntax.ast import Expr
from spanlisp.syntax.codemap import Source
from spanlisp.types.environment import Stack
from spanlisp.types.value import Function


def apply(
    fn: Function,
    call: Expr,
    arg_exprs: tuple[Expr, ...],
    source: Source,
    stack: Stack,
    evaluate_fn,
) -> LispValue:
    args = [evaluate_fn(arg, source, stack) for arg in arg_exprs]
    result = fn(args)
    if result is None:
        raise UnsupportedOperation(call.span, "function returned no value for these arguments")
    return result
