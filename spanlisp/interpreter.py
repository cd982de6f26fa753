from __future__ import annotations

import logging

from spanlisp import LispValue, diagnostics
from spanlisp.builtin.env_builtin import register
from spanlisp.errors import EvalError, ReaderError, UnsupportedOperation
from spanlisp.evaluation.evaluator import evaluate
from spanlisp.syntax import parser, pp
from spanlisp.syntax.ast import Expr
from spanlisp.syntax.codemap import Source
from spanlisp.types.environment import Stack
from spanlisp.types.value import display
from spanlisp.util.interner import Interner

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, evaluates and prints one line at a time.
    The interner and the global environment persist across lines.
    """

    def __init__(self):
        self.interner = Interner()
        self.stack = Stack.new_global()
        register(self.stack, self.interner)

    def read(self, source: Source) -> Expr:
        return parser.expr(source, self.interner)

    def eval(self, expr: Expr, source: Source) -> LispValue:
        try:
            return evaluate(expr, source, self.stack)
        except RecursionError:
            # `let` frames are already popped by the time this is caught
            raise UnsupportedOperation(expr.span, "expression is nested too deeply") from None

    def rep(self, line: str) -> str:
        """Return the output for one input line: a printed value or a diagnostic."""
        source = Source(line)
        try:
            expr = self.read(source)
        except ReaderError as e:
            logger.debug("read error %s at %s", e.kind, e.span)
            return diagnostics.syntax(e, source)
        try:
            value = self.eval(expr, source)
        except EvalError as e:
            logger.debug("eval error %s at %s", e.kind, e.span)
            return diagnostics.eval_error(e, source)
        return display(value, self.interner) + "\n"


class ReadPrintInterpreter(Interpreter):
    """Parses and pretty-prints each line without evaluating it."""

    def rep(self, line: str) -> str:
        source = Source(line)
        try:
            expr = self.read(source)
        except ReaderError as e:
            logger.debug("read error %s at %s", e.kind, e.span)
            return diagnostics.syntax(e, source)
        return pp.expr(expr, source) + "\n"
