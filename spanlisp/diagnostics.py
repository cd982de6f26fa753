"""Human-readable rendering of reader and evaluation errors.

    error: UndefinedSymbol: undefined symbol
    (foo 1 2)
     ^^^
"""

from __future__ import annotations

from io import StringIO

from spanlisp.errors import EvalError, LispError, ReaderError
from spanlisp.syntax.codemap import Source


def render(error: LispError, source: Source) -> str:
    """Header, the source line, and a caret line under `error.span`."""
    line = source.as_str()
    lo = error.span.lo - source.start
    width = max(1, len(error.span))
    with StringIO() as buffer:
        buffer.write(f"error: {error.kind}: {error}\n")
        buffer.write(line)
        buffer.write("\n")
        buffer.write(" " * lo)
        buffer.write("^" * width)
        buffer.write("\n")
        return buffer.getvalue()


def syntax(error: ReaderError, source: Source) -> str:
    return render(error, source)


def eval_error(error: EvalError, source: Source) -> str:
    return render(error, source)
