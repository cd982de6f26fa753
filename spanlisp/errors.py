"""Error hierarchy for spanlisp.

Every reader and evaluation error carries the Span of the offending source
text so diagnostics can underline it.
"""

from __future__ import annotations

from spanlisp.syntax.codemap import Span


class LispError(Exception):
    """ Base class for all spanlisp errors"""

    description = "error"

    def __init__(self, span: Span, message: str | None = None):
        super().__init__(message or self.description)
        self.span = span

    @property
    def kind(self) -> str:
        return type(self).__name__


# -------------------------------
# Reader (lex / parse) errors
# -------------------------------
class ReaderError(LispError):
    """ Raised when a line cannot be read into an expression"""


class UnbalancedDelimiter(ReaderError):
    """ Raised when a closing delimiter is missing or does not match its opener"""

    description = "this delimiter is never closed"


class UnexpectedToken(ReaderError):
    """ Raised on a token that cannot appear where it was found"""

    description = "unexpected token"


class UnexpectedEndOfInput(ReaderError):
    """ Raised when the input ends before an expression was read"""

    description = "unexpected end of input"


class InvalidInteger(ReaderError):
    """ Raised on an integer literal that is malformed or outside 64-bit range"""

    description = "invalid integer literal"


class UnterminatedString(ReaderError):
    """ Raised when a string literal has no closing quote"""

    description = "unterminated string literal"


class InvalidKeyword(ReaderError):
    """ Raised on a ':' that is not followed by a name"""

    description = "expected a name after ':'"


class NestingTooDeep(ReaderError):
    """ Raised when a line nests deeper than the reader can follow"""

    description = "expression is nested too deeply"


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(LispError):
    """ Raised when a well-formed expression cannot be evaluated"""


class EmptyList(EvalError):
    """ Raised when evaluating `()`"""

    description = "cannot evaluate an empty list"


class ExpectedFunction(EvalError):
    """ Raised when the head of a call is bound to something other than a function"""

    description = "expected a function"


class ExpectedSymbol(EvalError):
    """ Raised when a symbol is required but another form was given"""

    description = "expected a symbol"


class UndefinedSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

    description = "undefined symbol"


class UnsupportedOperation(EvalError):
    """ Raised on malformed special forms or when a function returns no value"""

    description = "unsupported operation"
