"""
  Lexer

Splits a Source into a lazy stream of Spanned[Token].

    - whitespace and commas separate tokens
    - ( ) [ ] -> delimiter tokens
    - "..."   -> STRING, span covers both quotes; contents stay in the source
    - :name   -> KEYWORD, value is the interned name without the colon
    - -?digits -> INTEGER
    - def/if/let -> OP, nil/true/false -> their own kinds
    - anything else -> SYMBOL
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from spanlisp.errors import InvalidInteger, InvalidKeyword, UnterminatedString
from spanlisp.syntax.ast import Operator
from spanlisp.syntax.codemap import Source, Span, Spanned
from spanlisp.util.interner import Interner

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

SEPARATOR_RE = re.compile(r"[\s,]*")

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # quote with no closing partner
    r'|(?P<keyword>:[^\s,()\[\]"]*)'  # keywords, name may be empty (an error)
    r'|(?P<atom>[^\s,()\[\]"]+)'  # integers, reserved words and symbols
)

INTEGER_RE = re.compile(r"-?[0-9]+")
# Runs that look numeric but are not valid integers, e.g. `12abc` or `-3x`
NUMERIC_PREFIX_RE = re.compile(r"-?[0-9]")


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    INTEGER = "integer"
    STRING = "string"
    KEYWORD = "keyword"
    SYMBOL = "symbol"
    TRUE = "true"
    FALSE = "false"
    NIL = "nil"
    OP = "operator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Any = None


DELIMITERS: dict[str, TokenKind] = {
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "lbracket": TokenKind.LBRACKET,
    "rbracket": TokenKind.RBRACKET,
}

RESERVED: dict[str, Token] = {
    "def": Token(TokenKind.OP, Operator.DEF),
    "if": Token(TokenKind.OP, Operator.IF),
    "let": Token(TokenKind.OP, Operator.LET),
    "nil": Token(TokenKind.NIL),
    "true": Token(TokenKind.TRUE),
    "false": Token(TokenKind.FALSE),
}


def _atom(text: str, span: Span, interner: Interner) -> Token:
    reserved = RESERVED.get(text)
    if reserved is not None:
        return reserved
    if INTEGER_RE.fullmatch(text):
        value = int(text)
        if not I64_MIN <= value <= I64_MAX:
            raise InvalidInteger(span, "integer literal does not fit in 64 bits")
        return Token(TokenKind.INTEGER, value)
    if NUMERIC_PREFIX_RE.match(text):
        raise InvalidInteger(span)
    return Token(TokenKind.SYMBOL, interner.intern(text))


def lex(source: Source, interner: Interner) -> Iterator[Spanned[Token]]:
    """Token generator: yields Spanned[Token] in source order.

    Errors are raised lazily, when the offending token is reached.
    """
    text = source.as_str()
    base = source.start
    pos = 0
    n = len(text)

    while True:
        pos = SEPARATOR_RE.match(text, pos).end()
        if pos >= n:
            return

        m = TOKEN_RE.match(text, pos)
        group = m.lastgroup
        span = Span(base + m.start(), base + m.end())
        pos = m.end()

        if group in DELIMITERS:
            yield Spanned(span, Token(DELIMITERS[group]))
        elif group == "string":
            yield Spanned(span, Token(TokenKind.STRING))
        elif group == "open_string":
            raise UnterminatedString(Span(span.lo, base + n))
        elif group == "keyword":
            if len(span) == 1:
                raise InvalidKeyword(span)
            name = interner.intern(m.group()[1:])
            yield Spanned(span, Token(TokenKind.KEYWORD, name))
        else:
            yield Spanned(span, _atom(m.group(), span, interner))
