"""
  Recursive-descent parser

    expr   := atom | list | vector
    list   := '(' expr* ')'
    vector := '[' expr* ']'
    atom   := Integer | String | Keyword | Symbol | true | false | nil | Op

Reserved operators (def, if, let) are only accepted at the head of a list;
anywhere else they are reported as UnexpectedToken.
"""

from __future__ import annotations

from typing import Iterator, Optional

from spanlisp.errors import (
    NestingTooDeep,
    UnbalancedDelimiter,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from spanlisp.syntax.ast import Expr, ExprKind, Node
from spanlisp.syntax.codemap import Source, Span, Spanned
from spanlisp.syntax.lexer import Token, TokenKind, lex
from spanlisp.util.interner import Interner

CLOSERS = (TokenKind.RPAREN, TokenKind.RBRACKET)

ATOMS: dict[TokenKind, ExprKind] = {
    TokenKind.INTEGER: ExprKind.INTEGER,
    TokenKind.STRING: ExprKind.STRING,
    TokenKind.KEYWORD: ExprKind.KEYWORD,
    TokenKind.SYMBOL: ExprKind.SYMBOL,
    TokenKind.NIL: ExprKind.NIL,
}


class TokenStream:
    def __init__(self, token_iter: Iterator[Spanned[Token]], source: Source):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Spanned[Token]] = []

    def peek(self) -> Optional[Spanned[Token]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Spanned[Token]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self, head: bool = False) -> Expr:
        tok = self.advance()
        if tok is None:
            raise UnexpectedEndOfInput(self.source.eof_span())

        kind = tok.node.kind
        if kind == TokenKind.LPAREN:
            return self._parse_sequence(tok, TokenKind.RPAREN, ExprKind.LIST)
        if kind == TokenKind.LBRACKET:
            return self._parse_sequence(tok, TokenKind.RBRACKET, ExprKind.VECTOR)
        if kind in CLOSERS:
            raise UnexpectedToken(tok.span, f"unexpected '{kind.value}'")
        if kind == TokenKind.TRUE:
            return Spanned(tok.span, Node(ExprKind.BOOL, True))
        if kind == TokenKind.FALSE:
            return Spanned(tok.span, Node(ExprKind.BOOL, False))
        if kind == TokenKind.OP:
            if not head:
                raise UnexpectedToken(
                    tok.span, f"'{tok.node.value.value}' must be at the head of a list"
                )
            return Spanned(tok.span, Node(ExprKind.OPERATOR, tok.node.value))
        return Spanned(tok.span, Node(ATOMS[kind], tok.node.value))

    def _parse_sequence(
        self, opener: Spanned[Token], closer: TokenKind, kind: ExprKind
    ) -> Expr:
        items: list[Expr] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise UnbalancedDelimiter(opener.span)
            if tok.node.kind == closer:
                self.advance()
                return Spanned(opener.span.to(tok.span), Node(kind, tuple(items)))
            if tok.node.kind in CLOSERS:
                # mismatched closer, e.g. `(1 2]`
                raise UnbalancedDelimiter(opener.span)
            items.append(self.parse_expr(head=kind == ExprKind.LIST and not items))


def expr(source: Source, interner: Interner) -> Expr:
    """Parse exactly one expression from `source`.

    Raises a ReaderError subclass on malformed input, including any tokens
    left over after the first complete expression.
    """
    stream = TokenStream(lex(source, interner), source)
    try:
        result = stream.parse_expr()
    except RecursionError:
        raise NestingTooDeep(Span(source.start, source.eof_span().hi)) from None
    trailing = stream.peek()
    if trailing is not None:
        raise UnexpectedToken(trailing.span, "expected end of input")
    return result
