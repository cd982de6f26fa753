import pytest
from hypothesis import given, strategies as st

from spanlisp import errors
from spanlisp.syntax import parser, pp
from spanlisp.syntax.ast import ExprKind, Operator, walk
from spanlisp.syntax.codemap import Source, Span
from spanlisp.syntax.lexer import TokenKind, lex
from spanlisp.util.interner import Interner


def _kinds(source, interner):
    return [tok.node.kind for tok in lex(Source(source), interner)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [TokenKind.SYMBOL]),
        ("(a b c)", [TokenKind.LPAREN, TokenKind.SYMBOL, TokenKind.SYMBOL, TokenKind.SYMBOL, TokenKind.RPAREN]),
        ("[1 :k]", [TokenKind.LBRACKET, TokenKind.INTEGER, TokenKind.KEYWORD, TokenKind.RBRACKET]),
        ('"hello"', [TokenKind.STRING]),
        ("1,2 ,3", [TokenKind.INTEGER, TokenKind.INTEGER, TokenKind.INTEGER]),
        ("def if let", [TokenKind.OP, TokenKind.OP, TokenKind.OP]),
        ("nil true false", [TokenKind.NIL, TokenKind.TRUE, TokenKind.FALSE]),
        ("(+ 1(f))", [TokenKind.LPAREN, TokenKind.SYMBOL, TokenKind.INTEGER, TokenKind.LPAREN, TokenKind.SYMBOL, TokenKind.RPAREN, TokenKind.RPAREN]),
        ('a"b"', [TokenKind.SYMBOL, TokenKind.STRING]),
        ('1"x"', [TokenKind.INTEGER, TokenKind.STRING]),
        (':k"x"', [TokenKind.KEYWORD, TokenKind.STRING]),
        ("", []),
        ("  ,, \t", []),
    ]
)
def test_lexer_basic(source, expected, interner):
    assert _kinds(source, interner) == expected


@pytest.mark.parametrize(
    "source,kind,value",
    [
        ("42", TokenKind.INTEGER, 42),
        ("-45", TokenKind.INTEGER, -45),
        ("-9223372036854775808", TokenKind.INTEGER, -(2**63)),
        ("9223372036854775807", TokenKind.INTEGER, 2**63 - 1),
        ("-", TokenKind.SYMBOL, "-"),
        ("-abc", TokenKind.SYMBOL, "-abc"),
        ("a-1", TokenKind.SYMBOL, "a-1"),
        ("nil?", TokenKind.SYMBOL, "nil?"),
        ("define", TokenKind.SYMBOL, "define"),
        (":foo", TokenKind.KEYWORD, "foo"),
        (":a:b", TokenKind.KEYWORD, "a:b"),
    ]
)
def test_lexer_token_values(source, kind, value, interner):
    (tok,) = list(lex(Source(source), interner))
    assert tok.node.kind == kind
    if kind in (TokenKind.SYMBOL, TokenKind.KEYWORD):
        assert interner.resolve(tok.node.value) == value
    else:
        assert tok.node.value == value


def test_lexer_spans(interner):
    toks = list(lex(Source('(:key "a b" x)'), interner))
    assert [t.span for t in toks] == [
        Span(0, 1),
        Span(1, 5),    # keyword span includes the colon
        Span(6, 11),   # string span includes both quotes
        Span(12, 13),
        Span(13, 14),
    ]


def test_string_with_escaped_quote(interner):
    source = Source(r'"a\"b" c')
    toks = list(lex(source, interner))
    assert [t.node.kind for t in toks] == [TokenKind.STRING, TokenKind.SYMBOL]
    assert source[toks[0].span] == r'"a\"b"'


def test_reserved_words_are_not_interned(interner):
    list(lex(Source("(def x (if true nil false)) (let [y 1] y)"), interner))
    for word in ("def", "if", "let", "nil", "true", "false"):
        assert word not in interner
    assert "x" in interner
    assert "y" in interner


def test_operator_tokens(interner):
    toks = list(lex(Source("def if let"), interner))
    assert [t.node.value for t in toks] == [Operator.DEF, Operator.IF, Operator.LET]


@pytest.mark.parametrize(
    "source,error,span",
    [
        ('"abc', errors.UnterminatedString, Span(0, 4)),
        ('(f "abc', errors.UnterminatedString, Span(3, 7)),
        ('"abc\\"', errors.UnterminatedString, Span(0, 6)),
        (":", errors.InvalidKeyword, Span(0, 1)),
        ("[: a]", errors.InvalidKeyword, Span(1, 2)),
        ("12abc", errors.InvalidInteger, Span(0, 5)),
        ("-3x", errors.InvalidInteger, Span(0, 3)),
        ("9223372036854775808", errors.InvalidInteger, Span(0, 19)),
        ("-9223372036854775809", errors.InvalidInteger, Span(0, 20)),
    ]
)
def test_lexer_errors(source, error, span, interner):
    with pytest.raises(error) as info:
        list(lex(Source(source), interner))
    assert info.value.span == span


# -------------------------------
# Parser
# -------------------------------
def test_parse_list(parse, interner):
    e = parse("(a b c)")
    assert e.node.kind == ExprKind.LIST
    assert e.span == Span(0, 7)
    assert [c.node.kind for c in e.node.children] == [ExprKind.SYMBOL] * 3
    assert [interner.resolve(c.node.value) for c in e.node.children] == ["a", "b", "c"]


@pytest.mark.parametrize(
    "source,kind,value",
    [
        ("true", ExprKind.BOOL, True),
        ("false", ExprKind.BOOL, False),
        ("nil", ExprKind.NIL, None),
        ("123", ExprKind.INTEGER, 123),
        ('"s"', ExprKind.STRING, None),
    ]
)
def test_parse_atoms(parse, source, kind, value):
    e = parse(source)
    assert e.node.kind == kind
    assert e.node.value == value
    assert e.span == Span(0, len(source))


def test_parse_nested(parse):
    e = parse("[1 (f [2]) :k]")
    assert e.node.kind == ExprKind.VECTOR
    inner = e.node.children[1]
    assert inner.node.kind == ExprKind.LIST
    assert inner.span == Span(3, 10)
    assert inner.node.children[1].node.kind == ExprKind.VECTOR
    assert inner.node.children[1].span == Span(6, 9)


def test_parse_operator_in_head_position(parse):
    e = parse("(def a 1)")
    head = e.node.children[0]
    assert head.node.kind == ExprKind.OPERATOR
    assert head.node.value == Operator.DEF


@pytest.mark.parametrize(
    "source,error,span",
    [
        ("(1 2", errors.UnbalancedDelimiter, Span(0, 1)),
        ("(1 2]", errors.UnbalancedDelimiter, Span(0, 1)),
        ("[(1 2]", errors.UnbalancedDelimiter, Span(1, 2)),
        ("[1 [2", errors.UnbalancedDelimiter, Span(3, 4)),
        (")", errors.UnexpectedToken, Span(0, 1)),
        ("]", errors.UnexpectedToken, Span(0, 1)),
        ("(1))", errors.UnexpectedToken, Span(3, 4)),
        ("1 2", errors.UnexpectedToken, Span(2, 3)),
        ("def", errors.UnexpectedToken, Span(0, 3)),
        ("(a def)", errors.UnexpectedToken, Span(3, 6)),
        ("[if 1 2 3]", errors.UnexpectedToken, Span(1, 3)),
        ("(let [let 1] 2)", errors.UnexpectedToken, Span(6, 9)),
        (",,", errors.UnexpectedEndOfInput, Span(2, 2)),
        ("", errors.UnexpectedEndOfInput, Span(0, 0)),
        ("(+ 1 99999999999999999999)", errors.InvalidInteger, Span(5, 25)),
        ("(x) \"open", errors.UnterminatedString, Span(4, 9)),
        ('1"x"', errors.UnexpectedToken, Span(1, 4)),
    ]
)
def test_parse_errors(parse, source, error, span):
    with pytest.raises(error) as info:
        parse(source)
    assert info.value.span == span
    assert isinstance(info.value, errors.ReaderError)


# -------------------------------
# Strategies
# -------------------------------
atom_strat = st.one_of(
    st.integers(min_value=-(2**63), max_value=2**63 - 1).map(str),
    st.sampled_from(["a", "foo", "+", "-", "x1", "nil?", "nil", "true", "false"]),
    st.sampled_from([":k", ":a-b", '"s"', '""', '"a b"', '"q\\"q"']),
)

separator_strat = st.sampled_from([" ", "  ", ", ", ",", "\t"])


def _seq(parts):
    (open_, close), sep, items = parts
    return open_ + sep.join(items) + close


source_strat = st.recursive(
    atom_strat,
    lambda children: st.tuples(
        st.sampled_from(["()", "[]"]), separator_strat, st.lists(children, max_size=4)
    ).map(_seq),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(source_strat)
def test_child_spans_are_inside_parent(text):
    e = parser.expr(Source(text), Interner())
    assert e.span == Span(0, len(text))
    for node in walk(e):
        for child in node.node.children:
            assert node.span.contains(child.span)


@given(source_strat)
def test_pretty_print_round_trip(text):
    interner = Interner()
    canonical = pp.expr(parser.expr(Source(text), interner), Source(text))
    again = pp.expr(parser.expr(Source(canonical), interner), Source(canonical))
    assert again == canonical


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(a   b ,c)", "(a b c)"),
        ("[ 1 ,2,3 ]", "[1 2 3]"),
        ('(def s   "two  spaces")', '(def s "two  spaces")'),
        ("( let [a 1] ( + a  2 ) )", "(let [a 1] (+ a 2))"),
        ("()", "()"),
        (":k", ":k"),
        ("-0", "-0"),
    ]
)
def test_pretty_print(source, expected, interner):
    src = Source(source)
    assert pp.expr(parser.expr(src, interner), src) == expected
