"""Built-in functions for the spanlisp global environment.

Every built-in takes the evaluated argument list and returns a value, or
None when it cannot handle the arguments (wrong types, wrong arity, division
by zero, 64-bit overflow). The evaluator turns None into UnsupportedOperation.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Optional

from spanlisp import LispValue
from spanlisp.types.environment import Stack
from spanlisp.types.value import Function, Keyword, display, is_truthy
from spanlisp.util.interner import Interner

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _integers(args: list[LispValue]) -> bool:
    # bool is a subclass of int but is not an Integer here
    return all(type(a) is int for a in args)


def _checked(value: int) -> Optional[int]:
    return value if I64_MIN <= value <= I64_MAX else None


def _fold(op: Callable[[int, int], Optional[int]], args: list[int]) -> Optional[int]:
    def step(acc, x):
        return None if acc is None else op(acc, x)

    return reduce(step, args[1:], args[0])


def _trunc_div(a: int, b: int) -> Optional[int]:
    """Integer division rounding toward zero; None on division by zero."""
    if b == 0:
        return None
    q = abs(a) // abs(b)
    return _checked(q if (a < 0) == (b < 0) else -q)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> Optional[int]:
    if not _integers(args):
        return None
    return _checked(sum(args))


def sub(args: list[LispValue]) -> Optional[int]:
    if not args or not _integers(args):
        return None
    if len(args) == 1:
        return _checked(-args[0])
    return _fold(lambda a, b: _checked(a - b), args)


def mul(args: list[LispValue]) -> Optional[int]:
    if not _integers(args):
        return None
    return _fold(lambda a, b: _checked(a * b), [1, *args])


def div(args: list[LispValue]) -> Optional[int]:
    if len(args) < 2 or not _integers(args):
        return None
    return _fold(_trunc_div, args)


def mod(args: list[LispValue]) -> Optional[int]:
    """(mod a b): result takes the sign of the divisor."""
    if len(args) != 2 or not _integers(args) or args[1] == 0:
        return None
    return args[0] % args[1]


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; true is never equal to 1."""
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Function):
        return a.fn is b.fn
    return a == b


def equals(args: list[LispValue]) -> Optional[bool]:
    if not args:
        return None
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


def not_equals(args: list[LispValue]) -> Optional[bool]:
    result = equals(args)
    return None if result is None else not result


def _comparison(op: Callable[[int, int], bool]):
    def compare(args: list[LispValue]) -> Optional[bool]:
        if not args or not _integers(args):
            return None
        return all(op(a, b) for a, b in zip(args, args[1:]))

    return compare


lt = _comparison(operator.lt)
lte = _comparison(operator.le)
gt = _comparison(operator.gt)
gte = _comparison(operator.ge)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: list[LispValue]) -> Optional[bool]:
    if len(args) != 1:
        return None
    return not is_truthy(args[0])


# -------------------------------
# Vectors and strings
# -------------------------------
def vector(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def count(args: list[LispValue]) -> Optional[int]:
    if len(args) != 1 or not isinstance(args[0], (str, list)):
        return None
    return len(args[0])


def make_str(interner: Interner) -> Callable[[list[LispValue]], str]:
    """(str a b ...) concatenates the printed form of its arguments."""
    def str_builtin(args: list[LispValue]) -> str:
        return "".join(display(a, interner) for a in args)

    return str_builtin


def make_keyword(interner: Interner) -> Callable[[list[LispValue]], Optional[Keyword]]:
    """(keyword "name") interns `name` as a keyword."""
    def keyword_builtin(args: list[LispValue]) -> Optional[Keyword]:
        if len(args) != 1 or not isinstance(args[0], str):
            return None
        return Keyword(interner.intern(args[0]))

    return keyword_builtin


def register(stack: Stack, interner: Interner) -> None:
    """Register all builtin functions into the topmost (normally global) frame."""
    builtins = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "mod": mod,
        "=": equals,
        "not=": not_equals,
        "<": lt,
        "<=": lte,
        ">": gt,
        ">=": gte,
        "not": logical_not,
        "vector": vector,
        "count": count,
        "str": make_str(interner),
        "keyword": make_keyword(interner),
    }
    stack.update(
        {interner.intern(name): Function(fn) for name, fn in builtins.items()}
    )
