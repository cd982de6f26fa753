"""Runtime values.

Values are plain Python objects where one fits:

    - Bool     -> bool
    - Integer  -> int (signed 64-bit range)
    - Keyword  -> Keyword
    - Nil      -> Nil
    - String   -> str
    - Vector   -> list
    - Function -> Function
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from spanlisp import BuiltinFn, LispValue
from spanlisp.types.nil import Nil
from spanlisp.util.interner import Interner, Name


class Keyword:
    __slots__ = ("name",)

    def __init__(self, name: Name):
        self.name = name

    def __eq__(self, other) -> bool:
        return isinstance(other, Keyword) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Keyword, self.name))

    def __repr__(self):
        return f"Keyword({self.name!r})"


class Function:
    """A host callable shared by every value that refers to it."""

    __slots__ = ("fn",)

    def __init__(self, fn: BuiltinFn):
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> Optional[LispValue]:
        return self.fn(args)

    def __repr__(self):
        return f"<function at {id(self.fn):#x}>"


def is_truthy(value: LispValue) -> bool:
    """Everything except `false` and `nil` is truthy, including 0, "" and []."""
    return not (value is False or value is Nil)


def display(value: LispValue, interner: Interner) -> str:
    """Render a value the way the REPL prints it."""
    with StringIO() as buffer:
        _display(value, interner, buffer)
        return buffer.getvalue()


def _display(value: LispValue, interner: Interner, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("true" if value else "false")
        case int():
            buffer.write(str(value))
        case Keyword():
            buffer.write(":")
            buffer.write(interner.resolve(value.name))
        case str():
            buffer.write(value)
        case list():
            buffer.write("[")
            for i, elem in enumerate(value):
                if i:
                    buffer.write(" ")
                _display(elem, interner, buffer)
            buffer.write("]")
        case Function():
            buffer.write(repr(value))
        case _ if value is Nil:
            buffer.write("nil")
        case _:
            raise TypeError(f"not a spanlisp value: {value!r}")
