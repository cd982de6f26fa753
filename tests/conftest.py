import pytest

from spanlisp.interpreter import Interpreter, ReadPrintInterpreter
from spanlisp.syntax import parser
from spanlisp.syntax.codemap import Source
from spanlisp.util.interner import Interner


@pytest.fixture
def interner():
    return Interner()


@pytest.fixture
def interp():
    """Fresh step2 interpreter with builtins loaded."""
    return Interpreter()


@pytest.fixture
def read_print():
    return ReadPrintInterpreter()


@pytest.fixture
def run(interp):
    """Read and evaluate one line in the shared interpreter, returning the value."""
    def _run(line: str):
        source = Source(line)
        return interp.eval(interp.read(source), source)

    return _run


@pytest.fixture
def parse(interner):
    def _parse(line: str):
        return parser.expr(Source(line), interner)

    return _parse
