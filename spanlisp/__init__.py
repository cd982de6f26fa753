# Core type aliases for spanlisp's data model.
# Runtime values are plain Python types where one fits (bool, int, str, list),
# plus the Nil singleton, Keyword and Function wrappers from spanlisp.types.
#
# Naming guidance:
# - Expr:      span-annotated syntax tree node produced by the parser.
# - LispValue: result of evaluating an Expr.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Host callable wrapped by a Function value; returning None signals failure
BuiltinFn = Callable[[list], Any]

logging.getLogger(__name__).addHandler(logging.NullHandler())
