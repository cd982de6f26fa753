"""Registry of special forms for the spanlisp evaluator.

Maps reserved Operators to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary function
application. Every handler has the signature

    handler(expr, tail, source, stack, evaluate_fn) -> LispValue

where `expr` is the whole form and `tail` its arguments.
"""

from spanlisp.syntax.ast import Operator
from spanlisp.evaluation.special_forms.def_form import def_form
from spanlisp.evaluation.special_forms.if_form import if_form
from spanlisp.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Operator.DEF: def_form,
    Operator.IF: if_form,
    Operator.LET: let_form,
}
