"""Registry of special forms for the faye evaluator.

Special forms are ordinary BuiltinFn values in globals; what sets them apart
is that they decide themselves which of their argument nodes to evaluate, if
any. `register` installs them into a scope next to the strict builtins.
"""

from faye.types.functions import BuiltinFn
from faye.types.scope import Scope
from faye.types.symbol import Symbol
from faye.evaluation.special_forms.quote_form import quote_form
from faye.evaluation.special_forms.if_form import if_form
from faye.evaluation.special_forms.logic_forms import and_form, or_form
from faye.evaluation.special_forms.let_form import let_form
from faye.evaluation.special_forms.define_form import const_form, fn_form
from faye.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("const"): const_form,
    Symbol("lambda"): lambda_form,
    Symbol("λ"): lambda_form,
}


def register(scope: Scope) -> None:
    scope.update({name: BuiltinFn(name, form) for name, form in SPECIAL_FORMS.items()})
