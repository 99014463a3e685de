"""Registry of special forms for the meval evaluator.

Maps Symbols to handler functions `handler(operands, env, evaluate_fn)` that
implement non-standard evaluation rules. The evaluator consults this table
before ordinary application.

PRISTINE_SPECIAL_FORMS holds the core forms only; SPECIAL_FORMS adds the
derived forms, each of which is rewritten into core forms before evaluation.
"""

from meval.types.symbol import Symbol
from meval.evaluation.special_forms.quote_form import quote_form
from meval.evaluation.special_forms.set_form import set_form
from meval.evaluation.special_forms.define_form import define_form
from meval.evaluation.special_forms.if_form import if_form
from meval.evaluation.special_forms.lambda_form import lambda_form
from meval.evaluation.special_forms.begin_form import begin_form
from meval.evaluation.special_forms.cond_form import cond_form
from meval.evaluation.special_forms.logic_forms import and_form, or_form, unless_form
from meval.evaluation.special_forms.let_forms import (
    let_star_form,
    letrec_form,
    named_let_form,
)

PRISTINE_SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("cond"): cond_form,
}

SPECIAL_FORMS = {
    **PRISTINE_SPECIAL_FORMS,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("unless"): unless_form,
    Symbol("let"): named_let_form,
    Symbol("let*"): let_star_form,
    Symbol("letrec"): letrec_form,
}
