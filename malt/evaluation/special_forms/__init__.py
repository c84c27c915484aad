"""Registry of special forms for the malt evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application.
"""

from malt.types.symbol import Symbol
from malt.evaluation.special_forms.def_form import def_form
from malt.evaluation.special_forms.do_form import do_form
from malt.evaluation.special_forms.fn_form import fn_form
from malt.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("do"): do_form,
    Symbol("fn*"): fn_form,
    Symbol("let*"): let_form,
}
