"""Registry of special forms for the schemelet evaluator.

Maps Symbols to handler functions that receive their operands unevaluated.
The evaluator consults this table before ordinary procedure application.
"""

from schemelet.types.symbol import Symbol
from schemelet.evaluation.special_forms.define_form import define_form
from schemelet.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("if"): if_form,
}
