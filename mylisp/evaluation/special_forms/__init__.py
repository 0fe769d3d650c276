"""Registry of special forms for the mylisp evaluator.

Maps operator names to handlers that receive their arguments unevaluated.
The evaluator consults this table before ordinary builtin application, so
these names never reach the builtin registry.
"""

from mylisp.evaluation.special_forms.quote_forms import quote_form

SPECIAL_FORMS = {
    "quote": quote_form,
}
