"""Evaluation rules for the forms that are not ordinary calls."""

from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.cond_form import cond_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.do_form import do_form

__all__ = ["if_form", "cond_form", "define_form", "do_form"]
