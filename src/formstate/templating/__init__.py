"""Kida template integration for formstate.

Usage::

    from formstate.templating import create_environment, render_form

    env = create_environment()
    html = render_form(env, state, PERSON_FORM, noun="person")
"""

from formstate.templating.filters import BUILTIN_FILTERS, attr, field_class, field_errors
from formstate.templating.integration import FORM_TEMPLATE, create_environment, render_form

__all__ = [
    "BUILTIN_FILTERS",
    "FORM_TEMPLATE",
    "attr",
    "create_environment",
    "field_class",
    "field_errors",
    "render_form",
]
