"""Built-in formstate template filters.

Registered automatically on every environment built by
``create_environment()``. They let hand-written templates ask the same
questions the renderer answers, one field at a time.
"""

import html
from collections.abc import Mapping
from typing import Any

from kida.template import Markup

from formstate.config import RenderConfig
from formstate.snapshot import FormState

_DEFAULTS = RenderConfig()


def field_errors(errors: Any, field_name: str) -> list[str]:
    """Extract validation errors for a single form field.

    Accepts a ``FormState``, a ``{field: [messages]}`` mapping, or
    ``None``, returning an empty list when the field has no errors.

    Example:
        {% for msg in state | field_errors("username") %}
          <span class="field-error">{{ msg }}</span>
        {% end %}

    """
    if isinstance(errors, FormState):
        return list(errors.errors_for(field_name))
    if isinstance(errors, Mapping):
        val = errors.get(field_name, [])
        return list(val) if val else []
    return []


def field_class(
    errors: Any,
    field_name: str,
    base: str = _DEFAULTS.base_class,
    marker: str = _DEFAULTS.error_class,
) -> str:
    """Class string for a field wrapper, with the error marker when needed.

    Example:
        <div class="{{ state | field_class("email") }}">
        → <div class="field field_with_errors">   (when email has errors)
        → <div class="field">                     (otherwise)

    """
    if field_errors(errors, field_name):
        return f"{base} {marker}" if base else marker
    return base


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <form method="post"{{ action | attr("action") }}>
        → <form method="post" action="/people">   (when action is "/people")
        → <form method="post">                    (when action is "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


# All built-in formstate filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "field_class": field_class,
    "field_errors": field_errors,
}
