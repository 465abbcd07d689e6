"""Assertion helpers for rendered form HTML.

Work on the markup produced by ``formstate/form.html`` (or any template
that keeps its structure: one ``<div class="...">`` wrapper per field,
an ``id`` equal to the field name). Each assertion produces a clear
error message on failure.

Expected text is given unescaped, as it was passed to the renderer.
The markup is unescaped before comparing, so messages and values that
autoescaping turned into entities (``'``, ``&``, ``"``, ``<``) still match.
"""

import html as html_module
import re

from formstate.config import RenderConfig

_DEFAULTS = RenderConfig()


def _field_block(html: str, name: str) -> str:
    """Return the wrapper ``<div>`` that holds the control for *name*."""
    pattern = re.compile(
        r'<div class="[^"]*">(?:(?!</div>).)*?\bid="' + re.escape(name) + r'"(?:(?!<div).)*?</div>',
        re.DOTALL,
    )
    match = pattern.search(html)
    assert match is not None, f"No field named {name!r} in rendered form.\nHTML: {html[:500]}"
    return match.group(0)


def _wrapper_classes(block: str) -> list[str]:
    match = re.match(r'<div class="([^"]*)"', block)
    return match.group(1).split() if match else []


def assert_field_has_error(
    html: str,
    name: str,
    message: str | None = None,
    *,
    marker: str = _DEFAULTS.error_class,
) -> None:
    """Assert the field wrapper carries the error marker (and *message*)."""
    block = _field_block(html, name)
    assert marker in _wrapper_classes(block), (
        f"Field {name!r} is missing the {marker!r} class.\nBlock: {block}"
    )
    if message is not None:
        assert message in html_module.unescape(block), (
            f"Field {name!r} does not show {message!r}.\nBlock: {block}"
        )


def assert_field_has_no_error(
    html: str,
    name: str,
    *,
    marker: str = _DEFAULTS.error_class,
) -> None:
    """Assert the field wrapper does **not** carry the error marker."""
    block = _field_block(html, name)
    assert marker not in _wrapper_classes(block), (
        f"Field {name!r} unexpectedly has the {marker!r} class.\nBlock: {block}"
    )


def assert_field_value(html: str, name: str, value: str) -> None:
    """Assert the control for *name* (``<input>`` or ``<textarea>``) holds *value*."""
    block = _field_block(html, name)
    text = html_module.unescape(block)
    prefilled = f'value="{value}"' in text or f">{value}</textarea>" in text
    assert prefilled, (
        f"Field {name!r} is not pre-filled with {value!r}.\nBlock: {block}"
    )


def assert_summary_contains(html: str, message: str) -> None:
    """Assert the error summary box lists *message*."""
    assert f"<li>{message}</li>" in html_module.unescape(html), (
        f"Error summary does not contain {message!r}.\nHTML: {html[:500]}"
    )
