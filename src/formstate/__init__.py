"""formstate — re-display invalid forms with their values and errors.

Turns one failed submission into what a template needs: pre-filled
values, an error-marker class on every field that has errors, inline
messages, and a flattened summary for the error box.

Basic usage::

    from formstate import FieldSpec, FormSchema, FormState, render, summary

    PERSON_FORM = FormSchema([
        FieldSpec("name"),
        FieldSpec("email", type="email"),
        FieldSpec("password", type="password"),
    ])

    state = FormState(values=form, errors=result.errors)
    for field in render(state, PERSON_FORM):
        field.value, field.css_class, field.errors

HTML rendering (kida)::

    from formstate.templating import create_environment, render_form
    html = render_form(create_environment(), state, PERSON_FORM, noun="person")
"""

__version__ = "0.1.0"
__all__ = [
    "FieldRenderInstruction",
    "FieldSpec",
    "FormSchema",
    "FormState",
    "FormStateError",
    "RenderConfig",
    "SchemaError",
    "render",
    "schema_from",
    "summary",
    "summary_heading",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formstate`` fast while providing a clean top-level API.
    """
    if name == "FormState":
        from formstate.snapshot import FormState

        return FormState

    if name == "RenderConfig":
        from formstate.config import RenderConfig

        return RenderConfig

    if name in ("FieldSpec", "FormSchema", "schema_from"):
        from formstate import schema as _schema

        return getattr(_schema, name)

    if name in ("FieldRenderInstruction", "render", "summary", "summary_heading"):
        from formstate import renderer as _renderer

        return getattr(_renderer, name)

    if name in ("FormStateError", "SchemaError"):
        from formstate import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
