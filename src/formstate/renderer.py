"""Form-state renderer — snapshot + schema in, field instructions out.

``render()`` is pure and total: it reads a ``FormState`` and a field
schema and returns one ``FieldRenderInstruction`` per schema field. It
never raises on missing data; a field with no value renders ``""`` and a
field with no error entry renders as valid.

Usage::

    from formstate import FieldSpec, FormState, render, summary

    state = FormState(
        values={"name": "Jane1"},
        errors={"name": ["does not allow numbers"], "email": []},
    )
    fields = render(state, [FieldSpec("name"), FieldSpec("email", type="email")])
    fields[0].classes  # ("field", "field_with_errors")
    fields[1].classes  # ("field",)
    summary(state)     # ("does not allow numbers",)

The instructions are plain frozen dataclasses, so any template layer can
consume them. ``formstate.templating`` ships one for kida.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from formstate.config import RenderConfig
from formstate.schema import FieldSpec, FormSchema
from formstate.snapshot import FormState

logger = logging.getLogger("formstate.render")

# Checkbox values that count as "on", matching HTML form submissions
_TRUTHY = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True, slots=True)
class FieldRenderInstruction:
    """Everything a template needs to draw one field.

    ``classes`` always starts with the configured base class. The error
    marker class is present exactly once when ``errors`` is non-empty and
    absent otherwise.
    """

    name: str
    label: str
    type: str
    value: str
    classes: tuple[str, ...]
    errors: tuple[str, ...] = ()
    choices: tuple[tuple[str, str], ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def css_class(self) -> str:
        """Classes joined for a ``class="..."`` attribute."""
        return " ".join(self.classes)

    @property
    def checked(self) -> bool:
        """True when a checkbox value reads as "on"."""
        return self.value.strip().lower() in _TRUTHY


def render(
    snapshot: FormState,
    schema: FormSchema | Iterable[FieldSpec],
    config: RenderConfig | None = None,
) -> tuple[FieldRenderInstruction, ...]:
    """Build rendering instructions for every field in *schema*.

    Args:
        snapshot: Values and errors from the submission being re-displayed.
        schema: A ``FormSchema`` or any iterable of ``FieldSpec``. Fields
            that have errors in *snapshot* but are not in the schema are
            skipped.
        config: CSS class names and masking rules. Defaults to
            ``RenderConfig()``.

    Returns:
        One instruction per schema field, in schema order.

    Raises:
        SchemaError: If *schema* is a plain iterable with duplicate names.
    """
    cfg = config or RenderConfig()
    form_schema = FormSchema.coerce(schema)

    unrendered = [
        name for name, msgs in snapshot.errors.items() if msgs and name not in form_schema
    ]
    if unrendered:
        logger.debug(
            "Errors for fields outside the schema are not rendered: %s", ", ".join(unrendered)
        )

    return tuple(_instruction(spec, snapshot, cfg) for spec in form_schema)


def summary(snapshot: FormState) -> tuple[str, ...]:
    """Flatten every error message into one ordered sequence.

    Order follows field declaration in the errors mapping, then the order
    of messages within each field. Empty when nothing is wrong.
    """
    return snapshot.full_messages


def summary_heading(snapshot: FormState, noun: str = "record") -> str:
    """Headline for the error summary box.

    Example:
        summary_heading(state, "person")
        → "1 error prohibited this person from being saved"

    Returns ``""`` when the snapshot has no errors.
    """
    count = snapshot.error_count
    if not count:
        return ""
    word = "error" if count == 1 else "errors"
    return f"{count} {word} prohibited this {noun} from being saved"


def _instruction(spec: FieldSpec, snapshot: FormState, cfg: RenderConfig) -> FieldRenderInstruction:
    errors = snapshot.errors_for(spec.name)
    return FieldRenderInstruction(
        name=spec.name,
        label=spec.label,
        type=spec.type,
        value=snapshot.value(spec.name) if _echoes(spec, cfg) else "",
        classes=_classes(spec, cfg, has_errors=bool(errors)),
        errors=errors,
        choices=spec.choices,
    )


def _echoes(spec: FieldSpec, cfg: RenderConfig) -> bool:
    if spec.echo is not None:
        return spec.echo
    return spec.type not in cfg.masked_types


def _classes(spec: FieldSpec, cfg: RenderConfig, *, has_errors: bool) -> tuple[str, ...]:
    # dict preserves first-seen order while dropping repeats
    ordered = dict.fromkeys(c for c in (cfg.base_class, *spec.classes) if c)
    ordered.pop(cfg.error_class, None)
    if has_errors:
        ordered[cfg.error_class] = None
    return tuple(ordered)
