"""Kida environment setup and form rendering.

Creates a kida Environment from a ``RenderConfig`` and renders the
built-in ``formstate/form.html`` template from renderer output. Templates
in ``config.template_dir`` are searched first, so an application can
override ``formstate/form.html`` without touching this package.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from formstate.config import RenderConfig
from formstate.renderer import render, summary, summary_heading
from formstate.schema import FieldSpec, FormSchema
from formstate.snapshot import FormState
from formstate.templating.filters import BUILTIN_FILTERS

logger = logging.getLogger("formstate.templating")

FORM_TEMPLATE = "formstate/form.html"


def create_environment(
    config: RenderConfig | None = None,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment wired to formstate's templates and filters.

    Built-in filters are registered first, so *filters* may override them.
    """
    cfg = config or RenderConfig()

    loaders = []
    if cfg.template_dir is not None:
        loaders.append(FileSystemLoader(str(cfg.template_dir)))
    loaders.append(PackageLoader("formstate.templating", "macros"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=cfg.autoescape,
        trim_blocks=cfg.trim_blocks,
        lstrip_blocks=cfg.lstrip_blocks,
    )

    env.update_filters(BUILTIN_FILTERS)

    # User-defined filters (may override built-ins)
    if filters:
        env.update_filters(filters)

    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env


def render_form(
    env: Environment,
    snapshot: FormState,
    schema: FormSchema | Iterable[FieldSpec],
    config: RenderConfig | None = None,
    *,
    noun: str = "record",
    action: str = "",
    method: str = "post",
    submit_label: str = "Save",
) -> str:
    """Render a whole form, error summary included, to an HTML string.

    Usage::

        env = create_environment()
        html = render_form(env, state, PERSON_FORM, noun="person", action="/people")
    """
    cfg = config or RenderConfig()
    fields = render(snapshot, schema, cfg)
    messages = summary(snapshot)
    logger.debug("Rendering %d fields with %d error messages", len(fields), len(messages))

    template = env.get_template(FORM_TEMPLATE)
    return template.render(
        {
            "fields": fields,
            "messages": messages,
            "heading": summary_heading(snapshot, noun),
            "summary_id": cfg.summary_id,
            "error_message_class": cfg.error_message_class,
            "action": action,
            "method": method,
            "submit_label": submit_label,
        }
    )
