"""Rendering configuration.

RenderConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Rendering configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RenderConfig(base_class="form-row", error_class="is-invalid")
    """

    # CSS classes
    base_class: str = "field"
    error_class: str = "field_with_errors"
    error_message_class: str = "field-error"

    # Error summary box
    summary_id: str = "error_explanation"

    # Field types whose value is never echoed back unless a FieldSpec opts in
    masked_types: tuple[str, ...] = ("password",)

    # Templates
    template_dir: str | Path | None = None  # Searched before the built-in templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
