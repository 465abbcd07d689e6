"""Field schema — which fields a form shows, in which order, and how.

A ``FormSchema`` is static, configuration-like data: build it once at
import time and reuse it for every render. Malformed schemas fail here,
at construction, so rendering never has to.

``schema_from()`` derives a schema from a dataclass so the same class can
describe both the bound record and the form that edits it::

    @dataclass(frozen=True, slots=True)
    class Signup:
        name: str
        email: str
        password: str = field(default="", metadata={"type": "password"})
        newsletter: bool = False

    SIGNUP_FORM = schema_from(Signup)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from dataclasses import fields as dc_fields
from typing import Any, get_type_hints

from formstate.errors import SchemaError

FIELD_TYPES = frozenset(
    {
        "checkbox",
        "date",
        "email",
        "hidden",
        "number",
        "password",
        "select",
        "tel",
        "text",
        "textarea",
        "url",
    }
)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Describes one form field.

    ``echo`` is the "do not echo value" flag: ``False`` always renders an
    empty value, ``True`` always echoes the submitted one, and ``None``
    leaves the decision to ``RenderConfig.masked_types``.
    """

    name: str
    label: str = ""
    type: str = "text"
    echo: bool | None = None
    classes: tuple[str, ...] = ()
    choices: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            msg = "Field name must be a non-empty string"
            raise SchemaError(msg)
        if self.type not in FIELD_TYPES:
            allowed = ", ".join(sorted(FIELD_TYPES))
            msg = f"Unknown field type {self.type!r} for {self.name!r}. Allowed: {allowed}"
            raise SchemaError(msg)
        for attr_name in ("classes", "choices"):
            if isinstance(getattr(self, attr_name), str):
                msg = f"{attr_name} for {self.name!r} must be a sequence, not a string"
                raise SchemaError(msg)
        if not self.label:
            object.__setattr__(self, "label", humanize(self.name))
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "choices", tuple((str(v), str(lbl)) for v, lbl in self.choices))


class FormSchema:
    """Ordered, immutable collection of ``FieldSpec`` objects.

    Iterates in declaration order. Supports lookup by field name::

        schema = FormSchema([FieldSpec("name"), FieldSpec("email", type="email")])
        schema["email"].type   # "email"
        "name" in schema       # True
    """

    __slots__ = ("_by_name", "_fields")

    def __init__(self, fields: Iterable[FieldSpec]) -> None:
        specs = tuple(fields)
        by_name: dict[str, FieldSpec] = {}
        for spec in specs:
            if spec.name in by_name:
                msg = f"Duplicate field name in schema: {spec.name!r}"
                raise SchemaError(msg)
            by_name[spec.name] = spec
        object.__setattr__(self, "_fields", specs)
        object.__setattr__(self, "_by_name", by_name)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "FormSchema is immutable"
        raise AttributeError(msg)

    @classmethod
    def coerce(cls, fields: FormSchema | Iterable[FieldSpec]) -> FormSchema:
        """Return *fields* unchanged if it is already a schema, else wrap it."""
        if isinstance(fields, FormSchema):
            return fields
        return cls(fields)

    @property
    def names(self) -> tuple[str, ...]:
        """Field names in declaration order."""
        return tuple(spec.name for spec in self._fields)

    def __getitem__(self, name: str) -> FieldSpec:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FormSchema({list(self.names)!r})"


def humanize(name: str) -> str:
    """Turn a field name into a label: ``"first_name"`` → ``"First name"``."""
    text = name.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


# Type → widget map for schema_from()
_WIDGETS: dict[type, str] = {
    str: "text",
    int: "number",
    float: "number",
    bool: "checkbox",
}

_METADATA_KEYS = ("label", "type", "echo", "classes", "choices")


def schema_from(datacls: type) -> FormSchema:
    """Derive a ``FormSchema`` from a dataclass.

    Each dataclass field becomes a ``FieldSpec`` whose widget type is
    picked from the annotation (``str`` → text, ``int``/``float`` →
    number, ``bool`` → checkbox; ``X | None`` is unwrapped). Field
    ``metadata`` overrides any ``FieldSpec`` attribute::

        password: str = field(default="", metadata={"type": "password"})

    Raises:
        SchemaError: If *datacls* is not a dataclass, or if a metadata
            override produces an invalid ``FieldSpec``.
    """
    if not hasattr(datacls, "__dataclass_fields__"):
        msg = f"schema_from() expects a dataclass, got {datacls!r}"
        raise SchemaError(msg)

    hints = get_type_hints(datacls)
    specs: list[FieldSpec] = []
    for f in dc_fields(datacls):
        base_type = _unwrap_optional(hints.get(f.name, str))
        options: dict[str, Any] = {"type": _WIDGETS.get(base_type, "text")}
        options.update(_spec_overrides(f.metadata))
        specs.append(FieldSpec(f.name, **options))
    return FormSchema(specs)


def _spec_overrides(metadata: Mapping[str, Any]) -> dict[str, Any]:
    return {key: metadata[key] for key in _METADATA_KEYS if key in metadata}


def _unwrap_optional(hint: Any) -> type:
    """Extract the base type from ``X | None`` or plain ``X``."""
    import types

    if isinstance(hint, types.UnionType):
        args = [a for a in hint.__args__ if a is not type(None)]
        if args:
            return args[0]
    return hint if isinstance(hint, type) else str
