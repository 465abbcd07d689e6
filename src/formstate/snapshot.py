"""Form state snapshot — the values and errors of one submission attempt.

A ``FormState`` is built once per invalid submission by whatever validated
the data, handed to the renderer, and thrown away after the response is
sent. It never changes after construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from dataclasses import fields as dc_fields
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class FormState:
    """Read-only view of an entity's current values and field errors.

    Missing data is defaulted rather than rejected: ``value()`` returns
    ``""`` for a field that was never set and ``errors_for()`` returns an
    empty tuple for a field with no entry in the errors mapping.

    Usage::

        state = FormState(
            values={"name": "Jane1"},
            errors={"name": ["does not allow numbers"]},
        )
        state.value("name")        # "Jane1"
        state.errors_for("email")  # ()
    """

    values: Mapping[str, str]
    errors: Mapping[str, tuple[str, ...]]

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        errors: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        object.__setattr__(self, "values", MappingProxyType(_stringify(values or {})))
        object.__setattr__(
            self,
            "errors",
            MappingProxyType({name: _messages(msgs) for name, msgs in (errors or {}).items()}),
        )

    @classmethod
    def empty(cls) -> FormState:
        """Snapshot for a form that has not been submitted yet."""
        return cls()

    @classmethod
    def from_entity(
        cls,
        entity: Any,
        errors: Mapping[str, Iterable[str]] | None = None,
    ) -> FormState:
        """Build a snapshot from a record and its validation errors.

        *entity* may be a ``Mapping``, a dataclass instance, or any object
        with instance attributes. Anything else contributes no values.
        """
        return cls(_entity_values(entity), errors)

    def value(self, name: str) -> str:
        """Current value for *name*, or ``""`` if it was never set."""
        return self.values.get(name, "")

    def errors_for(self, name: str) -> tuple[str, ...]:
        """Error messages for *name*, in the order they were recorded."""
        return self.errors.get(name, ())

    def has_errors(self, name: str | None = None) -> bool:
        """True if *name* (or, without a name, any field) has an error."""
        if name is not None:
            return bool(self.errors_for(name))
        return any(self.errors.values())

    @property
    def error_count(self) -> int:
        """Total number of messages across all fields."""
        return sum(len(msgs) for msgs in self.errors.values())

    @property
    def full_messages(self) -> tuple[str, ...]:
        """Every message, field by field, in declaration order."""
        return tuple(msg for msgs in self.errors.values() for msg in msgs)


def _stringify(values: Mapping[str, Any]) -> dict[str, str]:
    return {k: "" if v is None else str(v) for k, v in values.items()}


def _entity_values(entity: Any) -> Mapping[str, Any]:
    if hasattr(entity, "__dataclass_fields__"):
        return {f.name: getattr(entity, f.name) for f in dc_fields(entity)}
    if isinstance(entity, Mapping):
        return entity
    if hasattr(entity, "__dict__"):
        return {k: v for k, v in vars(entity).items() if not k.startswith("_")}
    return {}


def _messages(msgs: str | Iterable[str]) -> tuple[str, ...]:
    # A lone message string is one message, not a sequence of characters
    if isinstance(msgs, str):
        return (msgs,)
    return tuple(msgs)
