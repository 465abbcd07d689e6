"""Tests for formstate built-in template filters (field_errors, field_class, attr)."""

from __future__ import annotations

from formstate.snapshot import FormState
from formstate.templating.filters import BUILTIN_FILTERS, attr, field_class, field_errors

# ── attr ──────────────────────────────────────────────────────────────────


class TestAttr:
    """Test the attr filter for conditional HTML attributes."""

    def test_truthy_returns_attribute(self) -> None:
        assert str(attr("/people", "action")) == ' action="/people"'

    def test_falsy_returns_empty(self) -> None:
        assert attr("", "action") == ""
        assert attr(None, "action") == ""

    def test_escapes_value(self) -> None:
        result = attr('foo"bar', "data-value")
        assert "&quot;" in str(result)

    def test_returns_markup(self) -> None:
        """Output is Markup so autoescape does not double-escape."""
        assert hasattr(attr("x", "class"), "__html__")


# ── field_errors ─────────────────────────────────────────────────────────


class TestFieldErrors:
    """Test the field_errors filter for form error display."""

    def test_extracts_errors_from_dict(self) -> None:
        errors = {"username": ["too short", "required"], "email": ["invalid"]}
        assert field_errors(errors, "username") == ["too short", "required"]

    def test_extracts_errors_from_form_state(self) -> None:
        state = FormState(errors={"username": ["too short"]})
        assert field_errors(state, "username") == ["too short"]
        assert field_errors(state, "email") == []

    def test_missing_field_returns_empty(self) -> None:
        assert field_errors({"username": ["too short"]}, "email") == []

    def test_none_errors_returns_empty(self) -> None:
        assert field_errors(None, "username") == []

    def test_non_mapping_returns_empty(self) -> None:
        assert field_errors("not a dict", "field") == []
        assert field_errors(42, "field") == []

    def test_field_with_empty_list(self) -> None:
        assert field_errors({"name": []}, "name") == []


# ── field_class ──────────────────────────────────────────────────────────


class TestFieldClass:
    def test_with_errors(self) -> None:
        state = FormState(errors={"email": ["invalid"]})
        assert field_class(state, "email") == "field field_with_errors"

    def test_without_errors(self) -> None:
        state = FormState(errors={"email": ["invalid"]})
        assert field_class(state, "name") == "field"

    def test_custom_classes(self) -> None:
        errors = {"email": ["invalid"]}
        assert field_class(errors, "email", "row", "is-invalid") == "row is-invalid"

    def test_empty_base(self) -> None:
        assert field_class({"email": ["invalid"]}, "email", "") == "field_with_errors"


# ── registry ─────────────────────────────────────────────────────────────


class TestBuiltinFilters:
    def test_registered(self) -> None:
        assert BUILTIN_FILTERS["attr"] is attr
        assert BUILTIN_FILTERS["field_class"] is field_class
        assert BUILTIN_FILTERS["field_errors"] is field_errors
