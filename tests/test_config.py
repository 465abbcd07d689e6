"""Tests for formstate.config — RenderConfig frozen dataclass."""

from pathlib import Path

import pytest

from formstate.config import RenderConfig


class TestRenderConfig:
    def test_defaults(self) -> None:
        cfg = RenderConfig()

        assert cfg.base_class == "field"
        assert cfg.error_class == "field_with_errors"
        assert cfg.error_message_class == "field-error"
        assert cfg.summary_id == "error_explanation"
        assert cfg.masked_types == ("password",)
        assert cfg.template_dir is None
        assert cfg.autoescape is True

    def test_override(self) -> None:
        cfg = RenderConfig(base_class="row", error_class="is-invalid", masked_types=())

        assert cfg.base_class == "row"
        assert cfg.error_class == "is-invalid"
        assert cfg.masked_types == ()

    def test_frozen(self) -> None:
        cfg = RenderConfig()

        with pytest.raises(AttributeError):
            cfg.base_class = "row"  # type: ignore[misc]

    def test_template_dir_as_path(self) -> None:
        cfg = RenderConfig(template_dir=Path("/tmp/templates"))
        assert isinstance(cfg.template_dir, Path)
