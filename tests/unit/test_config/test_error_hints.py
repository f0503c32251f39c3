"""Unit tests for configuration errors and hints."""

import pytest

from stencil_config.config.error_hints import ERROR_HINTS, get_error_hint
from stencil_config.config.errors import (
    ConfigErrorKind,
    ConfigMigrationError,
    ConfigParseError,
    OutdatedConfigError,
    StencilConfigError,
    UninitializedProjectError,
)


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.unit
    def test_uninitialized_message(self) -> None:
        """Test the uninitialized project message."""
        error = UninitializedProjectError()
        assert str(error) == "Please run $ stencil init first."
        assert error.kind == ConfigErrorKind.UNINITIALIZED

    @pytest.mark.unit
    def test_outdated_message(self) -> None:
        """Test the outdated config message and missing fields."""
        error = OutdatedConfigError(["normalStoreUrl"])
        assert str(error) == (
            "Error: Your stencil config is outdated. Please run $ stencil init again."
        )
        assert error.kind == ConfigErrorKind.OUTDATED_CONFIG
        assert error.missing_fields == ["normalStoreUrl"]

    @pytest.mark.unit
    def test_kinds(self) -> None:
        """Test that every error carries the expected kind."""
        assert ConfigParseError("x.json").kind == ConfigErrorKind.PARSE_FAILURE
        assert ConfigMigrationError("m", "x").kind == ConfigErrorKind.IO_FAILURE

    @pytest.mark.unit
    def test_all_subclass_base(self) -> None:
        """Test that every error derives from StencilConfigError."""
        for error in (
            UninitializedProjectError(),
            OutdatedConfigError(),
            ConfigParseError("x"),
            ConfigMigrationError("m", "x"),
        ):
            assert isinstance(error, StencilConfigError)
            assert error.hint == ERROR_HINTS[error.kind]


class TestErrorHints:
    """Tests for hint lookup."""

    @pytest.mark.unit
    def test_every_kind_has_hint(self) -> None:
        """Test that every error kind has a dedicated hint."""
        for kind in ConfigErrorKind:
            assert kind in ERROR_HINTS
            assert get_error_hint(kind) == ERROR_HINTS[kind]

