"""Domain-specific error types for the configuration module."""

from enum import Enum

from stencil_config.constants import INIT_COMMAND


class ConfigErrorKind(Enum):
    """Broad categories of configuration failures."""

    UNINITIALIZED = "uninitialized"
    OUTDATED_CONFIG = "outdated_config"
    PARSE_FAILURE = "parse_failure"
    IO_FAILURE = "io_failure"


class StencilConfigError(Exception):
    """Base class for user-facing configuration errors.

    Attributes:
        kind: Category of the failure for programmatic handling.
    """

    def __init__(self, message: str, kind: ConfigErrorKind) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def hint(self) -> str:
        """Remediation hint for the end user."""
        from stencil_config.config.error_hints import get_error_hint

        return get_error_hint(self.kind)


class UninitializedProjectError(StencilConfigError):
    """No configuration of any kind was found for the theme."""

    def __init__(self) -> None:
        super().__init__(
            f"Please run {INIT_COMMAND} first.", ConfigErrorKind.UNINITIALIZED
        )


class OutdatedConfigError(StencilConfigError):
    """Configuration is missing fields required by the current CLI."""

    def __init__(self, missing_fields: list[str] | None = None) -> None:
        super().__init__(
            f"Error: Your stencil config is outdated. Please run {INIT_COMMAND} again.",
            ConfigErrorKind.OUTDATED_CONFIG,
        )
        self.missing_fields = missing_fields or []


class ConfigParseError(StencilConfigError):
    """Config file parsed, but did not hold a JSON object."""

    def __init__(self, file_path: str) -> None:
        super().__init__(
            f"{file_path} must contain a JSON object.",
            ConfigErrorKind.PARSE_FAILURE,
        )
        self.file_path = file_path


class ConfigMigrationError(StencilConfigError):
    """Writing the new config files or removing the legacy one failed."""

    def __init__(self, message: str, file_path: str) -> None:
        super().__init__(message, ConfigErrorKind.IO_FAILURE)
        self.file_path = file_path
