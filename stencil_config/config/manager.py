"""Stencil config manager: read, validate, migrate and save theme config."""

import functools
import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import structlog

from stencil_config.config.env_file import set_env_value_to_file
from stencil_config.config.errors import (
    ConfigMigrationError,
    ConfigParseError,
    OutdatedConfigError,
    UninitializedProjectError,
)
from stencil_config.config.models import StencilConfig
from stencil_config.config.state_machine import MigrationState, MigrationStateMachine
from stencil_config.constants import (
    COMPONENT_CONFIG,
    CONFIG_FILE_NAME,
    FIELD_API_HOST,
    FIELD_CUSTOM_LAYOUTS,
    FIELD_NORMAL_STORE_URL,
    OLD_CONFIG_FILE_NAME,
    SECRET_ENV_VARS,
    SECRET_FIELDS,
    SECRETS_FILE_NAME,
)
from stencil_config.fs.json_utils import parse_json_file as default_parse_json_file
from stencil_config.fs.local import LocalFileSystem
from stencil_config.fs.protocols import FileSystem
from stencil_config.observability.logging import bind_theme_logger
from stencil_config.settings.app import StencilSettings, get_settings


REQUIRED_FIELDS = (FIELD_NORMAL_STORE_URL, FIELD_CUSTOM_LAYOUTS)

ConfigInput = StencilConfig | Mapping[str, Any]


def split_stencil_config(
    config: Mapping[str, Any],
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a config into general and secret parts.

    Args:
        config: Full configuration mapping.

    Returns:
        Tuple of (general config, secrets config).
    """
    general_config: dict[str, Any] = {}
    secrets_config: dict[str, Any] = {}
    for key, value in config.items():
        if key in SECRET_FIELDS:
            secrets_config[key] = value
        else:
            general_config[key] = value
    return general_config, secrets_config


def _as_dict(config: ConfigInput) -> dict[str, Any]:
    if isinstance(config, StencilConfig):
        return config.to_dict()
    return dict(config)


class StencilConfigManager:
    """Loads, validates, migrates and persists a theme's local config.

    Current format is two artifacts: ``config.stencil.json`` holding the
    general settings, and an env file holding secrets as
    ``STENCIL_*`` variables. A legacy ``.stencil`` file is migrated to
    the current format the first time it is seen, then deleted.
    """

    def __init__(
        self,
        theme_path: Path | None = None,
        *,
        fs: FileSystem | None = None,
        line_separator: str = os.linesep,
        parse_json_file: Callable[[Path], object] | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
        environ: Mapping[str, str] | None = None,
        default_env_file: Path | None = None,
        api_host: str | None = None,
        settings: StencilSettings | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            theme_path: Theme project directory (default: from settings).
            fs: File system capability (default: local disk).
            line_separator: Line separator for the env file.
            parse_json_file: JSON file parser (default: reads through ``fs``).
            logger: Logger to bind onto (default: ``get_logger()``).
            environ: Environment lookup for secrets (default: ``os.environ``).
            default_env_file: Env file for saves without an explicit path.
            api_host: Fallback API host (default: from settings).
            settings: Settings to resolve defaults from.
        """
        settings = settings or get_settings()

        self.theme_path = Path(theme_path) if theme_path else settings.theme_path
        self.old_config_path = self.theme_path / OLD_CONFIG_FILE_NAME
        self.config_path = self.theme_path / CONFIG_FILE_NAME
        # Derived for reference only; secrets are persisted to the env file.
        self.secrets_path = self.theme_path / SECRETS_FILE_NAME
        self.secret_fields = SECRET_FIELDS
        self.default_env_file = default_env_file or settings.resolve_env_file(
            self.theme_path
        )
        self.api_host = api_host or settings.api_host

        self._fs: FileSystem = fs or LocalFileSystem()
        self._line_separator = line_separator
        self._parse_json_file = parse_json_file or functools.partial(
            default_parse_json_file, fs=self._fs
        )
        self._logger = logger
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._last_migration: MigrationStateMachine | None = None

    @property
    def last_migration(self) -> MigrationStateMachine | None:
        """State machine of the most recent legacy migration, if any."""
        return self._last_migration

    def _bind_log(self, operation: str) -> structlog.stdlib.BoundLogger:
        return bind_theme_logger(
            self.theme_path, COMPONENT_CONFIG, self._logger, operation=operation
        )

    def read(
        self,
        ignore_file_not_exists: bool = False,
        ignore_missing_fields: bool = False,
    ) -> StencilConfig | None:
        """Read, migrate if needed, and validate the theme config.

        Args:
            ignore_file_not_exists: Return None instead of raising when the
                project has no config at all.
            ignore_missing_fields: Skip the required-field check.

        Returns:
            The validated config, or None if there is nothing to read and
            ``ignore_file_not_exists`` is set.

        Raises:
            UninitializedProjectError: If no config exists.
            OutdatedConfigError: If required fields are missing.
            ConfigParseError: If the general config is not a JSON object.
            ConfigMigrationError: If the legacy file could not be migrated.
            json.JSONDecodeError: If the general config is malformed.
        """
        log = self._bind_log("read")

        if self._fs.exists(self.old_config_path):
            try:
                parsed = self._parse_json_file(self.old_config_path)
            except Exception as e:
                # Migrate anyway; validation reports the missing fields.
                log.warning(
                    "legacy_config_unreadable",
                    file_path=str(self.old_config_path),
                    error=str(e),
                )
                parsed = {}
            if not isinstance(parsed, dict):
                parsed = {}

            config = self._apply_defaults(parsed, log)
            self._migrate_old_config(config)
            return self.validate_stencil_config(config, ignore_missing_fields)

        general_config = self._read_general_config()
        secrets_config = self._get_secrets_config_from_env_vars()

        if general_config is not None or secrets_config is not None:
            parsed_config = {
                **(general_config or {}),
                **(secrets_config or dict.fromkeys(SECRET_ENV_VARS)),
            }
            return self.validate_stencil_config(parsed_config, ignore_missing_fields)

        if ignore_file_not_exists:
            return None

        log.error("config_not_found", config_path=str(self.config_path))
        raise UninitializedProjectError()

    def save(self, config: ConfigInput, env_file: Path | str | None = None) -> None:
        """Persist a config as general JSON plus env file secrets.

        The general config file is replaced wholesale. Each secret field is
        upserted into the env file, cleared to an empty value when absent.

        Args:
            config: Configuration to persist.
            env_file: Env file to write secrets to (default:
                ``default_env_file``).

        Raises:
            OSError: If any file cannot be written.
        """
        general_config, secrets_config = split_stencil_config(_as_dict(config))
        target_env_file = Path(env_file) if env_file else self.default_env_file

        self._fs.write_text(self.config_path, json.dumps(general_config, indent=2))

        for field_name, env_var in SECRET_ENV_VARS.items():
            set_env_value_to_file(
                env_var,
                secrets_config.get(field_name),
                target_env_file,
                fs=self._fs,
                line_separator=self._line_separator,
            )

        self._bind_log("save").info(
            "config_saved",
            config_path=str(self.config_path),
            env_file=str(target_env_file),
            general_field_count=len(general_config),
        )

    def validate_stencil_config(
        self,
        config: ConfigInput,
        ignore_missing_fields: bool = False,
    ) -> StencilConfig:
        """Check required fields and apply defaults.

        The input is not modified; a new record is returned.

        Args:
            config: Configuration to validate.
            ignore_missing_fields: Skip the required-field check.

        Returns:
            Validated config with ``apiHost`` filled in.

        Raises:
            OutdatedConfigError: If required fields are missing.
        """
        log = self._bind_log("validate")
        data = _as_dict(config)

        missing_fields = [name for name in REQUIRED_FIELDS if not data.get(name)]
        if missing_fields and not ignore_missing_fields:
            log.error("config_outdated", missing_fields=missing_fields)
            raise OutdatedConfigError(missing_fields)

        return StencilConfig.model_validate(self._apply_defaults(data, log))

    def _apply_defaults(
        self,
        config: Mapping[str, Any],
        log: structlog.stdlib.BoundLogger,
    ) -> dict[str, Any]:
        data = dict(config)
        if not data.get(FIELD_API_HOST):
            log.info(
                "api_host_fallback",
                api_host=self.api_host,
                hint="No api host found in config file. You may need to run 'stencil init' again.",
            )
            data[FIELD_API_HOST] = self.api_host
        return data

    def _read_general_config(self) -> dict[str, Any] | None:
        if not self._fs.exists(self.config_path):
            return None

        # Parse errors propagate unchanged
        parsed = self._parse_json_file(self.config_path)
        if not isinstance(parsed, dict):
            raise ConfigParseError(str(self.config_path))
        return parsed

    def _get_secrets_config_from_env_vars(self) -> dict[str, str | None] | None:
        """Build the secrets object from ``STENCIL_*`` variables.

        Returns None when neither variable is defined. Once any is defined,
        both keys are present and empty values read as None.
        """
        if not any(env_var in self._environ for env_var in SECRET_ENV_VARS.values()):
            return None
        return {
            field_name: self._environ.get(env_var) or None
            for field_name, env_var in SECRET_ENV_VARS.items()
        }

    def _migrate_old_config(self, config: Mapping[str, Any]) -> None:
        """Convert a legacy config to the current format.

        The legacy file is deleted only after the new files are written.

        Raises:
            ConfigMigrationError: If saving or deleting fails.
        """
        machine = MigrationStateMachine()
        self._last_migration = machine
        log = self._bind_log("migrate")

        log.warning(
            "legacy_config_detected",
            legacy_file=OLD_CONFIG_FILE_NAME,
            config_file=CONFIG_FILE_NAME,
            env_file=str(self.default_env_file),
            hint=f"The deprecated {OLD_CONFIG_FILE_NAME} file will be replaced "
            f"with {CONFIG_FILE_NAME} and env file secrets.",
        )

        machine.transition(MigrationState.SAVING)
        try:
            self.save(config)
        except OSError as e:
            machine.transition(MigrationState.FAILED)
            log.error("legacy_config_migration_failed", stage="save", error=str(e))
            raise ConfigMigrationError(
                f"Could not write {CONFIG_FILE_NAME}; {OLD_CONFIG_FILE_NAME} was left in place.",
                str(self.config_path),
            ) from e
        machine.transition(MigrationState.SAVED)

        try:
            self._fs.unlink(self.old_config_path)
        except OSError as e:
            machine.transition(MigrationState.FAILED)
            log.error("legacy_config_migration_failed", stage="delete", error=str(e))
            raise ConfigMigrationError(
                f"Could not delete {OLD_CONFIG_FILE_NAME}.",
                str(self.old_config_path),
            ) from e
        machine.transition(MigrationState.LEGACY_REMOVED)

        log.info(
            "legacy_config_migrated",
            legacy_file=OLD_CONFIG_FILE_NAME,
            config_file=CONFIG_FILE_NAME,
            hint=f"Make sure to add {self.default_env_file.name} to .gitignore. "
            f"{CONFIG_FILE_NAME} can be tracked by git if you wish.",
        )
        machine.transition(MigrationState.COMPLETE)
