"""Theme configuration loading, validation and migration."""

from stencil_config.config.env_file import EnvLine, read_env_file, set_env_value_to_file
from stencil_config.config.errors import (
    ConfigErrorKind,
    ConfigMigrationError,
    ConfigParseError,
    OutdatedConfigError,
    StencilConfigError,
    UninitializedProjectError,
)
from stencil_config.config.manager import StencilConfigManager, split_stencil_config
from stencil_config.config.models import StencilConfig
from stencil_config.config.state_machine import (
    MigrationState,
    MigrationStateError,
    MigrationStateMachine,
)


__all__ = [
    "ConfigErrorKind",
    "ConfigMigrationError",
    "ConfigParseError",
    "EnvLine",
    "MigrationState",
    "MigrationStateError",
    "MigrationStateMachine",
    "OutdatedConfigError",
    "StencilConfig",
    "StencilConfigError",
    "StencilConfigManager",
    "UninitializedProjectError",
    "read_env_file",
    "set_env_value_to_file",
    "split_stencil_config",
]
