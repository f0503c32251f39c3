"""Constants for the configuration module."""

from typing import Final


# Config file names, relative to the theme directory
OLD_CONFIG_FILE_NAME: Final = ".stencil"
CONFIG_FILE_NAME: Final = "config.stencil.json"
SECRETS_FILE_NAME: Final = "secrets.stencil.json"

# Env file used when save() is called without an explicit path
DEFAULT_ENV_FILE_NAME: Final = ".env"

DEFAULT_API_HOST: Final = "https://api.bigcommerce.com"

# Config keys
FIELD_NORMAL_STORE_URL: Final = "normalStoreUrl"
FIELD_CUSTOM_LAYOUTS: Final = "customLayouts"
FIELD_API_HOST: Final = "apiHost"
FIELD_ACCESS_TOKEN: Final = "accessToken"
FIELD_GITHUB_TOKEN: Final = "githubToken"

SECRET_FIELDS: Final[frozenset[str]] = frozenset(
    {FIELD_ACCESS_TOKEN, FIELD_GITHUB_TOKEN}
)

# Secret field -> environment variable. Order is the order of env file writes.
SECRET_ENV_VARS: Final[dict[str, str]] = {
    FIELD_ACCESS_TOKEN: "STENCIL_ACCESS_TOKEN",
    FIELD_GITHUB_TOKEN: "STENCIL_GITHUB_TOKEN",
}

INIT_COMMAND: Final = "$ stencil init"

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_ENV_FILE = "env_file"
