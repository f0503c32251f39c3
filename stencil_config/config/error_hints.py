"""Error hints for configuration errors.

Provides user-friendly hints with actionable remediation steps
for each error kind.
"""

from typing import Final

from stencil_config.constants import (
    CONFIG_FILE_NAME,
    INIT_COMMAND,
    OLD_CONFIG_FILE_NAME,
)
from stencil_config.config.errors import ConfigErrorKind


ERROR_HINTS: Final[dict[ConfigErrorKind, str]] = {
    ConfigErrorKind.UNINITIALIZED: (
        f"Run {INIT_COMMAND} in the theme directory, or set "
        "STENCIL_ACCESS_TOKEN in the environment."
    ),
    ConfigErrorKind.OUTDATED_CONFIG: (
        f"Run {INIT_COMMAND} again to add normalStoreUrl and customLayouts "
        f"to {CONFIG_FILE_NAME}."
    ),
    ConfigErrorKind.PARSE_FAILURE: (
        f"Fix the JSON syntax in {CONFIG_FILE_NAME} or delete it and run "
        f"{INIT_COMMAND}."
    ),
    ConfigErrorKind.IO_FAILURE: (
        f"Check write permissions in the theme directory. {OLD_CONFIG_FILE_NAME} "
        "was left in place and migration will be retried on the next run."
    ),
}


def get_error_hint(kind: ConfigErrorKind) -> str:
    """Get a user-friendly hint for an error kind.

    Args:
        kind: The error kind.

    Returns:
        A user-friendly hint string.
    """
    return ERROR_HINTS.get(kind, "Check the theme configuration files.")
