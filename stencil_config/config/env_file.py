"""Environment file (KEY=value lines) reading and upserting."""

import os
from dataclasses import dataclass
from pathlib import Path

from stencil_config.constants import COMPONENT_ENV_FILE
from stencil_config.fs.local import LocalFileSystem
from stencil_config.fs.protocols import FileSystem
from stencil_config.observability.logging import get_logger


logger = get_logger()

COMMENT_MARKER = "#"
EXPORT_PREFIX = "export "


@dataclass(frozen=True)
class EnvLine:
    """A single tokenized line of an environment file.

    Attributes:
        raw: The line as it appears in the file.
        key: Variable name, or None if the line has no ``=``.
        value: Text after the first ``=``.
        commented: Whether the line starts with ``#``.
        exported: Whether the key carries a shell ``export`` prefix.
    """

    raw: str
    key: str | None
    value: str
    commented: bool
    exported: bool = False

    @classmethod
    def parse(cls, raw: str) -> "EnvLine":
        """Tokenize a line into comment marker, key and value."""
        body = raw.lstrip()
        commented = body.startswith(COMMENT_MARKER)
        if commented:
            body = body[len(COMMENT_MARKER) :].lstrip()
        exported = body.startswith(EXPORT_PREFIX)
        if exported:
            body = body[len(EXPORT_PREFIX) :].lstrip()

        key, sep, value = body.partition("=")
        key = key.strip()
        if not sep or not key:
            return cls(raw=raw, key=None, value="", commented=commented)
        return cls(
            raw=raw, key=key, value=value, commented=commented, exported=exported
        )

    def assigns(self, key: str) -> bool:
        """Check whether this line is an active assignment of ``key``."""
        return not self.commented and self.key == key

    def with_value(self, value: str | None) -> str:
        """Render this assignment with a new value, keeping any export prefix."""
        line = format_env_line(self.key or "", value)
        return EXPORT_PREFIX + line if self.exported else line


def format_env_line(key: str, value: str | None) -> str:
    """Render a ``KEY=value`` line; a missing value renders as empty."""
    return f"{key}={value or ''}"


def _read_lines(env_file: Path, fs: FileSystem, line_separator: str) -> list[str]:
    content = fs.read_text(env_file)
    return [line for line in content.split(line_separator) if line]


def read_env_file(
    env_file: Path,
    *,
    fs: FileSystem | None = None,
    line_separator: str = os.linesep,
) -> dict[str, str]:
    """Read the active assignments of an environment file.

    Commented lines and lines without ``=`` are skipped. When a key is
    assigned more than once, the first assignment wins, matching the line
    that ``set_env_value_to_file`` would update.

    Args:
        env_file: Path to the environment file.
        fs: File system to read through (default: local disk).
        line_separator: Line separator used in the file.

    Returns:
        Mapping of variable name to value. Empty if the file does not exist.
    """
    fs = fs or LocalFileSystem()
    if not fs.exists(env_file):
        return {}

    values: dict[str, str] = {}
    for raw in _read_lines(env_file, fs, line_separator):
        line = EnvLine.parse(raw)
        if line.key is not None and not line.commented:
            values.setdefault(line.key, line.value)
    return values


def set_env_value_to_file(
    key: str,
    value: str | None,
    env_file: Path,
    *,
    fs: FileSystem | None = None,
    line_separator: str = os.linesep,
) -> None:
    """Insert or replace ``key=value`` in an environment file.

    The file is created if missing, then read whole, rewritten whole.
    Empty lines are dropped. The first active assignment of ``key`` is
    replaced in place; commented-out assignments never match. Without a
    match the assignment is appended. No lock is taken.

    Args:
        key: Variable name.
        value: Value to store; None is stored as an empty string.
        env_file: Path to the environment file.
        fs: File system to write through (default: local disk).
        line_separator: Separator used to split and join lines.
    """
    fs = fs or LocalFileSystem()
    if not fs.exists(env_file):
        fs.touch(env_file)

    lines = _read_lines(env_file, fs, line_separator)

    target_index = next(
        (i for i, raw in enumerate(lines) if EnvLine.parse(raw).assigns(key)),
        None,
    )
    if target_index is not None:
        lines[target_index] = EnvLine.parse(lines[target_index]).with_value(value)
    else:
        lines.append(format_env_line(key, value))

    fs.write_text(env_file, line_separator.join(lines))

    # Values are secrets and never logged
    logger.debug(
        "env_value_set",
        component=COMPONENT_ENV_FILE,
        key=key,
        env_file=str(env_file),
        replaced=target_index is not None,
    )
