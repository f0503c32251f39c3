"""JSON file parsing."""

import json
from pathlib import Path

from stencil_config.fs.local import LocalFileSystem
from stencil_config.fs.protocols import FileSystem


def parse_json_file(path: Path, fs: FileSystem | None = None) -> object:
    """Parse a UTF-8 JSON file.

    Args:
        path: File to parse.
        fs: File system to read through (default: local disk).

    Returns:
        The decoded JSON value.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    content = (fs or LocalFileSystem()).read_text(path)
    return json.loads(content)
