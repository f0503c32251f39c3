"""File-system access used by the configuration manager."""

from stencil_config.fs.json_utils import parse_json_file
from stencil_config.fs.local import LocalFileSystem
from stencil_config.fs.protocols import FileSystem


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "parse_json_file",
]
