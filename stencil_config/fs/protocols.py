"""Protocol interface for file-system access."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the file operations the config manager needs.

    Text is always UTF-8 and line endings are passed through untranslated,
    so callers control the line separator themselves.
    """

    def exists(self, path: Path) -> bool:
        """Check whether a file exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a whole file.

        Raises:
            OSError: If the file cannot be read.
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Replace the whole content of a file.

        Raises:
            OSError: If the file cannot be written.
        """
        ...

    def touch(self, path: Path) -> None:
        """Create an empty file if it does not exist."""
        ...

    def unlink(self, path: Path) -> None:
        """Delete a file.

        Raises:
            OSError: If the file cannot be deleted.
        """
        ...
