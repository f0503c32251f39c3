"""Local disk implementation of the file-system protocol."""

from pathlib import Path

from stencil_config.observability.logging import get_logger


logger = get_logger()

COMPONENT_FS = "fs"


class LocalFileSystem:
    """Reads and writes files on the local disk.

    Text is UTF-8 and line endings are never translated, so the env file
    keeps whatever separator the caller joined it with.
    """

    def exists(self, path: Path) -> bool:
        """Check whether ``path`` is an existing regular file."""
        return path.is_file()

    def read_text(self, path: Path) -> str:
        """Read a whole file without newline translation.

        Raises:
            OSError: If the file cannot be read.
        """
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        """Replace a file's content with atomic semantics.

        Writes to a temporary file first, then renames to the final path.
        Readers see either the complete old file or the complete new file,
        never a partial write. The temporary file is removed on failure.

        Args:
            path: Target file path.
            content: Content to write (encoded as UTF-8).

        Raises:
            OSError: If the file cannot be written.
        """
        temp_path = path.with_name(path.name + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug(
            "file_written",
            component=COMPONENT_FS,
            path=str(path),
            bytes=len(content.encode("utf-8")),
        )

    def touch(self, path: Path) -> None:
        """Create an empty file unless it already exists."""
        path.touch(exist_ok=True)

    def unlink(self, path: Path) -> None:
        """Delete a file.

        Raises:
            OSError: If the file cannot be deleted.
        """
        path.unlink()
        logger.debug("file_deleted", component=COMPONENT_FS, path=str(path))
