"""Concrete implementation of the FileSystem interface for the local disk.

Uses `pathlib` for file operations. Reads are synchronous: a properties
load is a single blocking pass over the file.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

# Domain Layer Imports
from propconf.domain.interfaces.filesystem import FileSystem
from propconf.domain.models.common import FilePath

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """Implementation of FileSystem for the local disk."""

    def __init__(self, root: Optional[Path] = None):
        """Initializes the LocalFileSystem adapter.

        Args:
            root: Directory relative paths are resolved against; cwd when None.
        """
        self.root = root

    def _resolve(self, file_path: FilePath) -> Path:
        path = Path(file_path).expanduser()
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        return path

    def open_binary(self, file_path: FilePath) -> BinaryIO:
        """Opens a file for binary reading."""
        path = self._resolve(file_path)
        logger.debug(f"Opening file for reading: {path}")
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        try:
            return path.open("rb")
        except PermissionError as e:
            logger.error(f"Permission denied reading file: {path}")
            raise PermissionError(f"Permission denied: {file_path}") from e

    def file_exists(self, file_path: FilePath) -> bool:
        """Checks if a file exists."""
        exists = self._resolve(file_path).is_file()
        logger.debug(f"Checked existence for {file_path}: {exists}")
        return exists
