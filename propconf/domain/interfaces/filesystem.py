import abc
from typing import BinaryIO

from propconf.domain.models.common import FilePath


class FileSystem(abc.ABC):
    """Interface for file system operations."""

    @abc.abstractmethod
    def open_binary(self, path: FilePath) -> BinaryIO:
        """Opens a file for reading raw bytes.

        Args:
            path: The path to the file.

        Returns:
            A readable binary stream. The caller closes it.

        Raises:
            FileNotFoundError: If the file does not exist.
            PermissionError: If the user lacks permission to read the file.
        """
        pass

    @abc.abstractmethod
    def file_exists(self, path: FilePath) -> bool:
        """Checks whether path points at an existing regular file."""
        pass
