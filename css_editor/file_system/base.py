"""Base file system interface

Defines the abstract interface the generation pipeline uses to touch disk.
Locations are URIs such as ``public://css_editor/basic.css``; plain paths
are accepted too.
"""

from abc import ABC, abstractmethod
from enum import Enum, IntFlag
from pathlib import Path
from typing import Optional, Union


class DirectoryOptions(IntFlag):
    """Flags for prepare_directory()"""

    NONE = 0
    CREATE_DIRECTORY = 1
    MODIFY_PERMISSIONS = 2


class FileExists(str, Enum):
    """Policy applied by save_data() when the destination already exists."""

    REPLACE = "replace"
    RENAME = "rename"
    ERROR = "error"


class FileSystemBase(ABC):
    """Abstract base class for file system implementations"""

    @abstractmethod
    def realpath(self, uri: str) -> Path:
        """
        Resolve a URI to a local path

        Raises:
            InvalidStreamWrapperError: If the URI scheme is not registered
            FileSystemError: If the URI resolves outside its scheme root
        """
        pass

    @abstractmethod
    def prepare_directory(
        self, uri: str, options: DirectoryOptions = DirectoryOptions.NONE
    ) -> bool:
        """
        Check that a directory exists and is writable, optionally fixing it

        Args:
            uri: Directory location
            options: CREATE_DIRECTORY to create it when missing,
                MODIFY_PERMISSIONS to chmod it when created or not writable

        Returns:
            True if the directory exists and is writable. Never raises.
        """
        pass

    @abstractmethod
    def save_data(
        self,
        data: Union[str, bytes],
        destination: str,
        replace: FileExists = FileExists.RENAME,
    ) -> str:
        """
        Write data to a file

        Args:
            data: Content to write (str is encoded as UTF-8)
            destination: Target file location
            replace: Policy when the destination exists

        Returns:
            Location actually written (differs from destination under RENAME)

        Raises:
            FileWriteError: If the data cannot be written
            FileExistsConflictError: If the destination exists and replace is ERROR
        """
        pass

    @abstractmethod
    def chmod(self, uri: str, mode: Optional[int] = None) -> bool:
        """
        Apply permissions to a file or directory

        Args:
            uri: Target location
            mode: Octal mode. If None, the configured default for files or
                directories is used.

        Returns:
            True once permissions are applied

        Raises:
            PermissionChangeError: If permissions cannot be applied
        """
        pass
