"""File system module

Provides the abstract file system interface and the local disk
implementation with ``public://`` / ``private://`` stream wrappers.
"""

from typing import Optional

from css_editor.file_system.base import DirectoryOptions, FileExists, FileSystemBase
from css_editor.file_system.local import LocalFileSystem

# Global file system instance
_file_system: Optional[FileSystemBase] = None


def get_file_system() -> FileSystemBase:
    """
    Get or create the global file system instance

    Returns:
        FileSystemBase implementation (LocalFileSystem mapped from css_editor.config)
    """
    global _file_system
    if _file_system is None:
        _file_system = LocalFileSystem()
    return _file_system


def set_file_system(file_system: Optional[FileSystemBase]) -> None:
    """
    Set a custom file system implementation or reset to None

    Args:
        file_system: Custom file system, or None to reset
    """
    global _file_system
    _file_system = file_system


def reset_file_system() -> None:
    """Reset the global file system instance (useful for testing)"""
    global _file_system
    _file_system = None


__all__ = [
    "DirectoryOptions",
    "FileExists",
    "FileSystemBase",
    "LocalFileSystem",
    "get_file_system",
    "set_file_system",
    "reset_file_system",
]
