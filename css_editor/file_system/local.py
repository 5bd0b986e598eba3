"""Local disk file system with stream wrapper support

Maps ``scheme://target`` URIs onto directories on the local disk. The
``public`` and ``private`` schemes are registered by default from
css_editor.config.
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from css_editor.config import Config
from css_editor.exceptions import (
    FileExistsConflictError,
    FileSystemError,
    FileWriteError,
    InvalidStreamWrapperError,
    PermissionChangeError,
)
from css_editor.file_system.base import DirectoryOptions, FileExists, FileSystemBase
from css_editor.logger import Logger, session_logger

SCHEME_SEPARATOR = "://"
_SEPARATORS = re.compile("[/" + re.escape(os.sep) + (re.escape(os.altsep) if os.altsep else "") + "]")


class LocalFileSystem(FileSystemBase):
    """File system operating on local directories"""

    def __init__(
        self,
        schemes: Optional[Dict[str, str]] = None,
        logger: Optional[Logger] = None,
        file_mode: Optional[int] = None,
        directory_mode: Optional[int] = None,
    ):
        """
        Initialize local file system

        Args:
            schemes: Mapping of scheme name to root directory. If None, public://
                and private:// are mapped from css_editor.config
            logger: Logger instance
            file_mode: Default mode for files (Config.get_file_mode() if None)
            directory_mode: Default mode for directories (Config.get_directory_mode() if None)
        """
        if schemes is None:
            schemes = {
                "public": str(Config.get_public_dir()),
                "private": str(Config.get_private_dir()),
            }
        self.schemes: Dict[str, Path] = {name: Path(root) for name, root in schemes.items()}
        self.logger: Logger = logger or session_logger
        self.file_mode = file_mode if file_mode is not None else Config.get_file_mode()
        self.directory_mode = (
            directory_mode if directory_mode is not None else Config.get_directory_mode()
        )

    @staticmethod
    def split_uri(uri: str) -> Tuple[Optional[str], str]:
        """Split ``scheme://target`` into its parts; plain paths have no scheme"""
        if SCHEME_SEPARATOR in uri:
            scheme, target = uri.split(SCHEME_SEPARATOR, 1)
            return scheme, target
        return None, uri

    def realpath(self, uri: str) -> Path:
        scheme, target = self.split_uri(uri)
        if scheme is None:
            return Path(uri)
        if scheme not in self.schemes:
            raise InvalidStreamWrapperError(uri, sorted(self.schemes))

        try:
            root = self.schemes[scheme].resolve()
        except (OSError, RuntimeError) as e:
            raise FileSystemError(
                f"Cannot resolve the {scheme}:// root: {e}",
                code="PATH_UNRESOLVABLE",
                details={"uri": uri, "root": str(self.schemes[scheme])},
            )
        parts = [part for part in _SEPARATORS.split(target) if part]
        try:
            resolved = root.joinpath(*parts).resolve()
        except (OSError, RuntimeError) as e:
            # symlink loops raise RuntimeError before Python 3.13
            raise FileSystemError(
                f"Cannot resolve '{uri}': {e}",
                code="PATH_UNRESOLVABLE",
                details={"uri": uri, "root": str(root)},
            )
        if resolved != root and root not in resolved.parents:
            raise FileSystemError(
                f"'{uri}' resolves outside of the {scheme}:// root",
                code="PATH_OUTSIDE_ROOT",
                details={"uri": uri, "root": str(root)},
            )
        return resolved

    def prepare_directory(
        self, uri: str, options: DirectoryOptions = DirectoryOptions.NONE
    ) -> bool:
        try:
            path = self.realpath(uri)
        except FileSystemError as e:
            self.logger.error("Cannot resolve directory", uri=uri, error=str(e))
            return False

        if not path.is_dir():
            if not options & DirectoryOptions.CREATE_DIRECTORY:
                return False
            try:
                path.mkdir(parents=True, exist_ok=True)
                self.logger.info("Directory created", uri=uri, path=str(path))
            except OSError as e:
                self.logger.error("Failed to create directory", uri=uri, error=str(e))
                return False
            if options & DirectoryOptions.MODIFY_PERMISSIONS:
                try:
                    self.chmod(uri)
                except PermissionChangeError as e:
                    self.logger.warning("Created directory keeps default permissions", uri=uri, error=str(e))

        writable = os.access(path, os.W_OK)
        if not writable and options & DirectoryOptions.MODIFY_PERMISSIONS:
            try:
                self.chmod(uri)
                writable = os.access(path, os.W_OK)
            except PermissionChangeError as e:
                self.logger.error("Failed to make directory writable", uri=uri, error=str(e))

        if not writable:
            self.logger.warning("Directory is not writable", uri=uri, path=str(path))
        return path.is_dir() and writable

    def _rename_destination(self, destination: str, path: Path) -> Tuple[str, Path]:
        """Find a free ``name_N.ext`` sibling for an existing destination"""
        stem, suffix = path.stem, path.suffix
        prefix = destination[: len(destination) - len(path.name)]
        counter = 0
        while True:
            candidate_name = f"{stem}_{counter}{suffix}"
            candidate = path.with_name(candidate_name)
            if not candidate.exists():
                return prefix + candidate_name, candidate
            counter += 1

    def save_data(
        self,
        data: Union[str, bytes],
        destination: str,
        replace: FileExists = FileExists.RENAME,
    ) -> str:
        if isinstance(data, str):
            data = data.encode("utf-8")

        try:
            path = self.realpath(destination)
        except FileSystemError as e:
            raise FileWriteError(destination, e.message)

        final_uri, final_path = destination, path
        if path.is_dir():
            raise FileWriteError(destination, "destination is a directory")
        if path.exists():
            if replace is FileExists.ERROR:
                raise FileExistsConflictError(destination)
            if replace is FileExists.RENAME:
                final_uri, final_path = self._rename_destination(destination, path)

        directory = final_path.parent
        if not directory.is_dir():
            raise FileWriteError(destination, f"directory '{directory}' does not exist")

        self.logger.debug(
            "Saving data to file",
            destination=final_uri,
            size=len(data),
            replace=replace.value,
        )

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{final_path.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, final_path)
            tmp_name = None
        except OSError as e:
            self.logger.error("Failed to save data", destination=final_uri, error=str(e))
            raise FileWriteError(final_uri, str(e))
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self.logger.info("Data saved to file", destination=final_uri, path=str(final_path))
        return final_uri

    def chmod(self, uri: str, mode: Optional[int] = None) -> bool:
        try:
            path = self.realpath(uri)
        except FileSystemError as e:
            raise PermissionChangeError(uri, mode if mode is not None else self.file_mode, e.message)

        if mode is None:
            mode = self.directory_mode if path.is_dir() else self.file_mode

        try:
            os.chmod(path, mode)
        except OSError as e:
            self.logger.error("Failed to change permissions", uri=uri, mode=oct(mode), error=str(e))
            raise PermissionChangeError(uri, mode, str(e))

        self.logger.debug("Permissions changed", uri=uri, mode=oct(mode))
        return True
