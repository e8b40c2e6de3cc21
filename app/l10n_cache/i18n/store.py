"""Artifact storage on top of a filesystem collaborator.

FileSystem is the contract the cache needs from its host; LocalFileSystem
implements it on the local disk. ArtifactStore addresses artifacts next to
their catalogs and is the only component that touches either file.
"""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from l10n_cache.infrastructure.logging import get_module_logger

logger = get_module_logger()

PathLike = Union[str, Path]


class FileSystem(ABC):
    """Filesystem operations required by the artifact store."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Return True if a file exists at path."""

    @abstractmethod
    def read(self, path: PathLike) -> bytes:
        """Read a file.

        Raises:
            FileNotFoundError: If no file exists at path.
        """

    @abstractmethod
    def write(self, path: PathLike, data: bytes) -> bool:
        """Write a file, returning False on failure instead of raising."""

    @abstractmethod
    def delete(self, path: PathLike) -> bool:
        """Delete a file, returning True if it was removed."""

    @abstractmethod
    def modified_time(self, path: PathLike) -> int:
        """Get a file's modification time in whole epoch seconds.

        Raises:
            FileNotFoundError: If no file exists at path.
        """


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk.

    Writes go to a temporary file in the target directory which is then
    renamed over the destination, so readers never observe a partial file.
    """

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def write(self, path: PathLike, data: bytes) -> bool:
        target = Path(path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except OSError as e:
            logger.error("file_write_failed", path=str(target), error=str(e))
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        return True

    def delete(self, path: PathLike) -> bool:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("file_delete_failed", path=str(path), error=str(e))
            return False
        return True

    def modified_time(self, path: PathLike) -> int:
        return int(Path(path).stat().st_mtime)


class ArtifactStore:
    """Reads, writes and deletes derived artifacts.

    Attributes:
        filesystem: FileSystem collaborator used for all I/O.
        extension: Artifact extension swapped in for the catalog's.
    """

    def __init__(self, filesystem: FileSystem, extension: str = ".json"):
        self.filesystem = filesystem
        self.extension = extension

    def artifact_path(self, catalog_path: PathLike) -> Path:
        """Derive the artifact path from a catalog path.

        Args:
            catalog_path: Compiled catalog path (e.g., "/l10n/fr_FR.mo").

        Returns:
            Path with the catalog's extension replaced (e.g., "/l10n/fr_FR.json").
        """
        return Path(catalog_path).with_suffix(self.extension)

    def exists(self, artifact_path: PathLike) -> bool:
        return self.filesystem.exists(artifact_path)

    def read(self, artifact_path: PathLike) -> bytes:
        return self.filesystem.read(artifact_path)

    def write(self, artifact_path: PathLike, data: bytes) -> bool:
        written = self.filesystem.write(artifact_path, data)
        if written:
            logger.debug("artifact_written", artifact_path=str(artifact_path), size=len(data))
        return written

    def delete(self, artifact_path: PathLike) -> bool:
        deleted = self.filesystem.delete(artifact_path)
        logger.debug("artifact_deleted", artifact_path=str(artifact_path), deleted=deleted)
        return deleted

    def read_catalog(self, catalog_path: PathLike) -> bytes:
        return self.filesystem.read(catalog_path)

    def catalog_mtime(self, catalog_path: PathLike) -> int:
        """Catalog modification time in epoch seconds.

        Raises:
            FileNotFoundError: If the catalog does not exist.
        """
        return self.filesystem.modified_time(catalog_path)
