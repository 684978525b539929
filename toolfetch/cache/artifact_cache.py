"""
On-disk artifact cache for prebuilt tool archives.

The cache owns its destination directory. Every installed tool version lives
in a flat `<tool>-<version>` entry below it. Entries are only ever created
here, by a completed download; nothing in toolfetch deletes them.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from toolfetch.core.download import DownloadProgress, download_file
from toolfetch.core.exceptions import BinaryNotFoundError
from toolfetch.core.filesystem import (
    IS_WINDOWS,
    extract_archive,
    make_executable,
    normalize_root_directory,
    temporary_directory,
)
from toolfetch.core.locking import LockManager

logger = logging.getLogger(__name__)


def binary_filename(name: str) -> str:
    """Platform file name of an executable."""
    return f"{name}.exe" if IS_WINDOWS else name


class Download:
    """
    Handle to an installed cache entry.

    Example:
        >>> download = Download.at(Path("~/.toolfetch/wasm-pack-0.9.1"))
        >>> download.binary("wasm-pack")
        PosixPath('~/.toolfetch/wasm-pack-0.9.1/wasm-pack')
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    @classmethod
    def at(cls, path: Path) -> "Download":
        return cls(path)

    def binary(self, name: str) -> Path:
        """
        Locate a binary inside this download.

        Raises:
            BinaryNotFoundError: If the binary does not exist
        """
        path = self.root / binary_filename(name)
        if not path.is_file():
            raise BinaryNotFoundError(name, path)
        return path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Download):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __repr__(self) -> str:
        return f"Download({str(self.root)!r})"


class ArtifactCache:
    """
    Downloads, extracts and keeps tool archives.

    Attributes:
        destination: Directory holding one entry per installed tool version
        install_permitted: When False, missing entries are never downloaded
    """

    def __init__(
        self,
        destination: Path,
        install_permitted: bool = True,
        timeout: int = 30,
        max_retries: int = 3,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ):
        self.destination = Path(destination)
        self.install_permitted = install_permitted
        self.timeout = timeout
        self.max_retries = max_retries
        self.progress_callback = progress_callback
        self.lock_manager = LockManager(self.destination / "lock")

    @classmethod
    def at(cls, path: Path, **kwargs) -> "ArtifactCache":
        return cls(path, **kwargs)

    def entry_path(self, name: str, version: str) -> Path:
        """Directory a tool version is installed into."""
        return self.destination / f"{name}-{version}"

    def download_version(
        self,
        expect_binaries: bool,
        name: str,
        binaries: Sequence[str],
        url: str,
        version: str,
    ) -> Optional[Download]:
        """
        Fetch and unpack a tool archive, verifying its binaries.

        Args:
            expect_binaries: Whether the archive must contain `binaries`
            name: Tool name, used as the entry prefix
            binaries: Executable names expected at the archive root
            url: Archive URL (.tar.gz or .zip)
            version: Version string, used as the entry suffix

        Returns:
            Download for the entry, or None if it is missing and installs
            are not permitted

        Raises:
            DownloadError: If the archive cannot be fetched
            ArchiveExtractionError: If the archive cannot be unpacked
            BinaryNotFoundError: If an expected binary is missing
            CacheLockTimeout: If another process holds the entry lock too long
        """
        entry = self.entry_path(name, version)
        if entry.exists():
            logger.debug(f"{name} {version} already present at {entry}")
            return Download.at(entry)

        if not self.install_permitted:
            logger.debug(f"Installs are not permitted, skipping {name} {version}")
            return None

        expected = list(binaries) if expect_binaries else []

        with self.lock_manager.entry_lock(entry.name):
            # Another process may have finished while we waited for the lock
            if entry.exists():
                return Download.at(entry)

            self._fetch_into(entry, url, expected)

        logger.info(f"Installed {name} {version} to {entry}")
        return Download.at(entry)

    def download_artifact_version(
        self, name: str, url: str, version: str
    ) -> Optional[Download]:
        """Fetch and unpack an archive without expecting any binaries."""
        return self.download_version(False, name, [], url, version)

    def _fetch_into(self, entry: Path, url: str, binaries: Sequence[str]) -> None:
        archive_name = url.rstrip("/").split("/")[-1]

        with temporary_directory(self.destination) as work_dir:
            archive_path = work_dir / archive_name
            download_file(
                url,
                archive_path,
                progress_callback=self.progress_callback,
                timeout=self.timeout,
                max_retries=self.max_retries,
            )

            extract_dir = work_dir / "extract"
            extract_archive(archive_path, extract_dir)
            root = normalize_root_directory(extract_dir)

            for binary in binaries:
                path = root / binary_filename(binary)
                if not path.is_file():
                    raise BinaryNotFoundError(binary, path)
                make_executable(path)

            # Same filesystem, so the entry appears atomically
            root.rename(entry)


__all__ = ["ArtifactCache", "Download", "binary_filename"]
