"""
File system utilities for the artifact cache.

This module provides the on-disk operations the cache needs:
- Archive extraction (tar.gz, zip) with directory traversal checks
- Safe directory removal restricted to a known prefix
- Marking extracted binaries executable
- Temporary directories created next to their final destination
"""

import os
import shutil
import stat
import tarfile
import tempfile
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from toolfetch.core.exceptions import (
    ArchiveExtractionError,
    FilesystemError,
    InsecureArchiveError,
)

IS_WINDOWS = os.name == "nt"


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to (under) parent directory.

    Example:
        >>> is_relative_to(Path("/home/user/.toolfetch/x"), Path("/home/user"))
        True
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


# ============================================================================
# Archive Extraction
# ============================================================================


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_archive(
    archive_path: Union[str, Path], destination: Union[str, Path]
) -> None:
    """
    Extract an archive to a destination directory.

    Supported formats:
    - .tar.gz, .tgz
    - .zip

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to

    Raises:
        ArchiveExtractionError: If the format is unknown or extraction fails
        InsecureArchiveError: If archive contains malicious paths
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)
    archive_name = archive_path.name.lower()

    try:
        if archive_name.endswith((".tar.gz", ".tgz")):
            _extract_tar_gz(archive_path, destination)
        elif archive_name.endswith(".zip"):
            _extract_zip(archive_path, destination)
        else:
            raise ArchiveExtractionError(
                f"Unsupported archive format: {archive_path.name}. "
                "Supported: .tar.gz, .tgz, .zip"
            )
    except ArchiveExtractionError:
        raise
    except (OSError, tarfile.TarError, zipfile.BadZipFile) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e


def _extract_zip(archive_path: Path, destination: Path) -> None:
    """Extract a ZIP archive."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        members = zf.namelist()

        for member in members:
            _validate_archive_path(member, destination)

        zf.extractall(destination)


def _validate_link_target(member: tarfile.TarInfo, destination: Path) -> None:
    """
    Validate that a link member points inside the destination.

    Symlink targets are relative to the link's own directory, hard link
    targets to the archive root.

    Raises:
        InsecureArchiveError: If the link target escapes the destination
    """
    if member.issym():
        target = Path(member.name).parent / member.linkname
    else:
        target = Path(member.linkname)

    resolved = (destination / target).resolve()
    if not is_relative_to(resolved, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive link '{member.name}' -> '{member.linkname}' points outside "
            "the extraction directory. Extraction has been blocked."
        )


def _extract_tar_gz(archive_path: Path, destination: Path) -> None:
    """Extract a .tar.gz archive."""
    with tarfile.open(archive_path, "r:gz") as tar:
        for member in tar.getmembers():
            _validate_archive_path(member.name, destination)
            if member.issym() or member.islnk():
                _validate_link_target(member, destination)

        # Extraction filters exist on 3.12+ and on patched 3.9-3.11 releases
        if hasattr(tarfile, "data_filter"):
            tar.extractall(destination, filter="data")
        else:
            tar.extractall(destination)


def normalize_root_directory(extract_dir: Path) -> Path:
    """
    Return the real root of an extracted archive.

    Archives wrapping their content in a single top-level folder are
    unwrapped; otherwise the extraction directory itself is the root.
    """
    items = list(extract_dir.iterdir())

    if len(items) == 1 and items[0].is_dir():
        return items[0]

    return extract_dir


# ============================================================================
# Safe File Operations
# ============================================================================


def make_executable(path: Path) -> None:
    """Add execute permission bits on POSIX systems."""
    if IS_WINDOWS:
        return

    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Safely remove a directory tree with safeguards.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Raises:
        ValueError: If path is not under require_prefix
        FilesystemError: If deletion fails

    Example:
        >>> safe_rmtree('/tmp/build', require_prefix='/tmp')
        >>> safe_rmtree('/usr/bin', require_prefix='/home')  # ValueError
    """
    path = Path(path).resolve()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).resolve()
        if not is_relative_to(path, require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return

    if not path.is_dir():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        if IS_WINDOWS:

            def handle_remove_readonly(func, path, exc):
                """Error handler for Windows read-only files."""
                if not os.access(path, os.W_OK):
                    os.chmod(path, 0o777)
                    func(path)
                else:
                    raise

            shutil.rmtree(path, onerror=handle_remove_readonly)
        else:
            shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}") from e


@contextmanager
def temporary_directory(parent: Path, prefix: str = ".toolfetch_"):
    """
    Context manager for a temporary directory inside parent.

    Keeping the directory on the same filesystem as its final destination
    lets callers move results into place with a rename.

    Yields:
        Path to temporary directory
    """
    parent.mkdir(parents=True, exist_ok=True)
    temp_dir = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))

    try:
        yield temp_dir
    finally:
        if temp_dir.exists():
            safe_rmtree(temp_dir, require_prefix=parent)


__all__ = [
    "is_relative_to",
    "extract_archive",
    "normalize_root_directory",
    "make_executable",
    "safe_rmtree",
    "temporary_directory",
]
