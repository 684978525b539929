"""
Cache directory location for toolfetch.

Directory Structure:
    Cache root (~/.toolfetch/ or %USERPROFILE%\\.toolfetch\\):
        - <tool>-<version>/ : Extracted tool archives, one per installed version
        - lock/             : Lock files guarding in-progress installs

The root can be moved with the TOOLFETCH_CACHE environment variable.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from toolfetch.core.exceptions import DirectoryError

CACHE_ENV_VAR = "TOOLFETCH_CACHE"
CACHE_DIR_NAME = ".toolfetch"


def get_default_cache_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Get the platform-specific default cache directory path.

    Returns:
        Path: The default cache directory path.
            - Windows: %USERPROFILE%\\.toolfetch
            - Linux/macOS: ~/.toolfetch/

    Raises:
        DirectoryError: On Windows when USERPROFILE is not set
    """
    environ = os.environ if environ is None else environ

    if os.name == "nt":  # Windows
        user_profile = environ.get("USERPROFILE")
        if not user_profile:
            raise DirectoryError(
                "USERPROFILE environment variable is not set. "
                "Cannot determine cache directory."
            )
        return Path(user_profile) / CACHE_DIR_NAME
    else:  # Linux/macOS
        return Path.home() / CACHE_DIR_NAME


def get_cache_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the cache root, honoring the TOOLFETCH_CACHE override.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Path: Cache root directory. It may not exist yet.

    Example:
        >>> get_cache_dir({"TOOLFETCH_CACHE": "/tmp/tools"})
        PosixPath('/tmp/tools')
    """
    environ = os.environ if environ is None else environ

    override = environ.get(CACHE_ENV_VAR)
    if override:
        return Path(override).expanduser()

    return get_default_cache_dir(environ)


__all__ = [
    "CACHE_ENV_VAR",
    "get_default_cache_dir",
    "get_cache_dir",
]
