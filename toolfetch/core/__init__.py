"""
Core functionality for toolfetch.

This package contains the foundational modules that other components depend on.
"""

from .directory import (
    CACHE_ENV_VAR,
    get_cache_dir,
    get_default_cache_dir,
)

from .platform import (
    TargetTriple,
    HostInfo,
    detect_host,
    resolve_target,
    get_supported_targets,
    clear_platform_cache,
)

from .version import Version, coerce_version

from .exceptions import (
    ToolfetchError,
    ConfigError,
    InvalidVersionError,
    DirectoryError,
    CacheError,
    CacheReadError,
    CacheLockTimeout,
    BinaryNotFoundError,
    DownloadError,
    FilesystemError,
    ArchiveExtractionError,
    InsecureArchiveError,
    InstallError,
    UnsupportedPlatformError,
    ToolInstallError,
    ToolNotInstalledError,
)

__all__ = [
    "CACHE_ENV_VAR",
    "get_cache_dir",
    "get_default_cache_dir",
    "TargetTriple",
    "HostInfo",
    "detect_host",
    "resolve_target",
    "get_supported_targets",
    "clear_platform_cache",
    "Version",
    "coerce_version",
    "ToolfetchError",
    "ConfigError",
    "InvalidVersionError",
    "DirectoryError",
    "CacheError",
    "CacheReadError",
    "CacheLockTimeout",
    "BinaryNotFoundError",
    "DownloadError",
    "FilesystemError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "InstallError",
    "UnsupportedPlatformError",
    "ToolInstallError",
    "ToolNotInstalledError",
]
