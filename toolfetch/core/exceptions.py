"""
Centralized exception hierarchy for toolfetch.

Failures that only lead to a redundant download are absorbed where they
occur. Everything defined here that reaches a caller means no usable
binary could be obtained.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ToolfetchError(Exception):
    """Base exception for all toolfetch errors."""

    pass


class ConfigError(ToolfetchError):
    """Configuration parsing or validation error."""

    pass


class InvalidVersionError(ToolfetchError):
    """Version string does not follow semantic versioning."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid semantic version: {version!r}")


class DirectoryError(ToolfetchError):
    """Cache directory location cannot be determined."""

    pass


# ============================================================================
# Cache Exceptions
# ============================================================================


class CacheError(ToolfetchError):
    """Base exception for artifact cache errors."""

    pass


class CacheReadError(CacheError):
    """Raised when the cache directory cannot be listed."""

    def __init__(self, destination, reason: Exception):
        self.destination = destination
        self.reason = reason
        super().__init__(f"Could not read cache directory {destination}: {reason}")


class CacheLockTimeout(CacheError):
    """Raised when a cache entry lock cannot be acquired within timeout."""

    pass


class BinaryNotFoundError(CacheError):
    """Raised when an expected binary is missing from an installed artifact."""

    def __init__(self, name: str, path):
        self.name = name
        self.path = path
        super().__init__(f"{name} binary does not exist at {path}")


# ============================================================================
# Network and Filesystem Exceptions
# ============================================================================


class DownloadError(ToolfetchError):
    """Exception raised when download fails."""

    pass


class FilesystemError(ToolfetchError):
    """Base exception for filesystem operations."""

    pass


class ArchiveExtractionError(FilesystemError):
    """Failed to extract an archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


# ============================================================================
# Installer Exceptions
# ============================================================================


class InstallError(ToolfetchError):
    """Base exception for tool installation errors."""

    pass


class UnsupportedPlatformError(InstallError):
    """No prebuilt binaries exist for the host platform."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(
            f"no prebuilt {tool_name} binaries are available for this platform"
        )


class ToolInstallError(InstallError):
    """Raised when the artifact cache fails to fetch a tool."""

    def __init__(self, tool_name: str, reason: Exception):
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"could not download `{tool_name}`\n{reason}")


class ToolNotInstalledError(InstallError):
    """Raised when the artifact cache declines to install a tool."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"{tool_name} is not installed!")
