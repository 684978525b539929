"""
Install-vs-reuse decision for a requested tool version.

An installed version is reused only when it shares the requested major
version and is not older than the request. Anything else installs exactly
the requested version.
"""

import logging
from dataclasses import dataclass
from typing import Union

from toolfetch.cache.artifact_cache import Download
from toolfetch.core.exceptions import CacheReadError
from toolfetch.core.version import Version
from toolfetch.install.inspector import CacheInspector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NeedsInstall:
    """The requested version must be downloaded."""

    version: Version


@dataclass(frozen=True)
class InstalledAt:
    """A compatible version is already present in the cache."""

    download: Download


InstallDecision = Union[NeedsInstall, InstalledAt]


def is_compatible(installed: Version, target: Version) -> bool:
    """
    Check whether an installed version satisfies a requested one.

    Example:
        >>> is_compatible(Version.parse("2.3.0"), Version.parse("2.1.0"))
        True
        >>> is_compatible(Version.parse("3.0.0"), Version.parse("2.1.0"))
        False
    """
    return installed.major == target.major and installed >= target


class VersionResolver:
    """Decides between reusing a cached tool and installing a fresh copy."""

    def __init__(self, inspector: CacheInspector):
        self.inspector = inspector

    def resolve(self, tool_name: str, target_version: Version) -> InstallDecision:
        """
        Decide whether target_version of tool_name must be installed.

        A cache that cannot be read counts as empty, so installation still
        goes ahead.

        Returns:
            InstalledAt with the reusable download, or NeedsInstall(target_version)
        """
        try:
            current = self.inspector.find_installed(tool_name, target_version)
        except CacheReadError as e:
            logger.debug(f"Treating {tool_name} as not installed: {e}")
            current = None

        if current is not None:
            installed_version, installed_location = current
            if is_compatible(installed_version, target_version):
                logger.debug(
                    f"{tool_name} {installed_version} satisfies {target_version}"
                )
                return InstalledAt(Download.at(installed_location))

        return NeedsInstall(target_version)


__all__ = [
    "NeedsInstall",
    "InstalledAt",
    "InstallDecision",
    "is_compatible",
    "VersionResolver",
]
