"""
Cache inspection: find an installed copy of a tool in the artifact cache.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple

from toolfetch.core.exceptions import CacheReadError
from toolfetch.core.version import Version

logger = logging.getLogger(__name__)


class CacheInspector:
    """
    Read-only view of an artifact cache directory.

    Entries are named `<tool_name>-<version>`. Entries whose version suffix
    does not parse are invisible; they are never reported and never removed.

    Attributes:
        destination: Cache directory to enumerate (not recursive)
    """

    def __init__(self, destination: Path):
        self.destination = Path(destination)

    def installed_versions(self, tool_name: str) -> Iterator[Tuple[Version, Path]]:
        """
        Yield every parseable installed version of a tool.

        Raises:
            CacheReadError: If the cache directory cannot be listed
        """
        try:
            entries = sorted(self.destination.iterdir())
        except OSError as e:
            raise CacheReadError(self.destination, e) from e

        prefix = f"{tool_name}-"
        for entry in entries:
            filename = entry.name
            if not filename.startswith(tool_name):
                continue

            parts = filename.split(prefix)
            if len(parts) < 2:
                continue

            version = Version.try_parse(parts[1])
            if version is None:
                logger.debug(f"Ignoring cache entry with unparseable version: {entry}")
                continue

            yield version, entry

    def find_installed(
        self, tool_name: str, target_version: Version
    ) -> Optional[Tuple[Version, Path]]:
        """
        Find an installed entry whose version equals target_version.

        Args:
            tool_name: Tool name used as entry prefix
            target_version: Version to look for

        Returns:
            (version, path) of the first exact match, or None

        Raises:
            CacheReadError: If the cache directory cannot be listed
        """
        for version, path in self.installed_versions(tool_name):
            if version == target_version:
                return version, path

        return None


__all__ = ["CacheInspector"]
