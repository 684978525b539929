"""
List command implementation.

Shows the tool versions present in the cache.
"""

import logging
from typing import Optional

from toolfetch.core.exceptions import CacheReadError
from toolfetch.core.version import Version
from toolfetch.install.inspector import CacheInspector

logger = logging.getLogger(__name__)


def run(args, settings) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments with optional `tool`
        settings: Loaded Settings

    Returns:
        Exit code (0 for success, 1 if the cache cannot be read)
    """
    cache_dir = settings.cache_dir
    if not cache_dir.exists():
        print(f"Cache is empty: {cache_dir}")
        return 0

    inspector = CacheInspector(cache_dir)

    try:
        if args.tool:
            entries = [
                (args.tool, version, path)
                for version, path in inspector.installed_versions(args.tool)
                if path.is_dir()
            ]
        else:
            entries = _all_entries(inspector)
    except CacheReadError as e:
        logger.error(str(e))
        return 1

    if not entries:
        print(f"No cached tools in {cache_dir}")
        return 0

    for tool_name, version, path in sorted(entries, key=lambda e: (e[0], e[1])):
        print(f"{tool_name} {version}  {path}")
    return 0


def _all_entries(inspector: CacheInspector) -> list:
    """Entries named `<tool>-<semver>`, split at the first valid version."""
    try:
        paths = list(inspector.destination.iterdir())
    except OSError as e:
        raise CacheReadError(inspector.destination, e) from e

    entries = []
    for path in paths:
        if not path.is_dir():
            continue
        split = _split_entry_name(path.name)
        if split is None:
            logger.debug(f"Skipping unrecognized cache entry: {path}")
            continue
        tool_name, version = split
        entries.append((tool_name, version, path))
    return entries


def _split_entry_name(name: str) -> Optional[tuple]:
    start = 0
    while True:
        index = name.find("-", start)
        if index < 0:
            return None
        # Tool names are never empty
        if index > 0:
            version = Version.try_parse(name[index + 1 :])
            if version is not None:
                return name[:index], version
        start = index + 1
