"""
Per-entry locking for the artifact cache.

The artifact cache serializes writes to a single `<tool>-<version>` entry
with a file lock so two processes never extract into the same directory at
once. The install decision engine itself takes no locks.

Usage:
    from toolfetch.core.locking import LockManager

    lock_manager = LockManager(cache_dir / "lock")
    with lock_manager.entry_lock("wasm-pack-0.9.1"):
        # Download and extract into the entry directory
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from toolfetch.core.exceptions import CacheLockTimeout

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages lock files for artifact cache entries.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        self.lock_dir = Path(lock_dir)

    def lock_path(self, entry_name: str) -> Path:
        """Lock file path for a cache entry."""
        safe_name = entry_name.replace("/", "-").replace("\\", "-").replace(":", "-")
        return self.lock_dir / f"{safe_name}.lock"

    @contextmanager
    def entry_lock(self, entry_name: str, timeout: int = 300):
        """
        Acquire the lock for a cache entry.

        Args:
            entry_name: Cache entry name (e.g., 'wasm-pack-0.9.1')
            timeout: Maximum wait time in seconds (default: 300 for long downloads)

        Yields:
            None

        Raises:
            CacheLockTimeout: If lock can't be acquired within timeout
        """
        self.lock_dir.mkdir(parents=True, exist_ok=True)
        lock_path = self.lock_path(entry_name)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired cache lock: {lock_path}")
                yield
                logger.debug(f"Released cache lock: {lock_path}")
        except Timeout as e:
            raise CacheLockTimeout(
                f"Could not acquire cache lock for {entry_name} after {timeout}s. "
                "Another process may be installing this tool."
            ) from e


__all__ = ["LockManager"]
