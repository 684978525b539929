"""
Tool installation orchestration.

The Installer turns "I need tool X at version Y" into a path on disk:

1. Ask the VersionResolver whether a compatible copy is already cached
2. If not, build the download URL for the host platform
3. Fetch it through the artifact cache
4. Return the resulting Download

Example:
    >>> from toolfetch.config.settings import load_settings
    >>> installer = Installer(load_settings())
    >>> wasm_pack = installer.install_wasm_pack()
    >>> print(f"wasm-pack at {wasm_pack}")
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Union

from toolfetch.cache.artifact_cache import ArtifactCache, Download
from toolfetch.core.download import DownloadProgress
from toolfetch.core.exceptions import (
    ToolfetchError,
    ToolInstallError,
    ToolNotInstalledError,
    UnsupportedPlatformError,
)
from toolfetch.core.output import DOWN, safe_print
from toolfetch.core.platform import TargetTriple
from toolfetch.core.version import Version, coerce_version
from toolfetch.install.dependencies import CARGO_GENERATE, WASM_PACK
from toolfetch.install.inspector import CacheInspector
from toolfetch.install.resolver import InstalledAt, NeedsInstall, VersionResolver
from toolfetch.install.urls import prebuilt_url

if TYPE_CHECKING:
    from toolfetch.config.settings import Settings

logger = logging.getLogger(__name__)


class Installer:
    """
    Installs prebuilt tools into the artifact cache on demand.

    Attributes:
        settings: Settings the installer was built from
        cache: Artifact cache performing downloads
        resolver: Install-vs-reuse decision maker
        target: Target triple override (None resolves the host)
    """

    def __init__(
        self,
        settings: "Settings",
        cache: Optional[ArtifactCache] = None,
        inspector: Optional[CacheInspector] = None,
        target: Optional[TargetTriple] = None,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ):
        """
        Args:
            settings: Loaded Settings
            cache: Artifact cache (default: built from settings)
            inspector: Cache inspector (default: one over cache.destination)
            target: Target triple override (None resolves the host)
            progress_callback: Download progress callback for the default cache
        """
        self.settings = settings
        self.cache = cache or ArtifactCache(
            settings.cache_dir,
            install_permitted=settings.install_permitted,
            progress_callback=progress_callback,
        )
        self.resolver = VersionResolver(
            inspector or CacheInspector(self.cache.destination)
        )
        self.target = target

    def install(
        self,
        tool_name: str,
        owner: str,
        is_binary: bool,
        version: Union[str, Version],
    ) -> Download:
        """
        Make sure a compatible version of a tool is present.

        Args:
            tool_name: Tool name (e.g., 'wasm-pack')
            owner: Publisher of the tool (e.g., 'rustwasm')
            is_binary: Whether the archive holds an executable named tool_name
            version: Requested version

        Returns:
            Download for the installed or reused entry

        Raises:
            InvalidVersionError: If version is a string that does not parse
            UnsupportedPlatformError: If no prebuilt archive exists for the host
            ToolNotInstalledError: If the cache does not permit installs
            ToolInstallError: If fetching or unpacking the archive fails
        """
        decision = self.resolver.resolve(tool_name, coerce_version(version))

        if isinstance(decision, NeedsInstall):
            safe_print(f"{DOWN}  Installing {tool_name} v{decision.version}...")
            binaries = [tool_name] if is_binary else []
            download = self._download_prebuilt(
                tool_name, owner, str(decision.version), binaries
            )
        elif isinstance(decision, InstalledAt):
            download = decision.download
        else:
            raise TypeError(f"Unexpected install decision: {decision!r}")

        logger.debug(f"tool {tool_name} located at {download}")
        return download

    def install_cargo_generate(self) -> Path:
        """Install the pinned cargo-generate and return its binary."""
        return self._install_pinned(*CARGO_GENERATE)

    def install_wasm_pack(self) -> Path:
        """Install the pinned wasm-pack and return its binary."""
        return self._install_pinned(*WASM_PACK)

    def _install_pinned(self, tool_name: str, owner: str) -> Path:
        version = self.settings.pinned_version(tool_name)
        return self.install(tool_name, owner, True, version).binary(tool_name)

    def _download_prebuilt(
        self, tool_name: str, owner: str, version: str, binaries: list
    ) -> Download:
        url = prebuilt_url(
            tool_name, owner, version, self.target, self.settings.base_url
        )
        if url is None:
            raise UnsupportedPlatformError(tool_name)

        logger.info(f"prebuilt artifact {url}")

        try:
            if binaries:
                download = self.cache.download_version(
                    True, tool_name, binaries, url, version
                )
            else:
                download = self.cache.download_artifact_version(tool_name, url, version)
        except (ToolfetchError, OSError) as e:
            raise ToolInstallError(tool_name, e) from e

        if download is None:
            raise ToolNotInstalledError(tool_name)
        return download


__all__ = ["Installer"]
