"""
Download URL construction for prebuilt tool archives.

URL shapes:
    general:  {base}/get-binary/{owner}/{tool}/v{version}/{target}.tar.gz
    override: {base}/get-override/{owner}/{tool}/v{version}/{target}.tar.gz
    legacy:   {base}/get-wranglerjs-binary/{tool}/v{version}.tar.gz

The override endpoint serves aarch64 macOS, which has no native prebuilt
binaries of its own.
"""

import logging
from typing import Optional, Union

from toolfetch.core.output import safe_print
from toolfetch.core.platform import TargetTriple, resolve_target
from toolfetch.core.version import Version

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://workers.cloudflare.com"
LEGACY_TOOL_NAME = "wranglerjs"

OVERRIDE_TARGETS = frozenset({TargetTriple.MACOS_AARCH64})


def legacy_url(
    tool_name: str, version: Union[str, Version], base_url: str = DEFAULT_BASE_URL
) -> str:
    """URL for the legacy tool, keyed only by tool name and version."""
    return f"{base_url.rstrip('/')}/get-wranglerjs-binary/{tool_name}/v{version}.tar.gz"


def build_url(
    tool_name: str,
    owner: str,
    version: Union[str, Version],
    target: Union[str, TargetTriple],
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """
    Build the download URL for a tool archive.

    Args:
        tool_name: Tool name (e.g., 'wasm-pack')
        owner: Publisher of the tool (e.g., 'rustwasm')
        version: Tool version
        target: Target triple of the archive
        base_url: Scheme and host of the binary hosting service

    Returns:
        Fully-qualified archive URL

    Example:
        >>> build_url("wasm-pack", "rustwasm", "0.9.1", "x86_64-apple-darwin")
        'https://workers.cloudflare.com/get-binary/rustwasm/wasm-pack/v0.9.1/x86_64-apple-darwin.tar.gz'
    """
    if tool_name == LEGACY_TOOL_NAME:
        return legacy_url(tool_name, version, base_url)

    target = TargetTriple(str(target))
    endpoint = "get-override" if target in OVERRIDE_TARGETS else "get-binary"

    url = (
        f"{base_url.rstrip('/')}/{endpoint}/{owner}/{tool_name}"
        f"/v{version}/{target.value}.tar.gz"
    )
    if endpoint == "get-override":
        safe_print(f"sent to override URL: {url}")
    return url


def prebuilt_url(
    tool_name: str,
    owner: str,
    version: Union[str, Version],
    target: Optional[TargetTriple] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> Optional[str]:
    """
    Build the download URL for the host platform.

    Args:
        tool_name: Tool name
        owner: Publisher of the tool
        version: Tool version
        target: Target triple override. Resolved from the host if None.
        base_url: Scheme and host of the binary hosting service

    Returns:
        Archive URL, or None when no prebuilt binaries exist for the platform
    """
    if tool_name == LEGACY_TOOL_NAME:
        return legacy_url(tool_name, version, base_url)

    if target is None:
        target = resolve_target()
    if target is None:
        logger.debug(f"No target triple for this host, cannot fetch {tool_name}")
        return None

    return build_url(tool_name, owner, version, target, base_url)


__all__ = [
    "DEFAULT_BASE_URL",
    "LEGACY_TOOL_NAME",
    "build_url",
    "legacy_url",
    "prebuilt_url",
]
